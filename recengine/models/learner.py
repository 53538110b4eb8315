"""
Learner models: the per-call snapshot of learner state and the signals derived from it.

LearnerSnapshot is what the Learner State Reader produces for recommendation scoring.
EnrolledCourseState bundles one enrolled course with its progress and lessons for the
next-step aggregator. LearnerSignals is the Signal Extractor output.
"""

from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from .course import Course, CourseProgress, Lesson


class LearnerSnapshot(BaseModel):
    """Immutable learner state read once per call."""

    model_config = ConfigDict(frozen=True)

    learner_id: str
    enrolled_courses: List[Course] = Field(default_factory=list)
    completed_course_ids: Set[str] = Field(default_factory=set)
    total_time_spent_minutes: int = Field(default=0, ge=0)

    @property
    def enrolled_ids(self) -> Set[str]:
        return {c.id for c in self.enrolled_courses}


class EnrolledCourseState(BaseModel):
    """One enrolled course with its progress record (None when never started) and lessons."""

    course: Course
    progress: Optional[CourseProgress] = None
    lessons: List[Lesson] = Field(default_factory=list)

    @property
    def progress_percentage(self) -> float:
        return self.progress.progress_percentage if self.progress else 0.0

    @property
    def completed_lesson_ids(self) -> Set[str]:
        return set(self.progress.completed_lesson_ids) if self.progress else set()

    def lessons_in_order(self) -> List[Lesson]:
        return sorted(self.lessons, key=lambda lesson: lesson.order)


class LearnerStreak(BaseModel):
    current_streak_days: int = Field(default=0, ge=0)


class LearnerSignals(BaseModel):
    """Intermediate facts derived from a snapshot and the catalog."""

    completed_courses: List[Course] = Field(default_factory=list)
    completed_course_ids: Set[str] = Field(default_factory=set)
    # 0 means "no history"
    average_completed_difficulty: int = 0
    total_time_spent_minutes: int = 0
    enrolled_categories: Set[str] = Field(default_factory=set)
    completed_categories: Set[str] = Field(default_factory=set)
    completed_tags: Set[str] = Field(default_factory=set)
    catalog_ids: Set[str] = Field(default_factory=set)

    @property
    def has_history(self) -> bool:
        return bool(self.completed_courses)
