"""
Course model: typed representation of catalog courses, lessons and progress.

Used by the signal extractor, course scorer and next-step aggregator instead of raw dicts.
Built from collaborator dicts via Course.model_validate(d) or ensure_courses().
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    """Course difficulty; level gives the ordinal used for difficulty progression."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def level(self) -> int:
        return DIFFICULTY_LEVELS[self]


DIFFICULTY_LEVELS: Dict[Difficulty, int] = {
    Difficulty.BEGINNER: 1,
    Difficulty.INTERMEDIATE: 2,
    Difficulty.ADVANCED: 3,
}


class CourseRating(BaseModel):
    average: float = Field(default=0.0, ge=0.0, le=5.0)
    count: int = Field(default=0, ge=0)


class Course(BaseModel):
    """
    Catalog course as consumed by the engine.

    category and tags keep their catalog order: the first shared category is
    what the "similar category" reason displays. duration is in hours.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    title: str = ""
    category: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.BEGINNER
    prerequisites: Optional[List[str]] = None
    enrolled_count: int = Field(default=0, ge=0)
    rating: CourseRating = Field(default_factory=CourseRating)
    duration: float = Field(default=1.0, gt=0)

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)


class Lesson(BaseModel):
    """A lesson inside a course; quiz_id is set when a quiz is attached."""

    model_config = ConfigDict(extra="allow")

    id: str
    course_id: str = ""
    title: str = ""
    order: int = 0
    quiz_id: Optional[str] = None


class CourseProgress(BaseModel):
    """Per-course progress record for one learner."""

    model_config = ConfigDict(extra="allow")

    completed: bool = False
    progress_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    completed_lesson_ids: List[str] = Field(default_factory=list)
    # minutes
    time_spent: int = Field(default=0, ge=0)

    @property
    def is_finished(self) -> bool:
        return self.completed or self.progress_percentage >= 100


def ensure_courses(items: List[Union[Dict[str, Any], "Course"]]) -> List["Course"]:
    """Convert list of dicts or Courses to list of Course models."""
    return [
        Course.model_validate(c) if isinstance(c, dict) else c
        for c in items
    ]


def ensure_lessons(items: List[Union[Dict[str, Any], "Lesson"]]) -> List["Lesson"]:
    """Convert list of dicts or Lessons to list of Lesson models."""
    return [
        Lesson.model_validate(lesson) if isinstance(lesson, dict) else lesson
        for lesson in items
    ]


def ensure_progress(
    record: Union[Dict[str, Any], "CourseProgress", None],
) -> Optional["CourseProgress"]:
    """Convert a progress dict to CourseProgress; None stays None (no record)."""
    if record is None or isinstance(record, CourseProgress):
        return record
    return CourseProgress.model_validate(record)
