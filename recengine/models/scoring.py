"""
Scoring models: scored candidates and the engine's output records.

Contains:
- ScoredCourse: a candidate course with its rule score, ordered reasons and type
- Recommendation: the public record produced by the ranker
- NextStep / NextStepKey: next-action records and their identity tuple
"""

from enum import Enum
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, Field

from .course import Course


class RecommendationType(str, Enum):
    SIMILAR = "similar"
    PREREQUISITE = "prerequisite"
    NEXT_STEP = "next_step"
    POPULAR = "popular"
    TRENDING = "trending"
    COMPLETION = "completion"


DEFAULT_REASON = "Recommended for you"


class ScoredCourse(BaseModel):
    """A candidate course with all its scoring outcomes."""

    course: Course
    score: int
    # most significant first
    reasons: List[str] = Field(default_factory=list)
    type: RecommendationType = RecommendationType.NEXT_STEP

    @property
    def reason(self) -> str:
        return self.reasons[0] if self.reasons else DEFAULT_REASON

    def to_recommendation(self) -> "Recommendation":
        return Recommendation(
            course=self.course,
            reason=self.reason,
            score=self.score,
            type=self.type,
        )


class Recommendation(BaseModel):
    """A course recommendation shown to the learner."""

    course: Course
    reason: str
    score: int
    type: RecommendationType


class NextStepType(str, Enum):
    CONTINUE_COURSE = "continue_course"
    START_COURSE = "start_course"
    COMPLETE_LESSON = "complete_lesson"
    TAKE_QUIZ = "take_quiz"


class NextStepKey(NamedTuple):
    """Identity of a next step; two steps with equal keys are duplicates."""

    course_id: Optional[str]
    lesson_id: Optional[str]
    type: NextStepType


class NextStep(BaseModel):
    """A suggested action; priority orders the queue and is never displayed."""

    course_id: Optional[str] = None
    lesson_id: Optional[str] = None
    type: NextStepType
    title: str
    description: str = ""
    priority: int

    @property
    def key(self) -> NextStepKey:
        return NextStepKey(self.course_id, self.lesson_id, self.type)
