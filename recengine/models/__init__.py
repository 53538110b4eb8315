"""Data models for the recommendation engine."""

from .config import DEFAULT_CONFIG, RecommendationConfig, resolve_config
from .course import (
    Course,
    CourseProgress,
    CourseRating,
    Difficulty,
    Lesson,
    ensure_courses,
    ensure_lessons,
    ensure_progress,
)
from .learner import EnrolledCourseState, LearnerSignals, LearnerSnapshot, LearnerStreak
from .path import LearningPathCandidate, RankedPath
from .scoring import (
    DEFAULT_REASON,
    NextStep,
    NextStepKey,
    NextStepType,
    Recommendation,
    RecommendationType,
    ScoredCourse,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_REASON",
    "Course",
    "CourseProgress",
    "CourseRating",
    "Difficulty",
    "EnrolledCourseState",
    "LearnerSignals",
    "LearnerSnapshot",
    "LearnerStreak",
    "LearningPathCandidate",
    "Lesson",
    "NextStep",
    "NextStepKey",
    "NextStepType",
    "RankedPath",
    "Recommendation",
    "RecommendationConfig",
    "RecommendationType",
    "ScoredCourse",
    "ensure_courses",
    "ensure_lessons",
    "ensure_progress",
    "resolve_config",
]
