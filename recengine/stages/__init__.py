"""Pipeline stages: state reader, signals, course scoring, ranking, next steps, learning paths."""

from .course_scoring import classify, prerequisites_satisfied, score_candidates, score_course
from .learner_state import LearnerStateReader
from .learning_paths import completion_ratio, rank_learning_paths, score_path
from .next_steps import build_next_steps, continue_priority
from .ranking import rank_recommendations
from .signals import extract_signals

__all__ = [
    "LearnerStateReader",
    "build_next_steps",
    "classify",
    "completion_ratio",
    "continue_priority",
    "extract_signals",
    "prerequisites_satisfied",
    "rank_learning_paths",
    "rank_recommendations",
    "score_candidates",
    "score_course",
    "score_path",
]
