"""
Course Recommendation & Next-Step Prioritization Engine

Single entry point for the engine package:
- models/: Course, LearnerSnapshot, Recommendation, NextStep, RecommendationConfig
- stages/: learner_state, signals, course_scoring, ranking, next_steps, learning_paths
- providers: collaborator Protocols and an in-memory implementation
- engine: RecommendationEngine facade and the pure recommend() pass
"""

from .engine import RecommendationEngine, recommend
from .errors import DataUnavailable, EngineError, InvalidArgument
from .models import (
    DEFAULT_CONFIG,
    Course,
    Difficulty,
    LearnerSnapshot,
    LearningPathCandidate,
    NextStep,
    NextStepType,
    RankedPath,
    Recommendation,
    RecommendationConfig,
    RecommendationType,
)
from .providers import CatalogProvider, InMemoryDataSource, LearnerDataProvider

__all__ = [
    "CatalogProvider",
    "Course",
    "DEFAULT_CONFIG",
    "DataUnavailable",
    "Difficulty",
    "EngineError",
    "InMemoryDataSource",
    "InvalidArgument",
    "LearnerDataProvider",
    "LearnerSnapshot",
    "LearningPathCandidate",
    "NextStep",
    "NextStepType",
    "RankedPath",
    "Recommendation",
    "RecommendationConfig",
    "RecommendationEngine",
    "RecommendationType",
    "recommend",
]
