"""Pydantic request/response models for the API."""

from .learners import NextStepsResponse, PathsResponse, RecommendationsResponse
from .paths import CreateLearningPathRequest, LearningPathListResponse

__all__ = [
    "CreateLearningPathRequest",
    "LearningPathListResponse",
    "NextStepsResponse",
    "PathsResponse",
    "RecommendationsResponse",
]
