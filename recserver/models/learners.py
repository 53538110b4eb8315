"""Response models for the per-learner endpoints."""

from typing import List

from pydantic import BaseModel

from recengine.models import NextStep, RankedPath, Recommendation


class RecommendationsResponse(BaseModel):
    learner_id: str
    recommendations: List[Recommendation]


class NextStepsResponse(BaseModel):
    learner_id: str
    next_steps: List[NextStep]


class PathsResponse(BaseModel):
    learner_id: str
    paths: List[RankedPath]
