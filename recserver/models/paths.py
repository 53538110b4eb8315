"""Request/response models for the learning path catalog."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from recengine.models import Difficulty, LearningPathCandidate


class CreateLearningPathRequest(BaseModel):
    """Body for POST /api/paths."""

    name: str
    description: str = ""
    courses: List[str] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.BEGINNER
    category: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty")
        return v.strip()


class LearningPathListResponse(BaseModel):
    paths: List[LearningPathCandidate]
