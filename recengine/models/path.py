"""
Learning path models: candidates read from the path catalog and their ranked form.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .course import Difficulty


class LearningPathCandidate(BaseModel):
    """A predefined (or learner-created) sequence of courses."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    description: str = ""
    courses: List[str] = Field(default_factory=list)
    # hours
    estimated_duration: float = 0
    difficulty: Difficulty = Difficulty.BEGINNER
    category: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    created_at: str = ""


class RankedPath(LearningPathCandidate):
    """A learning path annotated with the learner-specific score and completion ratio."""

    score: int
    completion_ratio: float
