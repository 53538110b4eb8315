"""Per-learner recommendations, next steps and learning paths."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from recengine import InvalidArgument

from ..models import NextStepsResponse, PathsResponse, RecommendationsResponse
from ..state import AppState, get_state

router = APIRouter()


def _require_learner(state: AppState, learner_id: str) -> None:
    if not state.learner_store.has_learner(learner_id):
        raise HTTPException(status_code=404, detail=f"Learner not found: {learner_id}")


@router.get("/{learner_id}/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(learner_id: str, limit: Optional[int] = Query(None)):
    """Ranked course recommendations; limit defaults to the engine config (10)."""
    state = get_state()
    _require_learner(state, learner_id)
    try:
        recommendations = await state.engine.get_recommendations(learner_id, limit)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RecommendationsResponse(learner_id=learner_id, recommendations=recommendations)


@router.get("/{learner_id}/next-steps", response_model=NextStepsResponse)
async def get_next_steps(learner_id: str):
    state = get_state()
    _require_learner(state, learner_id)
    steps = await state.engine.get_next_steps(learner_id)
    return NextStepsResponse(learner_id=learner_id, next_steps=steps)


@router.get("/{learner_id}/paths", response_model=PathsResponse)
async def get_recommended_paths(learner_id: str):
    state = get_state()
    _require_learner(state, learner_id)
    paths = await state.engine.get_recommended_paths(learner_id)
    return PathsResponse(learner_id=learner_id, paths=paths)
