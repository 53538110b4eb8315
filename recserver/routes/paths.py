"""Learning path catalog: list and create."""

import logging

from fastapi import APIRouter, HTTPException

from ..models import CreateLearningPathRequest, LearningPathListResponse
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=LearningPathListResponse)
def list_learning_paths():
    """Stored paths first, then the built-in defaults."""
    state = get_state()
    return {"paths": state.path_store.list_paths()}


@router.post("", status_code=201)
def create_learning_path(request: CreateLearningPathRequest):
    """
    Create a learning path from catalog course ids.
    Unknown course ids are rejected; estimated_duration is summed from the catalog.
    """
    state = get_state()
    unknown = [c for c in request.courses if state.catalog_store.get_course(c) is None]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown course ids: {', '.join(unknown)}")
    try:
        path = state.path_store.create_learning_path(
            name=request.name,
            description=request.description,
            courses=request.courses,
            difficulty=request.difficulty,
            category=request.category,
            tags=request.tags,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError as e:
        logger.exception("[paths] CREATE_FAILED name=%s", request.name)
        raise HTTPException(status_code=500, detail=f"Failed to save learning path: {e}")
    return path.model_dump(mode="json")
