"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    cache = state.catalog_cache
    return {
        "name": "Course Recommendation API",
        "version": "1.0.0",
        "status": "loaded" if cache.is_loaded else "not_loaded",
        "endpoints": {
            "learners": [
                "/api/learners/{learner_id}/recommendations",
                "/api/learners/{learner_id}/next-steps",
                "/api/learners/{learner_id}/paths",
            ],
            "paths": ["/api/paths"],
            "catalog": ["/api/catalog/refresh"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    cache = state.catalog_cache
    return {
        "status": "healthy",
        "catalog": {
            "loaded": cache.is_loaded,
            "loaded_at": cache.loaded_at.isoformat() if cache.loaded_at else None,
            "courses": len(state.catalog_store.list_courses()),
        },
    }
