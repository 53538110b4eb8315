"""Catalog cache control."""

import json
import logging

from fastapi import APIRouter, HTTPException

from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/refresh")
async def refresh_catalog():
    """Re-read the catalog file into the cache used by the engine."""
    state = get_state()
    try:
        count = await state.catalog_cache.refresh()
    except (OSError, json.JSONDecodeError) as e:
        logger.exception("[catalog] REFRESH_FAILED path=%s", state.catalog_store.path)
        raise HTTPException(status_code=500, detail=f"Failed to reload catalog: {e}")
    return {
        "courses": count,
        "loaded_at": state.catalog_cache.loaded_at.isoformat(),
    }
