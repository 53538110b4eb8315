"""
Course Recommendation API: FastAPI app factory.

Use: uvicorn recserver.app:app
Or:  from recserver import app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    ok, errors = config.validate()
    for error in errors:
        logger.warning("[startup] %s", error)
    if ok:
        try:
            state = get_state()
            count = await state.catalog_cache.refresh()
            logger.info("[startup] Catalog cached: %d courses", count)
        except Exception:
            logger.exception("[startup] ERROR during catalog load")
    logger.info("[startup] Course Recommendation API starting on %s:%s", config.host, config.port)
    yield


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    app = FastAPI(
        title="Course Recommendation API",
        description="Course recommendations, next steps and learning paths per learner",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    return app


app = create_app()
