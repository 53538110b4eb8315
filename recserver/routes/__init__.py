"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .catalog import router as catalog_router
from .learners import router as learners_router
from .paths import router as paths_router
from .root import router as root_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(learners_router, prefix="/api/learners", tags=["learners"])
    app.include_router(paths_router, prefix="/api/paths", tags=["paths"])
    app.include_router(catalog_router, prefix="/api/catalog", tags=["catalog"])
