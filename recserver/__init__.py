"""
Course Recommendation API server

Usage: uvicorn recserver:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import CatalogCache, JsonCatalogStore, JsonLearnerStore, JsonLearningPathStore
from .state import AppState, get_state, reset_state

__all__ = [
    "app",
    "create_app",
    "AppState",
    "CatalogCache",
    "JsonCatalogStore",
    "JsonLearnerStore",
    "JsonLearningPathStore",
    "ServerConfig",
    "get_config",
    "get_state",
    "reload_config",
    "reset_state",
]
