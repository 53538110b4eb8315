"""Application state: JSON stores, catalog cache and the recommendation engine."""

import logging
from typing import Optional

from recengine import RecommendationEngine

from .config import ServerConfig, get_config
from .services import CatalogCache, JsonCatalogStore, JsonLearnerStore, JsonLearningPathStore

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig):
        self.config = config

        # Collaborator stores
        self.catalog_store = JsonCatalogStore(config.catalog_json_path)
        self.learner_store = JsonLearnerStore(config.learners_json_path, self.catalog_store)
        self.path_store = JsonLearningPathStore(config.learning_paths_json_path, self.catalog_store)
        self.catalog_cache = CatalogCache(self.catalog_store, self.path_store)

        self.engine_config = config.load_engine_config()
        self.engine = RecommendationEngine(self.catalog_cache, self.learner_store, self.engine_config)
        logger.info(
            "[startup] Engine ready: catalog=%s learners=%s paths=%s",
            config.catalog_json_path, config.learners_json_path, config.learning_paths_json_path,
        )


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def reset_state() -> None:
    """Drop the process-wide state; the next get_state() rebuilds it from config."""
    global _state
    _state = None
