"""JSON-file backed collaborator stores and the catalog cache."""

from .catalog_cache import CatalogCache
from .catalog_store import JsonCatalogStore
from .learner_store import JsonLearnerStore
from .learning_path_store import JsonLearningPathStore, default_learning_paths

__all__ = [
    "CatalogCache",
    "JsonCatalogStore",
    "JsonLearnerStore",
    "JsonLearningPathStore",
    "default_learning_paths",
]
