"""
Catalog cache: holds the course list between requests.

Owned by AppState and handed to the engine as its CatalogProvider. The cache is
explicit: it loads on first use and is only replaced by refresh().
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .catalog_store import JsonCatalogStore
from .learning_path_store import JsonLearningPathStore

logger = logging.getLogger(__name__)


class CatalogCache:
    """Cached courses over a catalog store; lessons and paths pass through."""

    def __init__(self, store: JsonCatalogStore, paths: JsonLearningPathStore):
        self._store = store
        self._paths = paths
        self._courses: Optional[List[Dict]] = None
        self.loaded_at: Optional[datetime] = None

    @property
    def is_loaded(self) -> bool:
        return self._courses is not None

    async def get_all_courses(self) -> List[Dict]:
        if self._courses is None:
            self._courses = await self._store.get_all_courses()
            self.loaded_at = datetime.now(timezone.utc)
            logger.info("[catalog] CACHE_LOADED courses=%d", len(self._courses))
        return list(self._courses)

    async def refresh(self) -> int:
        """Re-read the catalog file and replace the cached courses. Returns the course count."""
        self._store.reload()
        self._courses = await self._store.get_all_courses()
        self.loaded_at = datetime.now(timezone.utc)
        logger.info("[catalog] CACHE_REFRESHED courses=%d", len(self._courses))
        return len(self._courses)

    async def get_lessons_for_course(self, course_id: str) -> List[Dict]:
        return await self._store.get_lessons_for_course(course_id)

    async def get_learning_paths(self) -> List[Dict]:
        return await self._paths.get_learning_paths()
