"""
Learner store backed by a JSON file (e.g. data/learners.json).

Layout:
    {"learners": {
        "<learner_id>": {
            "enrolled_course_ids": ["course-id", ...],
            "progress": {"course-id": {"completed": false, "progress_percentage": 40,
                                       "completed_lesson_ids": [...], "time_spent": 90}},
            "streak": {"current_streak_days": 3, "last_activity_date": "2026-10-17"},
            "total_time_spent": 240
        }
    }}
A list of learner dicts carrying "learner_id" (or "id") is accepted as well.
"""

import json
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .catalog_store import JsonCatalogStore

logger = logging.getLogger(__name__)


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.warning("[learners] bad last_activity_date=%r", value)
        return None


class JsonLearnerStore:
    """
    Read-only learner state. Enrolled courses are resolved against the catalog
    store and returned in catalog order; ids missing from the catalog are dropped.
    """

    def __init__(
        self,
        path: Union[Path, str],
        catalog: JsonCatalogStore,
        today: Optional[Callable[[], date]] = None,
    ):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Learners JSON not found: {self._path}")
        self._catalog = catalog
        self._today = today or date.today
        self._learners: Dict[str, Dict] = {}
        self._load()

    def _load(self) -> None:
        with open(self._path) as f:
            data = json.load(f)
        learners = data.get("learners", data) if isinstance(data, dict) else data
        if isinstance(learners, list):
            for record in learners:
                learner_id = record.get("learner_id") or record.get("id")
                if learner_id:
                    self._learners[learner_id] = record
        elif isinstance(learners, dict):
            self._learners = dict(learners)

    def has_learner(self, learner_id: str) -> bool:
        return learner_id in self._learners

    def _record(self, learner_id: str) -> Dict:
        return self._learners.get(learner_id) or {}

    async def get_enrolled_courses(self, learner_id: str) -> List[Dict]:
        enrolled = set(self._record(learner_id).get("enrolled_course_ids", []))
        return [c for c in self._catalog.list_courses() if c.get("id") in enrolled]

    async def get_course_progress(self, learner_id: str, course_id: str) -> Optional[Dict]:
        return self._record(learner_id).get("progress", {}).get(course_id)

    async def get_learner_streak(self, learner_id: str) -> Dict:
        """Stored streak, or 0 days when the last activity is older than yesterday."""
        streak = dict(self._record(learner_id).get("streak") or {})
        days = streak.get("current_streak_days", 0)
        last_activity = _parse_date(streak.get("last_activity_date"))
        if last_activity is not None and last_activity < self._today() - timedelta(days=1):
            days = 0
        return {"current_streak_days": days, "last_activity_date": streak.get("last_activity_date")}

    async def get_total_time_spent(self, learner_id: str) -> Optional[int]:
        # None lets the engine sum the per-course progress time_spent
        return self._record(learner_id).get("total_time_spent")
