"""
Learning path store backed by a JSON file (e.g. data/learning_paths.json).

Stored (learner-created) paths come first, then the built-in default paths.
The file is created on the first write.
"""

import json
import logging
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union

from recengine.models import Difficulty, LearningPathCandidate

from .catalog_store import JsonCatalogStore

logger = logging.getLogger(__name__)


def default_learning_paths(created_at: str) -> List[Dict]:
    """Built-in paths offered to every learner."""
    return [
        {
            "id": "path-beginner-sustainability",
            "name": "Sustainability Fundamentals",
            "description": "A comprehensive path for beginners to learn about sustainability and environmental conservation",
            "courses": [],
            "estimated_duration": 20,
            "difficulty": "beginner",
            "category": ["Sustainability", "Environment"],
            "tags": ["beginner", "sustainability", "environment"],
            "created_at": created_at,
        },
        {
            "id": "path-climate-action",
            "name": "Climate Action Path",
            "description": "Learn about climate change and how to take action",
            "courses": [],
            "estimated_duration": 30,
            "difficulty": "intermediate",
            "category": ["Climate", "Action"],
            "tags": ["climate", "action", "intermediate"],
            "created_at": created_at,
        },
        {
            "id": "path-renewable-energy",
            "name": "Renewable Energy Mastery",
            "description": "Deep dive into renewable energy technologies and implementation",
            "courses": [],
            "estimated_duration": 40,
            "difficulty": "advanced",
            "category": ["Energy", "Technology"],
            "tags": ["energy", "renewable", "advanced"],
            "created_at": created_at,
        },
    ]


def new_path_id() -> str:
    return f"path-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


class JsonLearningPathStore:
    """Learning path catalog: stored paths plus defaults; create_learning_path persists."""

    def __init__(
        self,
        path: Union[Path, str],
        catalog: Optional[JsonCatalogStore] = None,
        include_defaults: bool = True,
    ):
        self._path = Path(path)
        self._catalog = catalog
        self._stored: List[Dict] = []
        created_at = datetime.now(timezone.utc).isoformat()
        self._defaults = default_learning_paths(created_at) if include_defaults else []
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        with open(self._path) as f:
            data = json.load(f)
        paths = data.get("paths", []) if isinstance(data, dict) else data
        self._stored = list(paths)

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            json.dump({"paths": self._stored}, f, indent=2)

    def list_paths(self) -> List[Dict]:
        return list(self._stored) + list(self._defaults)

    async def get_learning_paths(self) -> List[Dict]:
        return self.list_paths()

    def estimate_duration(self, course_ids: List[str]) -> float:
        """Sum of member course durations (hours); unknown courses count 0."""
        if self._catalog is None:
            return 0
        total = 0.0
        for course_id in course_ids:
            course = self._catalog.get_course(course_id)
            if course:
                total += course.get("duration", 0) or 0
        return total

    def create_learning_path(
        self,
        name: str,
        description: str,
        courses: List[str],
        difficulty: Union[Difficulty, str],
        category: List[str],
        tags: List[str],
    ) -> LearningPathCandidate:
        """
        Create and persist a learning path.

        Raises:
            ValueError: name is blank
            OSError: the store file cannot be written
        """
        if not name or not name.strip():
            raise ValueError("name cannot be empty")
        path = LearningPathCandidate(
            id=new_path_id(),
            name=name.strip(),
            description=description,
            courses=list(courses),
            estimated_duration=self.estimate_duration(courses),
            difficulty=difficulty,
            category=list(category),
            tags=list(tags),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._stored.append(path.model_dump(mode="json"))
        try:
            self._save()
        except OSError:
            self._stored.pop()
            raise
        logger.info("[paths] CREATED id=%s courses=%d", path.id, len(path.courses))
        return path
