"""
Catalog store backed by a JSON file (e.g. data/catalog.json).

Layout:
    {"courses": [ {course}, ... ], "lessons": [ {lesson with course_id}, ... ]}
Course order in the file is catalog order.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class JsonCatalogStore:
    """Courses and lessons read from one JSON file; reload() re-reads it."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Catalog JSON not found: {self._path}")
        self._courses: List[Dict] = []
        self._course_by_id: Dict[str, Dict] = {}
        self._lessons_by_course: Dict[str, List[Dict]] = {}
        self.reload()

    @property
    def path(self) -> Path:
        return self._path

    def reload(self) -> int:
        """Re-read the catalog file. Returns the number of courses."""
        with open(self._path) as f:
            data = json.load(f)
        courses = data.get("courses", []) if isinstance(data, dict) else data
        lessons = data.get("lessons", []) if isinstance(data, dict) else []

        lessons_by_course: Dict[str, List[Dict]] = {}
        if isinstance(lessons, dict):
            # {"course_id": [lessons]} form
            for course_id, items in lessons.items():
                lessons_by_course[course_id] = [dict(l, course_id=course_id) for l in items]
        else:
            for lesson in lessons:
                lessons_by_course.setdefault(lesson.get("course_id", ""), []).append(lesson)

        self._courses = list(courses)
        self._course_by_id = {c.get("id"): c for c in self._courses if c.get("id")}
        self._lessons_by_course = lessons_by_course
        logger.info("[catalog] loaded path=%s courses=%d", self._path, len(self._courses))
        return len(self._courses)

    def get_course(self, course_id: str) -> Optional[Dict]:
        return self._course_by_id.get(course_id)

    def list_courses(self) -> List[Dict]:
        return list(self._courses)

    async def get_all_courses(self) -> List[Dict]:
        return self.list_courses()

    async def get_lessons_for_course(self, course_id: str) -> List[Dict]:
        return list(self._lessons_by_course.get(course_id, []))
