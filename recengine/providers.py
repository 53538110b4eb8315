"""
Collaborator abstractions.

The engine reads catalog and learner state only through these Protocols.
Implementations: in-memory (tests, embedding in other services) here, JSON files
in recserver.services. Swap via the calling context; the engine does not care.
All reads are async so callers can gather them before scoring starts.
"""

from typing import Any, Dict, List, Optional, Protocol, Union

from .models import Course, CourseProgress, LearnerStreak, LearningPathCandidate, Lesson

CourseLike = Union[Dict[str, Any], Course]
LessonLike = Union[Dict[str, Any], Lesson]
ProgressLike = Union[Dict[str, Any], CourseProgress]
PathLike = Union[Dict[str, Any], LearningPathCandidate]


class CatalogProvider(Protocol):
    """Protocol for read-only catalog access (courses, lessons, learning paths)."""

    async def get_all_courses(self) -> List[CourseLike]:
        """Return the full course catalog in catalog order."""
        ...

    async def get_lessons_for_course(self, course_id: str) -> List[LessonLike]:
        """Return the lessons of one course (any order; each carries `order`)."""
        ...

    async def get_learning_paths(self) -> List[PathLike]:
        """Return every learning path candidate."""
        ...


class LearnerDataProvider(Protocol):
    """Protocol for read-only learner state."""

    async def get_enrolled_courses(self, learner_id: str) -> List[CourseLike]:
        ...

    async def get_course_progress(self, learner_id: str, course_id: str) -> Optional[ProgressLike]:
        """Progress record for one course, or None when the learner never started it."""
        ...

    async def get_learner_streak(self, learner_id: str) -> Union[Dict[str, Any], LearnerStreak]:
        ...

    async def get_total_time_spent(self, learner_id: str) -> Optional[int]:
        """Total minutes spent learning, or None to derive it from progress records."""
        ...


class InMemoryDataSource:
    """
    Catalog and learner provider backed by plain dicts.
    Used by tests and by callers that already hold the data in memory.
    """

    def __init__(
        self,
        courses: Optional[List[CourseLike]] = None,
        lessons: Optional[Dict[str, List[LessonLike]]] = None,
        learning_paths: Optional[List[PathLike]] = None,
        enrollments: Optional[Dict[str, List[str]]] = None,
        progress: Optional[Dict[str, Dict[str, ProgressLike]]] = None,
        streaks: Optional[Dict[str, int]] = None,
        time_spent: Optional[Dict[str, int]] = None,
    ):
        self._courses = list(courses or [])
        self._lessons = dict(lessons or {})
        self._learning_paths = list(learning_paths or [])
        self._enrollments = dict(enrollments or {})
        self._progress = dict(progress or {})
        self._streaks = dict(streaks or {})
        self._time_spent = dict(time_spent or {})

    def _course_id(self, course: CourseLike) -> Optional[str]:
        return course.get("id") if isinstance(course, dict) else course.id

    async def get_all_courses(self) -> List[CourseLike]:
        return list(self._courses)

    async def get_lessons_for_course(self, course_id: str) -> List[LessonLike]:
        return list(self._lessons.get(course_id, []))

    async def get_learning_paths(self) -> List[PathLike]:
        return list(self._learning_paths)

    async def get_enrolled_courses(self, learner_id: str) -> List[CourseLike]:
        enrolled = set(self._enrollments.get(learner_id, []))
        return [c for c in self._courses if self._course_id(c) in enrolled]

    async def get_course_progress(self, learner_id: str, course_id: str) -> Optional[ProgressLike]:
        return self._progress.get(learner_id, {}).get(course_id)

    async def get_learner_streak(self, learner_id: str) -> Dict[str, Any]:
        return {"current_streak_days": self._streaks.get(learner_id, 0)}

    async def get_total_time_spent(self, learner_id: str) -> Optional[int]:
        return self._time_spent.get(learner_id)
