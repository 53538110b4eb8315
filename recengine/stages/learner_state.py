"""
Learner State Reader

Pulls catalog and learner state from the collaborators and returns typed, immutable
snapshots. Every required read is awaited before a snapshot is returned, so the
scoring stages never see a partial view.

Failure policy:
- catalog / enrolled / progress reads for a recommendation snapshot: raise DataUnavailable
- a single malformed catalog course or learning path: skipped with a warning
- next-step course states: a course whose progress or lessons cannot be read is skipped
"""

import asyncio
import logging
from typing import Any, Awaitable, List, Optional, Tuple, TypeVar

from pydantic import ValidationError

from ..errors import DataUnavailable
from ..models import (
    Course,
    CourseProgress,
    EnrolledCourseState,
    LearnerSnapshot,
    LearnerStreak,
    LearningPathCandidate,
    ensure_lessons,
    ensure_progress,
)
from ..providers import CatalogProvider, LearnerDataProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _read(source: str, call: Awaitable[T], entity_id: Optional[str] = None) -> T:
    """Await one collaborator call, converting any failure into DataUnavailable."""
    try:
        return await call
    except DataUnavailable:
        raise
    except Exception as e:
        raise DataUnavailable(source, entity_id, str(e)) from e


def _validate_each(model, items: List[Any], source: str) -> List[Any]:
    """Validate items one by one, skipping (and logging) those that do not validate."""
    valid = []
    for item in items or []:
        if isinstance(item, model):
            valid.append(item)
            continue
        try:
            valid.append(model.model_validate(item))
        except ValidationError as e:
            item_id = item.get("id") if isinstance(item, dict) else None
            logger.warning(
                "[learner_state] SKIP_MALFORMED source=%s id=%s errors=%s",
                source, item_id, e.error_count(),
            )
    return valid


class LearnerStateReader:
    """Reads catalog and learner state through the collaborator Protocols."""

    def __init__(self, catalog: CatalogProvider, learners: LearnerDataProvider):
        self._catalog = catalog
        self._learners = learners

    async def read_catalog(self) -> List[Course]:
        """Full catalog in catalog order; malformed courses are skipped."""
        raw = await _read("get_all_courses", self._catalog.get_all_courses())
        return _validate_each(Course, raw, "get_all_courses")

    async def read_enrolled_courses(self, learner_id: str) -> List[Course]:
        """
        Enrolled courses, validated strictly.

        A malformed enrolled course cannot be skipped: it would fall out of the
        exclusion set and become recommendable.
        """
        raw = await _read(
            "get_enrolled_courses", self._learners.get_enrolled_courses(learner_id), learner_id
        )
        try:
            return [c if isinstance(c, Course) else Course.model_validate(c) for c in raw or []]
        except ValidationError as e:
            raise DataUnavailable("get_enrolled_courses", learner_id, str(e)) from e

    async def _read_progress(self, learner_id: str, course_id: str) -> Optional[CourseProgress]:
        raw = await _read(
            "get_course_progress",
            self._learners.get_course_progress(learner_id, course_id),
            course_id,
        )
        try:
            return ensure_progress(raw)
        except ValidationError as e:
            raise DataUnavailable("get_course_progress", course_id, str(e)) from e

    async def read_snapshot(self, learner_id: str) -> LearnerSnapshot:
        """Enrolled courses, completion set and total time, all read before returning."""
        enrolled, time_spent = await asyncio.gather(
            self.read_enrolled_courses(learner_id),
            _read("get_total_time_spent", self._learners.get_total_time_spent(learner_id), learner_id),
        )
        progress_records = await asyncio.gather(
            *(self._read_progress(learner_id, c.id) for c in enrolled)
        )
        completed_ids = {
            course.id
            for course, progress in zip(enrolled, progress_records)
            if progress is not None and progress.is_finished
        }
        if time_spent is None:
            time_spent = sum(p.time_spent for p in progress_records if p is not None)
        return LearnerSnapshot(
            learner_id=learner_id,
            enrolled_courses=enrolled,
            completed_course_ids=completed_ids,
            total_time_spent_minutes=max(0, int(time_spent)),
        )

    async def _read_course_state(self, learner_id: str, course: Course) -> EnrolledCourseState:
        progress, raw_lessons = await asyncio.gather(
            self._read_progress(learner_id, course.id),
            _read("get_lessons_for_course", self._catalog.get_lessons_for_course(course.id), course.id),
        )
        try:
            lessons = ensure_lessons(raw_lessons or [])
        except ValidationError as e:
            raise DataUnavailable("get_lessons_for_course", course.id, str(e)) from e
        return EnrolledCourseState(course=course, progress=progress, lessons=lessons)

    async def read_course_states(self, learner_id: str) -> List[EnrolledCourseState]:
        """Per enrolled course: progress and lessons. Courses that fail to read are skipped."""
        enrolled = await self.read_enrolled_courses(learner_id)
        results = await asyncio.gather(
            *(self._read_course_state(learner_id, c) for c in enrolled),
            return_exceptions=True,
        )
        states: List[EnrolledCourseState] = []
        for course, result in zip(enrolled, results):
            if isinstance(result, DataUnavailable):
                logger.warning(
                    "[learner_state] SKIP_COURSE course_id=%s reason=%s", course.id, result
                )
                continue
            if isinstance(result, BaseException):
                raise result
            states.append(result)
        return states

    async def read_streak(self, learner_id: str) -> LearnerStreak:
        raw = await _read("get_learner_streak", self._learners.get_learner_streak(learner_id), learner_id)
        if isinstance(raw, LearnerStreak):
            return raw
        try:
            return LearnerStreak.model_validate(raw or {})
        except ValidationError as e:
            raise DataUnavailable("get_learner_streak", learner_id, str(e)) from e

    async def read_learning_paths(self) -> List[LearningPathCandidate]:
        raw = await _read("get_learning_paths", self._catalog.get_learning_paths())
        return _validate_each(LearningPathCandidate, raw, "get_learning_paths")

    async def read_for_recommendations(self, learner_id: str) -> Tuple[List[Course], LearnerSnapshot]:
        """Catalog and learner snapshot, gathered together."""
        catalog, snapshot = await asyncio.gather(
            self.read_catalog(),
            self.read_snapshot(learner_id),
        )
        return catalog, snapshot
