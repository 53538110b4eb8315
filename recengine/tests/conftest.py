"""Shared fixtures: a small sustainability catalog and helpers to build courses and signals."""

from typing import Iterable, List

import pytest

from recengine.models import Course, LearnerSnapshot
from recengine.providers import InMemoryDataSource
from recengine.stages import extract_signals

from .sample_data import CATALOG, LEARNING_PATHS, LESSONS


def make_course(course_id: str, **overrides) -> Course:
    """Course with neutral defaults: no rule fires unless a test switches it on."""
    data = {
        "id": course_id,
        "title": f"Course {course_id}",
        "category": [],
        "tags": [],
        "difficulty": "intermediate",
        "enrolled_count": 0,
        "rating": {"average": 3.0, "count": 10},
        "duration": 10,
    }
    data.update(overrides)
    return Course.model_validate(data)


def make_snapshot(
    enrolled: Iterable[Course] = (),
    completed_ids: Iterable[str] = (),
    time_spent: int = 120,
    learner_id: str = "learner-1",
) -> LearnerSnapshot:
    return LearnerSnapshot(
        learner_id=learner_id,
        enrolled_courses=list(enrolled),
        completed_course_ids=set(completed_ids),
        total_time_spent_minutes=time_spent,
    )


def make_signals(
    catalog: List[Course],
    enrolled: Iterable[Course] = (),
    completed_ids: Iterable[str] = (),
    time_spent: int = 120,
):
    snapshot = make_snapshot(enrolled, completed_ids, time_spent)
    return extract_signals(snapshot, catalog)


@pytest.fixture
def data_source() -> InMemoryDataSource:
    """
    Learners:
    - veteran: completed solar-101, halfway through solar-201
    - newcomer: nothing enrolled
    - juggler: climate-101 at 80%, recycling-101 not started
    """
    return InMemoryDataSource(
        courses=CATALOG,
        lessons=LESSONS,
        learning_paths=LEARNING_PATHS,
        enrollments={
            "veteran": ["solar-101", "solar-201"],
            "juggler": ["climate-101", "recycling-101"],
        },
        progress={
            "veteran": {
                "solar-101": {"completed": True, "progress_percentage": 100, "completed_lesson_ids": ["s1-l1", "s1-l2", "s1-l3"], "time_spent": 90},
                "solar-201": {"completed": False, "progress_percentage": 50, "completed_lesson_ids": ["s2-l1"], "time_spent": 45},
            },
            "juggler": {
                "climate-101": {"completed": False, "progress_percentage": 80, "completed_lesson_ids": ["c1-l1"], "time_spent": 30},
            },
        },
        streaks={"veteran": 12, "juggler": 2},
    )
