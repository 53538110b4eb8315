"""
Signal Extractor

Derives the intermediate facts the Course Scorer needs from a learner snapshot
and the catalog. Pure function; empty inputs give empty/zero signals.
"""

from typing import List, Set

from ..models import Course, LearnerSignals, LearnerSnapshot
from ..utils.scores import average_difficulty


def _union(courses: List[Course], attr: str) -> Set[str]:
    values: Set[str] = set()
    for course in courses:
        values.update(getattr(course, attr))
    return values


def extract_signals(snapshot: LearnerSnapshot, catalog: List[Course]) -> LearnerSignals:
    """
    Build LearnerSignals from a snapshot and the full catalog.

    completed_courses are taken from the catalog (not the enrolled list) so
    that a completion the catalog no longer knows contributes no similarity.
    """
    completed = [c for c in catalog if c.id in snapshot.completed_course_ids]
    return LearnerSignals(
        completed_courses=completed,
        completed_course_ids=set(snapshot.completed_course_ids),
        average_completed_difficulty=average_difficulty(completed),
        total_time_spent_minutes=snapshot.total_time_spent_minutes,
        enrolled_categories=_union(snapshot.enrolled_courses, "category"),
        completed_categories=_union(completed, "category"),
        completed_tags=_union(completed, "tags"),
        catalog_ids={c.id for c in catalog},
    )
