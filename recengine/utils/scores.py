"""
Score helpers: rounding, difficulty averaging and overlap tests used by the stages.
"""

import math
from typing import Iterable, List, Optional, Set

from ..models.course import Course


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, unlike round())."""
    return int(math.floor(value + 0.5))


def average_difficulty(courses: List[Course]) -> int:
    """Rounded mean difficulty level (1-3) of courses; 0 when there are none."""
    if not courses:
        return 0
    total = sum(c.difficulty.level for c in courses)
    return round_half_up(total / len(courses))


def first_shared(values: Iterable[str], pool: Set[str]) -> Optional[str]:
    """First item of values (in its own order) that is also in pool."""
    for value in values:
        if value in pool:
            return value
    return None
