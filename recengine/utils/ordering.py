"""
Ordering helpers: stable descending sort and limit handling shared by all rankers.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

from ..errors import InvalidArgument

T = TypeVar("T")


def check_limit(limit: Optional[int], default: int) -> int:
    """Return limit (or default when None); negative limits raise InvalidArgument."""
    if limit is None:
        return default
    if limit < 0:
        raise InvalidArgument(f"limit must be >= 0, got {limit}")
    return limit


def rank_descending(items: Sequence[T], key: Callable[[T], float], limit: int) -> List[T]:
    """
    Sort by key descending and keep the first `limit` items.

    sorted() is stable and stays stable with reverse=True, so items with equal
    keys keep their input order.
    """
    return sorted(items, key=key, reverse=True)[:limit]
