"""Shared utilities for scoring and ordering."""

from .ordering import check_limit, rank_descending
from .scores import average_difficulty, first_shared, round_half_up

__all__ = [
    "average_difficulty",
    "check_limit",
    "first_shared",
    "rank_descending",
    "round_half_up",
]
