"""
Learning-Path Ranker

Scores predefined learning paths against the learner's enrolled set:
in-progress paths first, then not-started ones, with a bonus for beginner paths
while the learner's streak is short. Fully enrolled paths are never returned.
"""

from typing import List, Set

from ..models import (
    Difficulty,
    LearnerStreak,
    LearningPathCandidate,
    RankedPath,
    RecommendationConfig,
)
from ..models.config import DEFAULT_CONFIG
from ..utils.ordering import rank_descending


def completion_ratio(path: LearningPathCandidate, enrolled_ids: Set[str]) -> float:
    """Share of the path's courses the learner is enrolled in; 0 for an empty path."""
    if not path.courses:
        return 0.0
    enrolled_in_path = sum(1 for course_id in path.courses if course_id in enrolled_ids)
    return enrolled_in_path / len(path.courses)


def score_path(
    path: LearningPathCandidate,
    enrolled_ids: Set[str],
    streak: LearnerStreak,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> RankedPath:
    ratio = completion_ratio(path, enrolled_ids)
    score = 0
    if 0 < ratio < 1:
        score += config.path_in_progress_score
    elif ratio == 0:
        score += config.path_not_started_score
    if (
        path.difficulty == Difficulty.BEGINNER
        and streak.current_streak_days < config.path_beginner_streak_days
    ):
        score += config.path_beginner_bonus
    data = path.model_dump()
    data.update(score=score, completion_ratio=ratio)
    return RankedPath.model_validate(data)


def rank_learning_paths(
    paths: List[LearningPathCandidate],
    enrolled_ids: Set[str],
    streak: LearnerStreak,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[RankedPath]:
    """Score, drop completed (ratio 1) and non-positive paths, sort descending, truncate."""
    ranked = []
    for path in paths:
        scored = score_path(path, enrolled_ids, streak, config)
        if scored.completion_ratio >= 1 or scored.score <= 0:
            continue
        ranked.append(scored)
    return rank_descending(ranked, key=lambda p: p.score, limit=config.learning_paths_limit)
