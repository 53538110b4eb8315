"""
Recommendation Ranker

Sorts scored candidates by score (descending, catalog order on ties), truncates
to the requested limit and converts them to Recommendation records.
"""

from typing import List, Optional

from ..models import Recommendation, RecommendationConfig, ScoredCourse
from ..models.config import DEFAULT_CONFIG
from ..utils.ordering import check_limit, rank_descending


def rank_recommendations(
    candidates: List[ScoredCourse],
    limit: Optional[int] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[Recommendation]:
    """
    Rank scored candidates.

    limit=None uses config.default_recommendation_limit; limit=0 yields [];
    a negative limit raises InvalidArgument.
    """
    limit = check_limit(limit, config.default_recommendation_limit)
    top = rank_descending(candidates, key=lambda s: s.score, limit=limit)
    return [s.to_recommendation() for s in top]
