"""
Recommendation Engine: facade over the pipeline stages.

- get_recommendations: state reader -> signals -> course scoring -> ranking
- get_next_steps:      state reader -> next-step aggregator
- get_recommended_paths: state reader -> learning-path ranker

The engine owns no state between calls. Each call reads a fresh snapshot, awaits
every read before scoring, and returns an empty list when the snapshot cannot be
read or something unexpected fails (these lists feed advisory panels). Only
InvalidArgument reaches the caller.
"""

import asyncio
import logging
from typing import List, Optional

from .errors import DataUnavailable, InvalidArgument
from .models import (
    Course,
    LearnerSnapshot,
    NextStep,
    RankedPath,
    Recommendation,
    RecommendationConfig,
    resolve_config,
)
from .providers import CatalogProvider, LearnerDataProvider
from .stages import (
    LearnerStateReader,
    build_next_steps,
    extract_signals,
    rank_learning_paths,
    rank_recommendations,
    score_candidates,
)
from .utils.ordering import check_limit

logger = logging.getLogger(__name__)


def recommend(
    catalog: List[Course],
    snapshot: LearnerSnapshot,
    limit: Optional[int] = None,
    config: Optional[RecommendationConfig] = None,
) -> List[Recommendation]:
    """Pure scoring pass over an already-read catalog and snapshot."""
    config = resolve_config(config)
    limit = check_limit(limit, config.default_recommendation_limit)
    signals = extract_signals(snapshot, catalog)
    scored = score_candidates(catalog, snapshot, signals, config)
    return rank_recommendations(scored, limit, config)


class RecommendationEngine:
    """Produces recommendations, next steps and learning paths for one learner per call."""

    def __init__(
        self,
        catalog: CatalogProvider,
        learners: LearnerDataProvider,
        config: Optional[RecommendationConfig] = None,
    ):
        self.config = resolve_config(config)
        self._reader = LearnerStateReader(catalog, learners)

    async def get_recommendations(
        self,
        learner_id: str,
        limit: Optional[int] = None,
    ) -> List[Recommendation]:
        limit = check_limit(limit, self.config.default_recommendation_limit)
        try:
            catalog, snapshot = await self._reader.read_for_recommendations(learner_id)
            recommendations = recommend(catalog, snapshot, limit, self.config)
        except InvalidArgument:
            raise
        except DataUnavailable as e:
            logger.warning("[engine] RECOMMENDATIONS_UNAVAILABLE learner_id=%s reason=%s", learner_id, e)
            return []
        except Exception:
            logger.exception("[engine] RECOMMENDATIONS_FAILED learner_id=%s", learner_id)
            return []
        logger.info(
            "[engine] recommendations learner_id=%s catalog=%d returned=%d",
            learner_id, len(catalog), len(recommendations),
        )
        return recommendations

    async def get_next_steps(self, learner_id: str) -> List[NextStep]:
        try:
            states = await self._reader.read_course_states(learner_id)
            steps = build_next_steps(states, self.config)
        except DataUnavailable as e:
            logger.warning("[engine] NEXT_STEPS_UNAVAILABLE learner_id=%s reason=%s", learner_id, e)
            return []
        except Exception:
            logger.exception("[engine] NEXT_STEPS_FAILED learner_id=%s", learner_id)
            return []
        logger.info("[engine] next_steps learner_id=%s returned=%d", learner_id, len(steps))
        return steps

    async def get_recommended_paths(self, learner_id: str) -> List[RankedPath]:
        try:
            paths, enrolled, streak = await asyncio.gather(
                self._reader.read_learning_paths(),
                self._reader.read_enrolled_courses(learner_id),
                self._reader.read_streak(learner_id),
            )
            ranked = rank_learning_paths(paths, {c.id for c in enrolled}, streak, self.config)
        except DataUnavailable as e:
            logger.warning("[engine] PATHS_UNAVAILABLE learner_id=%s reason=%s", learner_id, e)
            return []
        except Exception:
            logger.exception("[engine] PATHS_FAILED learner_id=%s", learner_id)
            return []
        logger.info("[engine] paths learner_id=%s returned=%d", learner_id, len(ranked))
        return ranked
