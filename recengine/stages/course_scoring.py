"""
Course Scorer

Applies the additive rule set to every candidate course (catalog courses the
learner is not enrolled in). Each rule contributes 0 when its precondition is
false. Reasons are collected in display priority order:

    prerequisites met > similar category > difficulty step-up > beginner entry
    > popular > highly rated > quick win > interest match > similar tag

The similar-tag reason is only ever shown when no other reason-bearing rule fired.
Candidates are kept only when the summed score is strictly positive.

The public entry points are score_course and score_candidates.
"""

import logging
from typing import List, Optional, Tuple

from ..models import (
    Course,
    Difficulty,
    LearnerSignals,
    LearnerSnapshot,
    RecommendationConfig,
    RecommendationType,
    ScoredCourse,
)
from ..models.config import DEFAULT_CONFIG
from ..utils.scores import first_shared

logger = logging.getLogger(__name__)

REASON_PREREQUISITES_MET = "You've completed all prerequisites"
REASON_SIMILAR_CATEGORY = "Similar to courses you've completed in {category}"
REASON_SIMILAR_TAG = "Shares topics with courses you've completed"
REASON_DIFFICULTY_STEP_UP = "Perfect next step in difficulty"
REASON_BEGINNER_ENTRY = "Great starting point"
REASON_POPULAR = "Popular choice"
REASON_HIGHLY_RATED = "Highly rated"
REASON_QUICK_WIN = "Quick course"
REASON_INTEREST_MATCH = "Matches your interests"


def prerequisites_satisfied(course: Course, signals: LearnerSignals) -> Optional[bool]:
    """
    None when the course has no prerequisites; otherwise True only if every
    prerequisite exists in the catalog and is completed. Unresolvable ids count
    as not satisfied.
    """
    if not course.has_prerequisites:
        return None
    unresolved = [p for p in course.prerequisites if p not in signals.catalog_ids]
    if unresolved:
        logger.debug(
            "[scoring] UNRESOLVED_PREREQUISITES course_id=%s missing=%s", course.id, unresolved
        )
        return False
    return all(p in signals.completed_course_ids for p in course.prerequisites)


def _is_popular(course: Course, config: RecommendationConfig) -> bool:
    return course.enrolled_count > config.popular_enrollment_threshold


def _history_rules(
    course: Course,
    signals: LearnerSignals,
    config: RecommendationConfig,
) -> Tuple[int, List[str], bool]:
    """Similar category / similar tag / difficulty rules; they need completion history."""
    score = 0
    reasons: List[str] = []
    shared_category = first_shared(course.category, signals.completed_categories)
    if shared_category is not None:
        score += config.weight_similar_category
        reasons.append(REASON_SIMILAR_CATEGORY.format(category=shared_category))
    shares_tag = first_shared(course.tags, signals.completed_tags) is not None
    if shares_tag:
        score += config.weight_similar_tag
    target_level = signals.average_completed_difficulty + 1
    level = course.difficulty.level
    if level == target_level:
        score += config.weight_difficulty_step_up
        reasons.append(REASON_DIFFICULTY_STEP_UP)
    elif level > target_level:
        score += config.weight_difficulty_overshoot
    return score, reasons, shares_tag


def classify(
    course: Course,
    signals: LearnerSignals,
    config: RecommendationConfig = DEFAULT_CONFIG,
    prerequisites_met: Optional[bool] = None,
) -> RecommendationType:
    """Mutually exclusive type: prerequisite > similar > popular > next_step."""
    if prerequisites_met is None:
        prerequisites_met = prerequisites_satisfied(course, signals)
    if prerequisites_met:
        return RecommendationType.PREREQUISITE
    if first_shared(course.category, signals.enrolled_categories) is not None:
        return RecommendationType.SIMILAR
    if _is_popular(course, config):
        return RecommendationType.POPULAR
    return RecommendationType.NEXT_STEP


def score_course(
    course: Course,
    signals: LearnerSignals,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> ScoredCourse:
    """Score one candidate. The result may be zero or negative; filtering is the caller's job."""
    score = 0
    reasons: List[str] = []

    met = prerequisites_satisfied(course, signals)
    if met is True:
        score += config.weight_prerequisites_met
        reasons.append(REASON_PREREQUISITES_MET)
    elif met is False:
        score += config.weight_prerequisites_unmet

    shares_tag = False
    if signals.has_history:
        delta, history_reasons, shares_tag = _history_rules(course, signals, config)
        score += delta
        reasons.extend(history_reasons)
    elif course.difficulty == Difficulty.BEGINNER:
        score += config.weight_beginner_entry
        reasons.append(REASON_BEGINNER_ENTRY)

    if _is_popular(course, config):
        score += config.weight_popular
        reasons.append(REASON_POPULAR)

    if course.rating.average >= config.high_rating_threshold:
        score += config.weight_highly_rated
        reasons.append(REASON_HIGHLY_RATED)

    if (
        signals.total_time_spent_minutes < config.quick_win_max_minutes_spent
        and course.duration <= config.quick_win_max_duration_hours
    ):
        score += config.weight_quick_win
        reasons.append(REASON_QUICK_WIN)

    if first_shared(course.category, signals.enrolled_categories) is not None:
        score += config.weight_interest_match
        reasons.append(REASON_INTEREST_MATCH)

    # Lowest priority: only displayed when nothing above produced a reason
    if shares_tag:
        reasons.append(REASON_SIMILAR_TAG)

    return ScoredCourse(
        course=course,
        score=score,
        reasons=reasons,
        type=classify(course, signals, config, prerequisites_met=met),
    )


def score_candidates(
    catalog: List[Course],
    snapshot: LearnerSnapshot,
    signals: LearnerSignals,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredCourse]:
    """
    Score every catalog course the learner is not enrolled in, in catalog order,
    and keep those with a strictly positive score.
    """
    enrolled_ids = snapshot.enrolled_ids
    scored: List[ScoredCourse] = []
    for course in catalog:
        if course.id in enrolled_ids:
            continue
        result = score_course(course, signals, config)
        if result.score > 0:
            scored.append(result)
    return scored
