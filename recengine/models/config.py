"""
Engine configuration: rule weights, thresholds, list limits and next-step priorities.

RecommendationConfig defaults are defined here. The server may pass a dict
(e.g. from ENGINE_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, model_validator


class RecommendationConfig(BaseModel):
    """Configuration for the recommendation and next-step engine."""

    # -------------------------------------------------------------------------
    # Course Scorer: rule weights (score deltas)
    # -------------------------------------------------------------------------

    # Every prerequisite already completed.
    weight_prerequisites_met: int = 50
    # Course has prerequisites and at least one is missing (or unresolvable).
    weight_prerequisites_unmet: int = -30
    # Shares a category with a completed course.
    weight_similar_category: int = 30
    # Shares a tag with a completed course.
    weight_similar_tag: int = 20
    # Difficulty exactly one level above the average completed difficulty.
    weight_difficulty_step_up: int = 25
    # Difficulty more than one level above the average completed difficulty.
    weight_difficulty_overshoot: int = -15
    # No completion history and the course is beginner level.
    weight_beginner_entry: int = 20
    weight_popular: int = 15
    weight_highly_rated: int = 20
    weight_quick_win: int = 10
    # Shares a category with any enrolled course.
    weight_interest_match: int = 15

    # -------------------------------------------------------------------------
    # Course Scorer: thresholds
    # -------------------------------------------------------------------------

    # enrolled_count strictly above this counts as popular.
    popular_enrollment_threshold: int = 100
    # rating.average at or above this counts as highly rated.
    high_rating_threshold: float = 4.5
    # Quick win applies while the learner has spent less than this many minutes overall...
    quick_win_max_minutes_spent: int = 60
    # ...and the course lasts at most this many hours.
    quick_win_max_duration_hours: float = 2

    # -------------------------------------------------------------------------
    # List limits
    # -------------------------------------------------------------------------

    default_recommendation_limit: int = 10
    next_steps_limit: int = 5
    learning_paths_limit: int = 5

    # -------------------------------------------------------------------------
    # Next-step priorities
    # closer_first: priority = progress (nearly finished courses first)
    # legacy:       priority = 100 - progress
    # -------------------------------------------------------------------------

    continue_priority_mode: Literal["closer_first", "legacy"] = "closer_first"
    start_priority: int = 50
    quiz_priority: int = 30

    # -------------------------------------------------------------------------
    # Learning-path scores
    # -------------------------------------------------------------------------

    path_in_progress_score: int = 50
    path_not_started_score: int = 20
    # Added for beginner paths while the learner's streak is short.
    path_beginner_bonus: int = 30
    path_beginner_streak_days: int = 7

    @model_validator(mode="after")
    def limits_not_negative(self):
        for name in ("default_recommendation_limit", "next_steps_limit", "learning_paths_limit"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "weights" in config_dict:
            flat.update({f"weight_{k}": v for k, v in config_dict["weights"].items()})
        if "thresholds" in config_dict:
            flat.update(config_dict["thresholds"])
        if "limits" in config_dict:
            limits = config_dict["limits"]
            if "recommendations" in limits:
                flat["default_recommendation_limit"] = limits["recommendations"]
            if "next_steps" in limits:
                flat["next_steps_limit"] = limits["next_steps"]
            if "learning_paths" in limits:
                flat["learning_paths_limit"] = limits["learning_paths"]
        if "next_steps" in config_dict:
            ns = config_dict["next_steps"]
            if "continue_mode" in ns:
                flat["continue_priority_mode"] = ns["continue_mode"]
            if "start_priority" in ns:
                flat["start_priority"] = ns["start_priority"]
            if "quiz_priority" in ns:
                flat["quiz_priority"] = ns["quiz_priority"]
        if "paths" in config_dict:
            flat.update({f"path_{k}": v for k, v in config_dict["paths"].items()})
        # Flat keys are accepted as-is
        flat.update({k: v for k, v in config_dict.items() if k in cls.model_fields})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
