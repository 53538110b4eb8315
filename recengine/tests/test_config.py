"""RecommendationConfig defaults, validation and dict loading."""

import pytest
from pydantic import ValidationError

from recengine.models import DEFAULT_CONFIG, RecommendationConfig, resolve_config


class TestRecommendationConfig:

    def test_defaults_match_rule_table(self):
        config = RecommendationConfig()

        assert config.weight_prerequisites_met == 50
        assert config.weight_prerequisites_unmet == -30
        assert config.weight_similar_category == 30
        assert config.weight_difficulty_overshoot == -15
        assert config.popular_enrollment_threshold == 100
        assert config.high_rating_threshold == 4.5
        assert config.default_recommendation_limit == 10
        assert config.next_steps_limit == 5
        assert config.continue_priority_mode == "closer_first"

    def test_negative_limits_rejected(self):
        with pytest.raises(ValidationError):
            RecommendationConfig(next_steps_limit=-1)

    def test_unknown_continue_mode_rejected(self):
        with pytest.raises(ValidationError):
            RecommendationConfig(continue_priority_mode="sideways")

    def test_from_dict_nested_sections(self):
        config = RecommendationConfig.from_dict({
            "weights": {"popular": 25, "quick_win": 5},
            "thresholds": {"popular_enrollment_threshold": 50},
            "limits": {"recommendations": 3, "next_steps": 2},
            "next_steps": {"continue_mode": "legacy", "quiz_priority": 40},
            "paths": {"beginner_bonus": 10},
            "ignored": True,
        })

        assert config.weight_popular == 25
        assert config.weight_quick_win == 5
        assert config.popular_enrollment_threshold == 50
        assert config.default_recommendation_limit == 3
        assert config.next_steps_limit == 2
        assert config.continue_priority_mode == "legacy"
        assert config.quiz_priority == 40
        assert config.path_beginner_bonus == 10
        # untouched values keep defaults
        assert config.weight_highly_rated == 20

    def test_from_dict_flat_keys(self):
        assert RecommendationConfig.from_dict({"start_priority": 70}).start_priority == 70

    def test_resolve_config(self):
        custom = RecommendationConfig(quiz_priority=1)

        assert resolve_config(None) is DEFAULT_CONFIG
        assert resolve_config(custom) is custom
