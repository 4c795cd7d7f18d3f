"""Unit tests for configuration."""

from dataclasses import FrozenInstanceError

import pytest

from config import Settings
from models.schemas import ComboAuditRequest, RuleSet
from services.combo_engine.config import (
    EngineConfig,
    PriorityWeights,
    build_engine_config,
    merge_weights,
)


def test_default_settings():
    """Test that default settings are loaded correctly."""
    settings = Settings()

    assert settings.app_name == "ComboLens"
    assert settings.debug is False
    assert settings.max_combos == 1500
    assert settings.noise_threshold == 0.5
    assert settings.min_combo_length == 2
    assert settings.max_combo_length == 4
    assert settings.default_rule_set is None


def test_custom_settings(monkeypatch):
    """Test that custom settings can be loaded from environment."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("MAX_COMBOS", "200")
    monkeypatch.setenv("NOISE_THRESHOLD", "0.4")
    monkeypatch.setenv("DEFAULT_RULE_SET", "fitness")

    settings = Settings()

    assert settings.app_name == "TestApp"
    assert settings.debug is True
    assert settings.max_combos == 200
    assert settings.noise_threshold == 0.4
    assert settings.default_rule_set == "fitness"


def test_priority_weights_default_sum_to_one():
    weights = PriorityWeights.default()
    assert sum(weights.as_dict().values()) == pytest.approx(1.0)
    assert list(weights.as_dict()) == [
        "semantic_relevance",
        "length",
        "brand_hybrid",
        "novelty",
        "noise_inverse",
    ]


def test_merge_weights_overlays_known_keys_only():
    weights = merge_weights({"novelty": 0.5, "popularity": 0.9, "length": None})

    assert weights.novelty == 0.5
    assert weights.length == PriorityWeights.default().length
    assert not hasattr(weights, "popularity")


def test_engine_config_is_immutable():
    config = EngineConfig.default()
    with pytest.raises(FrozenInstanceError):
        config.noise_threshold = 0.9


def test_build_engine_config_uses_request_over_settings():
    request = ComboAuditRequest(
        title="Pimsleur",
        subtitle="Learn",
        brand_name="Pimsleur",
        brand_aliases=["  PIMSLEUR Method "],
        competitor_aliases=["Duolingo", "duolingo"],
        stopwords=["Learn", " "],
        noise_threshold=0.8,
    )
    config = build_engine_config(request, Settings())

    assert config.noise_threshold == 0.8
    assert config.stopwords == frozenset({"learn"})
    assert config.brand_aliases[0] == "pimsleur method"
    assert "pimsleur app" in config.brand_aliases
    assert config.competitor_aliases == ("duolingo",)
    assert config.rule_set_name is None
    assert config.target_keywords == ()


def test_build_engine_config_falls_back_to_settings_threshold():
    request = ComboAuditRequest(title="a", subtitle="b")
    config = build_engine_config(request, Settings(noise_threshold=0.3, max_combos=99))

    assert config.noise_threshold == 0.3
    assert config.max_combos == 99


def test_build_engine_config_applies_rule_set():
    rule_set = RuleSet(
        name="custom",
        weights={"semantic_relevance": 0.6},
        token_relevance={"Yoga!": 5, "gym": -1},
        core_terms=("home workout",),
        target_keywords=("The Gym", "yoga", "yoga", "x"),
        competitor_aliases=("Peloton",),
    )
    request = ComboAuditRequest(title="a", subtitle="b", competitor_aliases=["Strava"])
    config = build_engine_config(request, Settings(), rule_set)

    assert config.rule_set_name == "custom"
    assert config.weights.semantic_relevance == 0.6
    assert dict(config.token_relevance) == {"yoga": 3, "gym": 0}
    assert config.core_terms == frozenset({"home", "workout"})
    assert config.target_keywords == ("gym", "yoga")
    assert config.competitor_aliases == ("strava", "peloton")
