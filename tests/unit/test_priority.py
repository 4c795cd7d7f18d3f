import pytest

from models.domain import BrandTag, StrengthTier
from services.combo_engine.config import PriorityWeights
from services.combo_engine.models import BrandClassification, CorpusStats
from services.combo_engine.priority import (
    brand_hybrid_factor,
    length_factor,
    novelty_factor,
    priority_tier,
    round_half_up,
    score_priority,
    token_relevance,
    weighted_score,
)

GENERIC = BrandClassification(tag=BrandTag.GENERIC)
EMPTY_CORPUS = CorpusStats()


@pytest.mark.parametrize(
    "word,kwargs,expected",
    [
        ("learn", {}, 3),
        ("lessons", {}, 2),
        ("spanish", {}, 1),
        ("best", {}, 0),
        ("2024", {}, 0),
        ("spanish", {"overrides": {"spanish": 3}}, 3),
        ("spanish", {"core_terms": frozenset({"spanish"})}, 3),
        ("learn", {"overrides": {"learn": 0}}, 0),
    ],
)
def test_token_relevance(word, kwargs, expected):
    assert token_relevance(word, **kwargs) == expected


@pytest.mark.parametrize("length,expected", [(2, 0.7), (3, 1.0), (4, 0.6), (5, 0.0)])
def test_length_factor(length, expected):
    assert length_factor(length) == expected


def test_brand_hybrid_factor():
    hybrid = BrandClassification(tag=BrandTag.BRAND, matched_alias="pimsleur", brand_words=frozenset({"pimsleur"}))
    pure = BrandClassification(
        tag=BrandTag.BRAND, matched_alias="pimsleur app", brand_words=frozenset({"pimsleur", "app"})
    )
    competitor = BrandClassification(tag=BrandTag.COMPETITOR, matched_alias="duolingo")

    assert brand_hybrid_factor(["pimsleur", "spanish"], hybrid) == 1.0
    assert brand_hybrid_factor(["pimsleur", "app"], pure) == 0.3
    assert brand_hybrid_factor(["learn", "spanish"], GENERIC) == 0.6
    assert brand_hybrid_factor(["duolingo", "spanish"], competitor) == 0.1


def test_novelty_penalizes_duplicated_tokens():
    corpus = CorpusStats(element_counts={"learn": 2, "language": 1})

    assert novelty_factor(["language", "spanish"], StrengthTier.CROSS_ELEMENT, corpus) == 1.0
    assert novelty_factor(["language", "learn"], StrengthTier.CROSS_ELEMENT, corpus) == pytest.approx(0.875)
    assert novelty_factor(["language", "learn"], StrengthTier.TITLE_CONSECUTIVE, EMPTY_CORPUS) == 0.2


def test_score_priority_exposes_factors():
    result = score_priority(["learn", "spanish"], StrengthTier.CROSS_ELEMENT, GENERIC, 0.0, EMPTY_CORPUS)

    assert result.factors == {
        "semantic_relevance": 0.6667,
        "length": 0.7,
        "brand_hybrid": 0.6,
        "novelty": 1.0,
        "noise_inverse": 1.0,
    }
    assert result.score == 75


def test_score_is_bounded():
    best = score_priority(["learn", "speak", "study"], StrengthTier.MISSING, GENERIC, 0.0, EMPTY_CORPUS)
    worst = score_priority(["best", "free"], StrengthTier.TITLE_CONSECUTIVE, GENERIC, 1.0, EMPTY_CORPUS)

    assert 0 <= worst.score < best.score <= 100


def test_zero_weights_score_zero():
    weights = PriorityWeights(0.0, 0.0, 0.0, 0.0, 0.0)
    result = score_priority(["learn", "spanish"], StrengthTier.CROSS_ELEMENT, GENERIC, 0.0, EMPTY_CORPUS, weights)
    assert result.score == 0


def test_negative_weights_count_as_zero():
    weights = PriorityWeights(1.0, 0.0, 0.0, 0.0, -5.0)
    result = score_priority(["learn", "speak"], StrengthTier.CROSS_ELEMENT, GENERIC, 1.0, EMPTY_CORPUS, weights)
    assert result.score == 100


def test_weighted_score_normalizes_by_weight_sum():
    factors = {"semantic_relevance": 1.0, "length": 0.0, "brand_hybrid": 0.0, "novelty": 0.0, "noise_inverse": 0.0}
    weights = PriorityWeights(2.0, 2.0, 0.0, 0.0, 0.0)
    assert weighted_score(factors, weights) == 50


@pytest.mark.parametrize("score,tier", [(100, "high"), (70, "high"), (69, "medium"), (40, "medium"), (39, "low"), (0, "low")])
def test_priority_tier(score, tier):
    assert priority_tier(score) == tier


@pytest.mark.parametrize("value,expected", [(2.5, 3), (0.5, 1), (74.49, 74), (12.5, 13), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
