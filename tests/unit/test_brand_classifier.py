import pytest

from constants import DEFAULT_STOPWORDS
from models.domain import BrandTag
from services.combo_engine.brand_classifier import (
    classify_brand,
    extract_canonical_brand,
    generate_brand_aliases,
    is_noise,
    noise_confidence,
    normalize_aliases,
)

PIMSLEUR_ALIASES = tuple(generate_brand_aliases("Pimsleur"))
COMPETITORS = ("duolingo", "rosetta", "rosetta stone")


def test_generate_brand_aliases():
    assert generate_brand_aliases("Pimsleur") == [
        "pimsleur",
        "pimsleur app",
        "pimsleur language",
        "pimsleur learning",
        "pimsleur lessons",
        "pimsleur course",
        "the pimsleur",
        "official pimsleur",
    ]


@pytest.mark.parametrize("brand", [None, "", "   ", "!!"])
def test_generate_brand_aliases_empty(brand):
    assert generate_brand_aliases(brand) == []


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Pimsleur Language Learning", "pimsleur"),
        ("  Duolingo: Language Lessons", "duolingo"),
        ("", ""),
    ],
)
def test_extract_canonical_brand(title, expected):
    assert extract_canonical_brand(title) == expected


def test_normalize_aliases_dedupes_and_never_rejects():
    assert normalize_aliases([" Duolingo ", "duolingo", "Rosetta-Stone!", "", None]) == (
        "duolingo",
        "rosetta-stone",
    )


def test_brand_match_prefers_longest_alias():
    result = classify_brand(["pimsleur", "language"], PIMSLEUR_ALIASES, COMPETITORS)

    assert result.tag is BrandTag.BRAND
    assert result.matched_alias == "pimsleur language"
    assert result.brand_words == frozenset({"pimsleur", "language"})


def test_brand_takes_precedence_over_competitor():
    result = classify_brand(["pimsleur", "duolingo"], PIMSLEUR_ALIASES, COMPETITORS)
    assert result.tag is BrandTag.BRAND


def test_competitor_multi_word_alias():
    result = classify_brand(["rosetta", "stone", "spanish"], PIMSLEUR_ALIASES, COMPETITORS)

    assert result.tag is BrandTag.COMPETITOR
    assert result.matched_alias == "rosetta stone"


def test_multi_word_alias_needs_every_word():
    result = classify_brand(["stone", "spanish"], PIMSLEUR_ALIASES, ("rosetta stone",))
    assert result.tag is BrandTag.GENERIC


def test_multi_word_alias_matches_words_from_different_elements():
    result = classify_brand(["training", "club", "nike"], (), ("nike training club", "strava"))

    assert result.tag is BrandTag.COMPETITOR
    assert result.matched_alias == "nike training club"


def test_brand_alias_matches_in_any_order():
    result = classify_brand(["app", "spanish", "pimsleur"], PIMSLEUR_ALIASES, COMPETITORS)

    assert result.tag is BrandTag.BRAND
    assert result.matched_alias == "pimsleur app"
    assert result.brand_words == frozenset({"pimsleur", "app"})


def test_generic_when_nothing_matches():
    result = classify_brand(["learn", "spanish"], PIMSLEUR_ALIASES, COMPETITORS)

    assert result.tag is BrandTag.GENERIC
    assert result.matched_alias is None


@pytest.mark.parametrize(
    "keywords,expected",
    [
        (["learn", "spanish"], 0.0),
        (["learn", "spanish", "trial"], 0.2),
        (["best", "spanish"], 0.65),
        (["learn", "spanish", "free", "trial"], 0.375),
        (["30", "days"], 0.85),
        (["best", "free"], 1.0),
        ([], 1.0),
    ],
)
def test_noise_confidence(keywords, expected):
    assert noise_confidence(keywords, DEFAULT_STOPWORDS) == pytest.approx(expected)


def test_noise_threshold_is_strict():
    assert is_noise(0.5, 0.5) is False
    assert is_noise(0.51, 0.5) is True
    assert is_noise(noise_confidence(["best", "spanish"], DEFAULT_STOPWORDS), 0.5) is True
