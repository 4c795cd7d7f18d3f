"""
Combo priority scoring.

The priority score is a weighted composite of five normalized factors:
semantic relevance to the vertical, combo length, brand/generic mix,
novelty across metadata elements, and inverse noise. Factors are kept on the
result so a score can always be explained.
"""

import re
from typing import AbstractSet, Dict, Mapping, Optional, Sequence

from constants import CORE_INTENT_VERBS, DOMAIN_NOUNS, LOW_VALUE_TERMS, RELEVANCE_MAX
from models.domain import BrandTag, StrengthTier
from services.combo_engine.config import PriorityWeights
from services.combo_engine.models import BrandClassification, CorpusStats, PriorityScore

LENGTH_SCORES: Dict[int, float] = {2: 0.7, 3: 1.0, 4: 0.6}

HYBRID_SCORE = 1.0
GENERIC_SCORE = 0.6
PURE_BRAND_SCORE = 0.3
COMPETITOR_SCORE = 0.1

NOVELTY_BY_TIER: Dict[StrengthTier, float] = {
    StrengthTier.TITLE_CONSECUTIVE: 0.2,
    StrengthTier.TITLE_NON_CONSECUTIVE: 0.5,
    StrengthTier.TITLE_KEYWORDS_CROSS: 1.0,
    StrengthTier.CROSS_ELEMENT: 1.0,
    StrengthTier.KEYWORDS_CONSECUTIVE: 0.2,
    StrengthTier.SUBTITLE_CONSECUTIVE: 0.2,
    StrengthTier.KEYWORDS_SUBTITLE_CROSS: 0.8,
    StrengthTier.KEYWORDS_NON_CONSECUTIVE: 0.5,
    StrengthTier.SUBTITLE_NON_CONSECUTIVE: 0.5,
    StrengthTier.THREE_WAY_CROSS: 0.9,
    StrengthTier.MISSING: 1.0,
}
DUPLICATE_PENALTY = 0.25

_NUMERIC_RE = re.compile(r"^\d+$")


def token_relevance(
    word: str,
    overrides: Optional[Mapping[str, int]] = None,
    core_terms: AbstractSet[str] = frozenset(),
    low_value_terms: AbstractSet[str] = LOW_VALUE_TERMS,
) -> int:
    word = word.lower()
    if overrides and word in overrides:
        return overrides[word]
    if word in low_value_terms or _NUMERIC_RE.match(word):
        return 0
    if word in core_terms or word in CORE_INTENT_VERBS:
        return 3
    if word in DOMAIN_NOUNS:
        return 2
    return 1


def semantic_relevance_factor(
    keywords: Sequence[str],
    overrides: Optional[Mapping[str, int]] = None,
    core_terms: AbstractSet[str] = frozenset(),
    low_value_terms: AbstractSet[str] = LOW_VALUE_TERMS,
) -> float:
    if not keywords:
        return 0.0
    total = sum(token_relevance(w, overrides, core_terms, low_value_terms) for w in keywords)
    return _unit(total / (len(keywords) * RELEVANCE_MAX))


def length_factor(length: int) -> float:
    return LENGTH_SCORES.get(length, 0.0)


def brand_hybrid_factor(keywords: Sequence[str], brand: BrandClassification) -> float:
    if brand.tag is BrandTag.COMPETITOR:
        return COMPETITOR_SCORE
    if brand.tag is BrandTag.GENERIC:
        return GENERIC_SCORE
    generic_words = [w for w in keywords if w not in brand.brand_words]
    return HYBRID_SCORE if generic_words else PURE_BRAND_SCORE


def novelty_factor(keywords: Sequence[str], tier: StrengthTier, corpus: CorpusStats) -> float:
    base = NOVELTY_BY_TIER.get(tier, 0.0)
    if not keywords:
        return base
    duplicated_share = sum(1 for w in keywords if corpus.is_duplicated(w)) / len(keywords)
    return _unit(base * (1 - DUPLICATE_PENALTY * duplicated_share))


def score_priority(
    keywords: Sequence[str],
    tier: StrengthTier,
    brand: BrandClassification,
    noise_confidence: float,
    corpus: CorpusStats,
    weights: PriorityWeights = PriorityWeights.default(),
    overrides: Optional[Mapping[str, int]] = None,
    core_terms: AbstractSet[str] = frozenset(),
    low_value_terms: AbstractSet[str] = LOW_VALUE_TERMS,
) -> PriorityScore:
    factors = {
        "semantic_relevance": semantic_relevance_factor(keywords, overrides, core_terms, low_value_terms),
        "length": length_factor(len(keywords)),
        "brand_hybrid": brand_hybrid_factor(keywords, brand),
        "novelty": novelty_factor(keywords, tier, corpus),
        "noise_inverse": _unit(1.0 - noise_confidence),
    }
    factors = {name: round(value, 4) for name, value in factors.items()}
    return PriorityScore(score=weighted_score(factors, weights), factors=factors)


def weighted_score(factors: Mapping[str, float], weights: PriorityWeights) -> int:
    weight_map = {name: max(0.0, w) for name, w in weights.as_dict().items()}
    total_weight = sum(weight_map.values())
    if total_weight <= 0:
        return 0
    composite = sum(weight_map[name] * _unit(factors.get(name, 0.0)) for name in weight_map)
    score = round_half_up(100 * composite / total_weight)
    return max(0, min(100, score))


def priority_tier(score: int) -> str:
    if score >= 70:
        return "high"
    if score >= 40:
        return "medium"
    return "low"


def round_half_up(value: float) -> int:
    value = round(value, 9)
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))
