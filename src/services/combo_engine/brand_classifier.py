"""
Brand, competitor and noise classification for combos.

Brand tagging is orthogonal to the strength tier: a combo can sit in the
strongest tier and still be a pure brand phrase. Noise is a separate score
used to keep low-value combos out of headline counts.
"""

import re
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from constants import LOW_VALUE_TERMS, TIME_BOUND_TERMS
from models.domain import BrandTag
from services.combo_engine.models import BrandClassification
from services.combo_engine.tokenizer import normalize_text

BRAND_ALIAS_SUFFIXES = ("app", "language", "learning", "lessons", "course")
BRAND_ALIAS_PREFIXES = ("the", "official")

LOW_VALUE_WEIGHT = 0.7
SINGLE_MEANINGFUL_PENALTY = 0.3
TIME_BOUND_PENALTY = 0.2

_NUMERIC_RE = re.compile(r"^\d+[\w-]*$")


def normalize_aliases(aliases: Iterable[str]) -> Tuple[str, ...]:
    seen, out = set(), []
    for alias in aliases or ():
        value = normalize_text(alias or "")
        if not value or value in seen:
            continue
        seen.add(value)
        out.append(value)
    return tuple(out)


def generate_brand_aliases(brand: Optional[str]) -> List[str]:
    normalized = normalize_text(brand or "")
    if not normalized:
        return []
    aliases = [normalized]
    aliases.extend(f"{normalized} {suffix}" for suffix in BRAND_ALIAS_SUFFIXES)
    aliases.extend(f"{prefix} {normalized}" for prefix in BRAND_ALIAS_PREFIXES)
    return aliases


def extract_canonical_brand(title: str) -> str:
    """First word of the app title, e.g. "Pimsleur Language Learning" -> "pimsleur"."""
    words = normalize_text(title).split()
    return words[0] if words else ""


def classify_brand(
    keywords: Sequence[str],
    brand_aliases: Sequence[str],
    competitor_aliases: Sequence[str],
) -> BrandClassification:
    words = [w.lower() for w in keywords]

    brand_hits = _matching_aliases(words, brand_aliases)
    if brand_hits:
        return BrandClassification(
            tag=BrandTag.BRAND,
            matched_alias=_best_alias(brand_hits),
            brand_words=_covered_words(words, brand_hits),
        )

    competitor_hits = _matching_aliases(words, competitor_aliases)
    if competitor_hits:
        return BrandClassification(tag=BrandTag.COMPETITOR, matched_alias=_best_alias(competitor_hits))

    return BrandClassification(tag=BrandTag.GENERIC)


def noise_confidence(
    keywords: Sequence[str],
    stopwords: AbstractSet[str],
    low_value_terms: AbstractSet[str] = LOW_VALUE_TERMS,
) -> float:
    if not keywords:
        return 1.0
    words = [w.lower() for w in keywords]
    low_value = [w for w in words if _is_low_value(w, stopwords, low_value_terms)]
    meaningful = len(words) - len(low_value)

    score = LOW_VALUE_WEIGHT * (len(low_value) / len(words))
    if meaningful <= 1:
        score += SINGLE_MEANINGFUL_PENALTY
    if any(w in TIME_BOUND_TERMS for w in words):
        score += TIME_BOUND_PENALTY
    return round(min(1.0, score), 4)


def is_noise(confidence: float, threshold: float) -> bool:
    return confidence > threshold


def _is_low_value(word: str, stopwords: AbstractSet[str], low_value_terms: AbstractSet[str]) -> bool:
    return word in stopwords or word in low_value_terms or bool(_NUMERIC_RE.match(word))


def _matching_aliases(words: List[str], aliases: Sequence[str]) -> List[Tuple[str, ...]]:
    # Combo words may come from different elements, so match on the word set.
    present = set(words)
    hits = []
    for alias in aliases:
        parts = tuple(alias.split())
        if parts and present.issuperset(parts):
            hits.append(parts)
    return hits


def _best_alias(hits: List[Tuple[str, ...]]) -> str:
    best = sorted(hits, key=lambda parts: (-len(parts), " ".join(parts)))[0]
    return " ".join(best)


def _covered_words(words: List[str], hits: List[Tuple[str, ...]]) -> FrozenSet[str]:
    covered = set()
    for parts in hits:
        covered.update(w for w in parts if w in words)
    return frozenset(covered)
