"""
Data models for the combo engine.

This module contains the intermediate structures passed between pipeline
stages: tokens, candidate combos, tier and brand classifications, and the
corpus statistics used by the priority scorer.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

from models.domain import BrandTag, ComboSource, StrengthTier, TokenSource


@dataclass(frozen=True)
class Token:
    """A kept word from one metadata element.

    Stopwords never become tokens, so ``position`` counts kept words only.
    """
    text: str
    source: TokenSource
    position: int


@dataclass(frozen=True)
class CandidateCombo:
    """A generated combo before classification.

    ``key`` is the sorted word tuple used for deduplication only;
    ``keywords`` is first-seen order across elements; the tier classifier
    replaces it with the adjacent arrangement when one exists.
    """
    key: Tuple[str, ...]
    keywords: Tuple[str, ...]

    @property
    def text(self) -> str:
        return " ".join(self.keywords)

    @property
    def length(self) -> int:
        return len(self.keywords)


@dataclass(frozen=True)
class TierClassification:
    exists: bool
    source: ComboSource
    strength_tier: StrengthTier
    strength_score: int
    is_consecutive: bool
    can_strengthen: bool
    strengthening_suggestion: Optional[str] = None
    # Positional word order; for consecutive tiers this is the matched window.
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BrandClassification:
    tag: BrandTag
    matched_alias: Optional[str] = None
    brand_words: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class CorpusStats:
    """Token frequency across title, subtitle and keyword pool."""
    token_frequency: Dict[str, int] = field(default_factory=dict)
    element_counts: Dict[str, int] = field(default_factory=dict)

    def is_duplicated(self, word: str) -> bool:
        return self.element_counts.get(word, 0) > 1


@dataclass(frozen=True)
class PriorityScore:
    score: int
    factors: Dict[str, float]
