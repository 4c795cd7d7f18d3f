"""
Existence and strength-tier classification.

Each combo is placed in exactly one strength tier based on which metadata
elements contain its words and whether they sit next to each other. The
rules form a flat decision table evaluated top to bottom; the first rule
that matches decides the tier.
"""

from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from models.domain import TIER_SCORES, ComboSource, StrengthTier, TokenSource
from services.combo_engine.models import TierClassification, Token
from services.combo_engine.tokenizer import tokenize

STRENGTHENING_SUGGESTIONS: Dict[StrengthTier, str] = {
    StrengthTier.TITLE_NON_CONSECUTIVE: "Make words consecutive in title for maximum ranking power",
    StrengthTier.TITLE_KEYWORDS_CROSS: "Move keyword-field words into title",
    StrengthTier.CROSS_ELEMENT: "Move all keywords to title to strengthen",
    StrengthTier.KEYWORDS_CONSECUTIVE: "Move to title to strengthen",
    StrengthTier.SUBTITLE_CONSECUTIVE: "Move to title to strengthen",
    StrengthTier.KEYWORDS_SUBTITLE_CROSS: "Move all keywords to title",
    StrengthTier.KEYWORDS_NON_CONSECUTIVE: "Move to title and make consecutive",
    StrengthTier.SUBTITLE_NON_CONSECUTIVE: "Move to title and make consecutive",
    StrengthTier.THREE_WAY_CROSS: "Consolidate all keywords into title",
}

_CONSECUTIVE_TIERS = {
    StrengthTier.TITLE_CONSECUTIVE,
    StrengthTier.KEYWORDS_CONSECUTIVE,
    StrengthTier.SUBTITLE_CONSECUTIVE,
}

_TIER_SOURCES = {
    StrengthTier.TITLE_CONSECUTIVE: ComboSource.TITLE,
    StrengthTier.TITLE_NON_CONSECUTIVE: ComboSource.TITLE,
    StrengthTier.TITLE_KEYWORDS_CROSS: ComboSource.CROSS,
    StrengthTier.CROSS_ELEMENT: ComboSource.CROSS,
    StrengthTier.KEYWORDS_CONSECUTIVE: ComboSource.KEYWORDS,
    StrengthTier.SUBTITLE_CONSECUTIVE: ComboSource.SUBTITLE,
    StrengthTier.KEYWORDS_SUBTITLE_CROSS: ComboSource.CROSS,
    StrengthTier.KEYWORDS_NON_CONSECUTIVE: ComboSource.KEYWORDS,
    StrengthTier.SUBTITLE_NON_CONSECUTIVE: ComboSource.SUBTITLE,
    StrengthTier.THREE_WAY_CROSS: ComboSource.CROSS,
    StrengthTier.MISSING: ComboSource.MISSING,
}


def classify(
    combo_keywords: Sequence[str],
    title_tokens: Sequence[Token],
    subtitle_tokens: Sequence[Token],
    keyword_tokens: Sequence[Token] = (),
) -> TierClassification:
    words = [w.lower().strip() for w in combo_keywords]
    title = [t.text for t in title_tokens]
    subtitle = [t.text for t in subtitle_tokens]
    pool = [t.text for t in keyword_tokens]

    tier, arrangement = _decide_tier(words, title, subtitle, pool)
    source = _TIER_SOURCES[tier]
    if source is ComboSource.TITLE and set(words) <= set(subtitle):
        source = ComboSource.BOTH

    exists = tier is not StrengthTier.MISSING
    can_strengthen = exists and tier is not StrengthTier.TITLE_CONSECUTIVE
    return TierClassification(
        exists=exists,
        source=source,
        strength_tier=tier,
        strength_score=TIER_SCORES[tier],
        is_consecutive=tier in _CONSECUTIVE_TIERS,
        can_strengthen=can_strengthen,
        strengthening_suggestion=STRENGTHENING_SUGGESTIONS.get(tier) if can_strengthen else None,
        keywords=arrangement,
    )


def classify_combo_text(
    combo_text: str,
    title: str,
    subtitle: str,
    keywords: str = "",
    stopwords: Optional[AbstractSet[str]] = None,
) -> TierClassification:
    """Classify a free-text combo against raw metadata strings."""
    return classify(
        combo_text.split(),
        tokenize(title, TokenSource.TITLE, stopwords),
        tokenize(subtitle, TokenSource.SUBTITLE, stopwords),
        tokenize(keywords, TokenSource.KEYWORDS, stopwords),
    )


def _decide_tier(
    words: List[str],
    title: List[str],
    subtitle: List[str],
    pool: List[str],
) -> Tuple[StrengthTier, Tuple[str, ...]]:
    """Return the tier and the word order that evidences it."""
    given = tuple(words)
    if not words:
        return StrengthTier.MISSING, given
    in_t, in_s, in_k = set(title), set(subtitle), set(pool)

    rest = [w for w in words if w not in in_t]
    has_title = len(rest) < len(words)
    all_sub = all(w in in_s for w in words)
    all_kw = all(w in in_k for w in words)

    if not rest:
        window = _find_window(words, title)
        if window:
            return StrengthTier.TITLE_CONSECUTIVE, window
        return StrengthTier.TITLE_NON_CONSECUTIVE, given
    if has_title and all(w in in_k and w not in in_s for w in rest):
        return StrengthTier.TITLE_KEYWORDS_CROSS, given
    if has_title and all(w in in_s for w in rest):
        return StrengthTier.CROSS_ELEMENT, given
    if all_kw:
        window = _find_window(words, pool)
        if window:
            return StrengthTier.KEYWORDS_CONSECUTIVE, window
    if all_sub:
        window = _find_window(words, subtitle)
        if window:
            return StrengthTier.SUBTITLE_CONSECUTIVE, window

    in_weak_fields = all(w in in_s or w in in_k for w in rest)
    if not has_title and in_weak_fields and not all_sub and not all_kw:
        return StrengthTier.KEYWORDS_SUBTITLE_CROSS, given
    if all_kw:
        return StrengthTier.KEYWORDS_NON_CONSECUTIVE, given
    if all_sub:
        return StrengthTier.SUBTITLE_NON_CONSECUTIVE, given
    if has_title and in_weak_fields:
        return StrengthTier.THREE_WAY_CROSS, given
    return StrengthTier.MISSING, given


def _find_window(words: Sequence[str], sequence: Sequence[str]) -> Optional[Tuple[str, ...]]:
    """First contiguous run of ``sequence`` made of exactly ``words``, in any order."""
    target = set(words)
    n = len(words)
    if n == 0 or len(target) != n:
        return None
    for i in range(len(sequence) - n + 1):
        window = tuple(sequence[i:i + n])
        if set(window) == target:
            return window
    return None
