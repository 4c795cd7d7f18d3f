import enum
from typing import Dict


class TokenSource(str, enum.Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    KEYWORDS = "keywords"


class ComboSource(str, enum.Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    KEYWORDS = "keywords"
    BOTH = "both"
    CROSS = "cross"
    MISSING = "missing"


class StrengthTier(str, enum.Enum):
    TITLE_CONSECUTIVE = "title_consecutive"
    TITLE_NON_CONSECUTIVE = "title_non_consecutive"
    TITLE_KEYWORDS_CROSS = "title_keywords_cross"
    CROSS_ELEMENT = "cross_element"
    KEYWORDS_CONSECUTIVE = "keywords_consecutive"
    SUBTITLE_CONSECUTIVE = "subtitle_consecutive"
    KEYWORDS_SUBTITLE_CROSS = "keywords_subtitle_cross"
    KEYWORDS_NON_CONSECUTIVE = "keywords_non_consecutive"
    SUBTITLE_NON_CONSECUTIVE = "subtitle_non_consecutive"
    THREE_WAY_CROSS = "three_way_cross"
    MISSING = "missing"


class BrandTag(str, enum.Enum):
    BRAND = "brand"
    GENERIC = "generic"
    COMPETITOR = "competitor"


TIER_SCORES: Dict[StrengthTier, int] = {
    StrengthTier.TITLE_CONSECUTIVE: 100,
    StrengthTier.TITLE_NON_CONSECUTIVE: 85,
    StrengthTier.TITLE_KEYWORDS_CROSS: 85,
    StrengthTier.CROSS_ELEMENT: 70,
    StrengthTier.KEYWORDS_CONSECUTIVE: 50,
    StrengthTier.SUBTITLE_CONSECUTIVE: 50,
    StrengthTier.KEYWORDS_SUBTITLE_CROSS: 35,
    StrengthTier.KEYWORDS_NON_CONSECUTIVE: 25,
    StrengthTier.SUBTITLE_NON_CONSECUTIVE: 25,
    StrengthTier.THREE_WAY_CROSS: 15,
    StrengthTier.MISSING: 0,
}

# Histogram keys; MISSING is reported through the missing count instead.
EXISTING_TIERS = tuple(t for t in StrengthTier if t is not StrengthTier.MISSING)

TIER_NUMBERS: Dict[StrengthTier, int] = {
    StrengthTier.TITLE_CONSECUTIVE: 1,
    StrengthTier.TITLE_NON_CONSECUTIVE: 2,
    StrengthTier.TITLE_KEYWORDS_CROSS: 2,
    StrengthTier.CROSS_ELEMENT: 3,
    StrengthTier.KEYWORDS_CONSECUTIVE: 4,
    StrengthTier.SUBTITLE_CONSECUTIVE: 4,
    StrengthTier.KEYWORDS_SUBTITLE_CROSS: 5,
    StrengthTier.KEYWORDS_NON_CONSECUTIVE: 6,
    StrengthTier.SUBTITLE_NON_CONSECUTIVE: 6,
    StrengthTier.THREE_WAY_CROSS: 7,
    StrengthTier.MISSING: 8,
}

WORST_TIER_NUMBER = 8


def tier_score(tier: StrengthTier) -> int:
    return TIER_SCORES[tier]


def tier_number(tier: StrengthTier) -> int:
    return TIER_NUMBERS.get(tier, WORST_TIER_NUMBER)


def tier_label(number: int) -> str:
    if number == 1:
        return "Excellent"
    if number == 2:
        return "Good"
    if number <= 4:
        return "Medium"
    return "Poor"
