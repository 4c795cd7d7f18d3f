from models.domain import (
    EXISTING_TIERS,
    TIER_SCORES,
    BrandTag,
    ComboSource,
    StrengthTier,
    TokenSource,
    tier_label,
    tier_number,
    tier_score,
)
from models.schemas import (
    BrandTypeStats,
    Combo,
    ComboAuditRequest,
    ComboAuditResult,
    CoverageStats,
    PriorityFactors,
    RuleSet,
    TokenStats,
)

__all__ = [
    "EXISTING_TIERS",
    "TIER_SCORES",
    "BrandTag",
    "ComboSource",
    "StrengthTier",
    "TokenSource",
    "tier_label",
    "tier_number",
    "tier_score",
    "BrandTypeStats",
    "Combo",
    "ComboAuditRequest",
    "ComboAuditResult",
    "CoverageStats",
    "PriorityFactors",
    "RuleSet",
    "TokenStats",
]
