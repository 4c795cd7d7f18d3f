from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from models.domain import BrandTag, ComboSource, StrengthTier


class RuleSet(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    weights: Dict[str, float] = Field(
        default_factory=dict,
        description="Priority factor weights keyed by factor name",
    )
    token_relevance: Dict[str, int] = Field(
        default_factory=dict,
        description="Token -> relevance (0-3) overrides for this vertical",
    )
    core_terms: Tuple[str, ...] = ()
    target_keywords: Tuple[str, ...] = ()
    competitor_aliases: Tuple[str, ...] = ()

    model_config = {"frozen": True}


class ComboAuditRequest(BaseModel):
    title: str
    subtitle: str
    keywords: str = ""
    brand_name: Optional[str] = None
    brand_aliases: List[str] = Field(default_factory=list)
    competitor_aliases: List[str] = Field(default_factory=list)
    stopwords: Optional[List[str]] = None
    noise_threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    rule_set: Optional[str] = None
    include_cross_element: bool = True


class PriorityFactors(BaseModel):
    semantic_relevance: float
    length: float
    brand_hybrid: float
    novelty: float
    noise_inverse: float


class Combo(BaseModel):
    text: str
    keywords: List[str]
    length: int = Field(..., ge=2, le=4)
    exists: bool
    source: ComboSource
    strength_tier: StrengthTier
    strength_score: int
    is_consecutive: bool
    brand_tag: BrandTag
    matched_brand_alias: Optional[str] = None
    matched_competitor: Optional[str] = None
    noise_confidence: float
    is_noise: bool
    priority_score: int = Field(..., ge=0, le=100)
    priority_factors: PriorityFactors
    can_strengthen: bool
    strengthening_suggestion: Optional[str] = None


class CoverageStats(BaseModel):
    total_possible: int
    existing: int
    missing: int
    coverage_pct: int
    tier_counts: Dict[str, int]
    by_length: Dict[int, int]
    noise_count: int
    headline_total: int
    headline_existing: int
    headline_coverage_pct: int


class BrandTypeStats(BaseModel):
    all: CoverageStats
    generic: CoverageStats
    brand: CoverageStats


class TokenStats(BaseModel):
    unique_tokens: int
    duplicated_tokens: List[str]
    title_tokens: List[str]
    subtitle_tokens: List[str]
    keyword_tokens: List[str]


class ComboAuditResult(BaseModel):
    combos: List[Combo]
    stats: CoverageStats
    stats_by_brand_type: BrandTypeStats
    token_stats: TokenStats
    rule_set: Optional[str] = None


class ComboTierChange(BaseModel):
    text: str
    baseline_tier: int
    draft_tier: int
    baseline_strength: StrengthTier
    draft_strength: StrengthTier
    baseline_score: int
    draft_score: int
    improvement: int


class ComboDiff(BaseModel):
    added: List[Combo]
    removed: List[Combo]
    tier_upgrades: List[ComboTierChange]
    tier_downgrades: List[ComboTierChange]
    unchanged: List[Combo]


class TierBucket(BaseModel):
    baseline: int
    draft: int
    delta: int


class TierDistribution(BaseModel):
    tier1: TierBucket
    tier2: TierBucket
    tier3_plus: TierBucket


class KeywordImpact(BaseModel):
    keyword: str
    added_or_removed: str = Field(..., pattern="^(added|removed)$")
    combo_count: int
    avg_tier: float
    sample_combos: List[str]


class StrengthenOpportunity(BaseModel):
    combo: Combo
    current_tier: int
    suggestion: str


class TopCombos(BaseModel):
    top_combos: List[Combo]
    total_generated: int
    limit_reached: bool
