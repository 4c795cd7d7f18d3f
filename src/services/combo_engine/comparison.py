"""
Baseline vs draft comparison of two combo audits.

All functions are pure transformations of existing results; nothing is
reclassified. Tier numbers run from 1 (title consecutive) to 8 (missing),
so a lower number is better.
"""

from typing import Dict, List, Sequence, Tuple

from models.domain import StrengthTier, tier_number
from models.schemas import (
    Combo,
    ComboAuditResult,
    ComboDiff,
    ComboTierChange,
    CoverageStats,
    KeywordImpact,
    StrengthenOpportunity,
    TierBucket,
    TierDistribution,
)
from services.combo_engine.priority import round_half_up

SAMPLE_COMBO_LIMIT = 3

_TIER1 = (StrengthTier.TITLE_CONSECUTIVE,)
_TIER2 = (StrengthTier.TITLE_NON_CONSECUTIVE, StrengthTier.TITLE_KEYWORDS_CROSS)


def diff_combos(baseline: Sequence[Combo], draft: Sequence[Combo]) -> ComboDiff:
    baseline_map = {_combo_key(c): c for c in baseline}
    draft_map = {_combo_key(c): c for c in draft}

    added = [c for c in draft if _combo_key(c) not in baseline_map]
    removed = [c for c in baseline if _combo_key(c) not in draft_map]
    upgrades: List[ComboTierChange] = []
    downgrades: List[ComboTierChange] = []
    unchanged: List[Combo] = []

    for base in baseline:
        new = draft_map.get(_combo_key(base))
        if new is None:
            continue
        base_tier, new_tier = tier_number(base.strength_tier), tier_number(new.strength_tier)
        if base_tier == new_tier:
            unchanged.append(new)
            continue
        change = ComboTierChange(
            text=new.text,
            baseline_tier=base_tier,
            draft_tier=new_tier,
            baseline_strength=base.strength_tier,
            draft_strength=new.strength_tier,
            baseline_score=base.strength_score,
            draft_score=new.strength_score,
            improvement=base_tier - new_tier,
        )
        (upgrades if change.improvement > 0 else downgrades).append(change)

    added.sort(key=lambda c: -c.strength_score)
    removed.sort(key=lambda c: -c.strength_score)
    upgrades.sort(key=lambda c: -c.improvement)
    downgrades.sort(key=lambda c: c.improvement)

    return ComboDiff(
        added=added,
        removed=removed,
        tier_upgrades=upgrades,
        tier_downgrades=downgrades,
        unchanged=unchanged,
    )


def calculate_tier_distribution(baseline: ComboAuditResult, draft: ComboAuditResult) -> TierDistribution:
    """Collapse the generic-combo tier histogram into tier 1, tier 2 and the rest."""
    base = _bucket_counts(baseline.stats_by_brand_type.generic)
    new = _bucket_counts(draft.stats_by_brand_type.generic)
    return TierDistribution(
        **{
            name: TierBucket(baseline=base[name], draft=new[name], delta=new[name] - base[name])
            for name in ("tier1", "tier2", "tier3_plus")
        }
    )


def analyze_keyword_impact(baseline: ComboAuditResult, draft: ComboAuditResult) -> List[KeywordImpact]:
    base_words = _metadata_words(baseline)
    draft_words = _metadata_words(draft)

    impacts = [
        impact
        for impact in (
            *(_impact(w, "added", draft.combos) for w in draft_words if w not in base_words),
            *(_impact(w, "removed", baseline.combos) for w in base_words if w not in draft_words),
        )
        if impact is not None
    ]
    impacts.sort(key=lambda i: -i.combo_count)
    return impacts


def extract_strengthen_opportunities(draft: ComboAuditResult) -> List[StrengthenOpportunity]:
    opportunities = [
        StrengthenOpportunity(
            combo=combo,
            current_tier=tier_number(combo.strength_tier),
            suggestion=combo.strengthening_suggestion,
        )
        for combo in draft.combos
        if combo.can_strengthen and combo.strengthening_suggestion
    ]
    # Closest to title-consecutive first.
    opportunities.sort(key=lambda o: o.current_tier)
    return opportunities


def _combo_key(combo: Combo) -> Tuple[str, ...]:
    # Word order follows placement, which may differ between audits.
    return tuple(sorted(w.lower() for w in combo.text.split()))


def _bucket_counts(stats: CoverageStats) -> Dict[str, int]:
    counts = stats.tier_counts
    tier1 = sum(counts.get(t.value, 0) for t in _TIER1)
    tier2 = sum(counts.get(t.value, 0) for t in _TIER2)
    return {"tier1": tier1, "tier2": tier2, "tier3_plus": sum(counts.values()) - tier1 - tier2}


def _metadata_words(result: ComboAuditResult) -> List[str]:
    tokens = result.token_stats
    words = [*tokens.title_tokens, *tokens.subtitle_tokens, *tokens.keyword_tokens]
    return list(dict.fromkeys(w.lower() for w in words))


def _impact(keyword: str, change: str, combos: Sequence[Combo]):
    matching = [c for c in combos if any(k.lower() == keyword for k in c.keywords)]
    if not matching:
        return None
    avg = sum(tier_number(c.strength_tier) for c in matching) / len(matching)
    return KeywordImpact(
        keyword=keyword,
        added_or_removed=change,
        combo_count=len(matching),
        avg_tier=round_half_up(avg * 10) / 10,
        sample_combos=[c.text for c in matching[:SAMPLE_COMBO_LIMIT]],
    )
