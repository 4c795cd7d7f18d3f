from typing import Dict, Iterable, List

from models.domain import EXISTING_TIERS, BrandTag
from models.schemas import BrandTypeStats, Combo, CoverageStats
from services.combo_engine.generator import MAX_COMBO_LENGTH, MIN_COMBO_LENGTH
from services.combo_engine.priority import round_half_up


def coverage_pct(existing: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(100 * existing / total)


def aggregate(combos: Iterable[Combo]) -> CoverageStats:
    combo_list = list(combos)
    tier_counts: Dict[str, int] = {tier.value: 0 for tier in EXISTING_TIERS}
    by_length: Dict[int, int] = {n: 0 for n in range(MIN_COMBO_LENGTH, MAX_COMBO_LENGTH + 1)}
    existing = noise = headline_existing = 0

    for combo in combo_list:
        by_length[combo.length] = by_length.get(combo.length, 0) + 1
        if combo.is_noise:
            noise += 1
        if not combo.exists:
            continue
        existing += 1
        tier_counts[combo.strength_tier.value] += 1
        if not combo.is_noise:
            headline_existing += 1

    total = len(combo_list)
    headline_total = total - noise
    return CoverageStats(
        total_possible=total,
        existing=existing,
        missing=total - existing,
        coverage_pct=coverage_pct(existing, total),
        tier_counts=tier_counts,
        by_length=by_length,
        noise_count=noise,
        headline_total=headline_total,
        headline_existing=headline_existing,
        headline_coverage_pct=coverage_pct(headline_existing, headline_total),
    )


def aggregate_by_brand_type(combos: Iterable[Combo]) -> BrandTypeStats:
    combo_list: List[Combo] = list(combos)
    return BrandTypeStats(
        all=aggregate(combo_list),
        generic=aggregate(c for c in combo_list if c.brand_tag is BrandTag.GENERIC),
        brand=aggregate(c for c in combo_list if c.brand_tag is BrandTag.BRAND),
    )
