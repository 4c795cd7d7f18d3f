from typing import Dict, List, Sequence

from models.schemas import Combo, TopCombos
from services.combo_engine.priority import priority_tier

DEFAULT_TOP_LIMIT = 500


def filter_combos_by_keyword(combos: Sequence[Combo], keyword: str) -> List[Combo]:
    """Combos with at least one word containing ``keyword`` (case-insensitive substring)."""
    needle = keyword.lower()
    return [c for c in combos if any(needle in k.lower() for k in c.keywords)]


def count_combos_with_keyword(combos: Sequence[Combo], keyword: str) -> int:
    return len(filter_combos_by_keyword(combos, keyword))


def group_combos_by_length(combos: Sequence[Combo]) -> Dict[int, List[Combo]]:
    groups: Dict[int, List[Combo]] = {}
    for combo in combos:
        groups.setdefault(combo.length, []).append(combo)
    return groups


def select_top_combos(combos: Sequence[Combo], limit: int = DEFAULT_TOP_LIMIT) -> TopCombos:
    # sorted() is stable, so equal scores keep generation order
    ranked = sorted(combos, key=lambda c: -c.priority_score)
    return TopCombos(
        top_combos=ranked[:max(0, limit)],
        total_generated=len(combos),
        limit_reached=len(combos) > limit,
    )


__all__ = [
    "DEFAULT_TOP_LIMIT",
    "count_combos_with_keyword",
    "filter_combos_by_keyword",
    "group_combos_by_length",
    "priority_tier",
    "select_top_combos",
]
