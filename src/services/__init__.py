from .combo_engine import CapacityExceeded, analyze_combos

__all__ = [
    "CapacityExceeded",
    "analyze_combos",
]
