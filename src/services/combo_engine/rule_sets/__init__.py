"""Vertical rule sets: priority weights, token relevance and target keywords."""

from services.combo_engine.rule_sets.loader import (
    available_rule_sets,
    get_rule_set_path,
    load_rule_set,
    reload_rule_sets,
)

__all__ = ["available_rule_sets", "get_rule_set_path", "load_rule_set", "reload_rule_sets"]
