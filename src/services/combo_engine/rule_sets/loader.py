"""Rule set loader for vertical-specific scoring data."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from models.schemas import RuleSet

logger = logging.getLogger(__name__)

RULE_SETS_DIR = Path(__file__).parent


def get_rule_set_path(name: str) -> Path:
    return RULE_SETS_DIR / f"{name}.yaml"


def available_rule_sets() -> List[str]:
    return sorted(p.stem for p in RULE_SETS_DIR.glob("*.yaml"))


@lru_cache(maxsize=32)
def load_rule_set(name: str) -> RuleSet:
    path = get_rule_set_path(name)
    if not path.exists():
        raise FileNotFoundError(f"Rule set file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = _parse_yaml(content, path)
    data.setdefault("name", name)
    try:
        rule_set = RuleSet(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid rule set {path}: {exc}") from exc

    logger.debug(f"Loaded rule set '{rule_set.name}' from {path}")
    return rule_set


def _parse_yaml(content: str, path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse rule set {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Rule set {path} must be a mapping, got {type(data).__name__}")
    return data


def reload_rule_sets() -> None:
    load_rule_set.cache_clear()
