from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping, Optional

from config import Settings
from constants import DEFAULT_STOPWORDS, LOW_VALUE_TERMS
from models.schemas import ComboAuditRequest, RuleSet
from services.combo_engine.brand_classifier import generate_brand_aliases, normalize_aliases
from services.combo_engine.tokenizer import normalize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriorityWeights:
    semantic_relevance: float
    length: float
    brand_hybrid: float
    novelty: float
    noise_inverse: float

    @classmethod
    def default(cls) -> "PriorityWeights":
        return cls(0.30, 0.25, 0.20, 0.15, 0.10)

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class EngineConfig:
    stopwords: frozenset[str]
    brand_aliases: tuple[str, ...] = ()
    competitor_aliases: tuple[str, ...] = ()
    noise_threshold: float = 0.5
    max_combos: int = 1500
    min_length: int = 2
    max_length: int = 4
    include_cross_element: bool = True
    weights: PriorityWeights = PriorityWeights.default()
    token_relevance: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    core_terms: frozenset[str] = frozenset()
    low_value_terms: frozenset[str] = LOW_VALUE_TERMS
    target_keywords: tuple[str, ...] = ()
    rule_set_name: Optional[str] = None

    @classmethod
    def default(cls) -> "EngineConfig":
        return cls(stopwords=DEFAULT_STOPWORDS)


def merge_weights(overrides: dict[str, Any] | None) -> PriorityWeights:
    base = PriorityWeights.default()
    known = {f.name for f in fields(base)}
    unknown = sorted(set(overrides or {}) - known)
    if unknown:
        logger.warning(f"Ignoring unknown priority weights: {unknown}")
    values = {**base.__dict__, **{k: float(v) for k, v in (overrides or {}).items() if k in known and v is not None}}
    return PriorityWeights(**values)


def build_engine_config(
    request: ComboAuditRequest,
    settings: Settings,
    rule_set: RuleSet | None = None,
) -> EngineConfig:
    stopwords = _stopwords(request.stopwords)
    brand_aliases = normalize_aliases([*request.brand_aliases, *generate_brand_aliases(request.brand_name)])
    competitors = [*request.competitor_aliases, *(rule_set.competitor_aliases if rule_set else ())]

    threshold = request.noise_threshold
    if threshold is None:
        threshold = settings.noise_threshold

    return EngineConfig(
        stopwords=stopwords,
        brand_aliases=brand_aliases,
        competitor_aliases=normalize_aliases(competitors),
        noise_threshold=threshold,
        max_combos=settings.max_combos,
        min_length=settings.min_combo_length,
        max_length=settings.max_combo_length,
        include_cross_element=request.include_cross_element,
        weights=merge_weights(rule_set.weights if rule_set else None),
        token_relevance=MappingProxyType(_relevance_overrides(rule_set)),
        core_terms=frozenset(_words(rule_set.core_terms)) if rule_set else frozenset(),
        target_keywords=_target_keywords(rule_set, stopwords),
        rule_set_name=rule_set.name if rule_set else None,
    )


def _stopwords(override: list[str] | None) -> frozenset[str]:
    if override is None:
        return DEFAULT_STOPWORDS
    return frozenset(w.strip().lower() for w in override if w and w.strip())


def _relevance_overrides(rule_set: RuleSet | None) -> dict[str, int]:
    if not rule_set:
        return {}
    result: dict[str, int] = {}
    for token, level in rule_set.token_relevance.items():
        key = normalize_text(token)
        if key:
            result[key] = max(0, min(3, int(level)))
    return result


def _target_keywords(rule_set: RuleSet | None, stopwords: frozenset[str]) -> tuple[str, ...]:
    if not rule_set:
        return ()
    words = [w for w in _words(rule_set.target_keywords) if w not in stopwords and len(w) >= 2]
    return tuple(dict.fromkeys(words))


def _words(values) -> list[str]:
    out: list[str] = []
    for value in values or ():
        out.extend(normalize_text(value).split())
    return out
