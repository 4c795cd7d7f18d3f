"""
Main orchestration for the combo coverage pipeline.

This module runs tokenization, candidate generation, tier classification,
brand tagging, priority scoring and coverage aggregation for one
title/subtitle pair and returns a serializable result.
"""

import logging
from typing import List, Optional

from config import Settings
from models.domain import BrandTag, TokenSource
from models.schemas import (
    Combo,
    ComboAuditRequest,
    ComboAuditResult,
    PriorityFactors,
    RuleSet,
    TokenStats,
)
from services.combo_engine.brand_classifier import classify_brand, is_noise, noise_confidence
from services.combo_engine.config import EngineConfig, build_engine_config
from services.combo_engine.coverage import aggregate, aggregate_by_brand_type
from services.combo_engine.generator import generate_combos
from services.combo_engine.models import CandidateCombo, CorpusStats, Token
from services.combo_engine.priority import score_priority
from services.combo_engine.rule_sets import load_rule_set
from services.combo_engine.tier_classifier import classify
from services.combo_engine.tokenizer import build_corpus_stats, duplicated_tokens, tokenize, unique_texts

logger = logging.getLogger(__name__)


def analyze_combos(
    request: ComboAuditRequest,
    settings: Optional[Settings] = None,
    rule_set: Optional[RuleSet] = None,
) -> ComboAuditResult:
    """
    Main entry point for combo coverage analysis.

    1. Resolve settings and the vertical rule set
    2. Build an immutable engine config
    3. Run the pipeline and aggregate coverage
    """
    settings = settings or Settings()
    rule_set = rule_set or _resolve_rule_set(request.rule_set or settings.default_rule_set)
    config = build_engine_config(request, settings, rule_set)
    return run_pipeline(request.title, request.subtitle, request.keywords, config)


def run_pipeline(title: str, subtitle: str, keywords: str, config: EngineConfig) -> ComboAuditResult:
    title_tokens = tokenize(title, TokenSource.TITLE, config.stopwords)
    subtitle_tokens = tokenize(subtitle, TokenSource.SUBTITLE, config.stopwords)
    keyword_tokens = tokenize(keywords, TokenSource.KEYWORDS, config.stopwords)
    corpus = build_corpus_stats(title_tokens, subtitle_tokens, keyword_tokens)

    candidates = generate_combos(
        title_tokens,
        subtitle_tokens,
        keyword_tokens,
        config.target_keywords,
        min_length=config.min_length,
        max_length=config.max_length,
        max_combos=config.max_combos,
        include_cross_element=config.include_cross_element,
    )
    logger.info(f"Scoring {len(candidates)} candidate combos")

    combos = [
        build_combo(c, title_tokens, subtitle_tokens, keyword_tokens, corpus, config)
        for c in candidates
    ]
    stats = aggregate(combos)
    logger.info(
        f"Combo coverage: {stats.existing}/{stats.total_possible} existing "
        f"({stats.coverage_pct}%), {stats.noise_count} noise"
    )

    return ComboAuditResult(
        combos=combos,
        stats=stats,
        stats_by_brand_type=aggregate_by_brand_type(combos),
        token_stats=_token_stats(title_tokens, subtitle_tokens, keyword_tokens, corpus),
        rule_set=config.rule_set_name,
    )


def build_combo(
    candidate: CandidateCombo,
    title_tokens: List[Token],
    subtitle_tokens: List[Token],
    keyword_tokens: List[Token],
    corpus: CorpusStats,
    config: EngineConfig,
) -> Combo:
    tier = classify(candidate.keywords, title_tokens, subtitle_tokens, keyword_tokens)
    keywords = list(tier.keywords or candidate.keywords)
    brand = classify_brand(keywords, config.brand_aliases, config.competitor_aliases)
    noise = noise_confidence(keywords, config.stopwords, config.low_value_terms)
    priority = score_priority(
        keywords,
        tier.strength_tier,
        brand,
        noise,
        corpus,
        config.weights,
        config.token_relevance,
        config.core_terms,
        config.low_value_terms,
    )

    is_brand = brand.tag is BrandTag.BRAND
    return Combo(
        text=" ".join(keywords),
        keywords=keywords,
        length=candidate.length,
        exists=tier.exists,
        source=tier.source,
        strength_tier=tier.strength_tier,
        strength_score=tier.strength_score,
        is_consecutive=tier.is_consecutive,
        brand_tag=brand.tag,
        matched_brand_alias=brand.matched_alias if is_brand else None,
        matched_competitor=None if is_brand else brand.matched_alias,
        noise_confidence=noise,
        is_noise=is_noise(noise, config.noise_threshold),
        priority_score=priority.score,
        priority_factors=PriorityFactors(**priority.factors),
        can_strengthen=tier.can_strengthen,
        strengthening_suggestion=tier.strengthening_suggestion,
    )


def _resolve_rule_set(name: Optional[str]) -> Optional[RuleSet]:
    if not name:
        return None
    logger.debug(f"Using rule set '{name}'")
    return load_rule_set(name)


def _token_stats(
    title_tokens: List[Token],
    subtitle_tokens: List[Token],
    keyword_tokens: List[Token],
    corpus: CorpusStats,
) -> TokenStats:
    return TokenStats(
        unique_tokens=len(corpus.token_frequency),
        duplicated_tokens=duplicated_tokens(corpus),
        title_tokens=unique_texts(title_tokens),
        subtitle_tokens=unique_texts(subtitle_tokens),
        keyword_tokens=unique_texts(keyword_tokens),
    )
