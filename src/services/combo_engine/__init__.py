"""
Keyword combination coverage engine.

This module enumerates 2-4 word combos from app metadata (title, subtitle
and keyword pool), classifies each combo into a ranking strength tier, tags
brand/competitor/noise combos, scores priority, and aggregates coverage.
"""

from services.combo_engine.models import (
    BrandClassification,
    CandidateCombo,
    CorpusStats,
    PriorityScore,
    TierClassification,
    Token,
)
from services.combo_engine.orchestrator import analyze_combos, run_pipeline
from services.combo_engine.tokenizer import normalize_text, tokenize
from services.combo_engine.generator import CapacityExceeded, generate_combos
from services.combo_engine.tier_classifier import classify, classify_combo_text
from services.combo_engine.brand_classifier import (
    classify_brand,
    extract_canonical_brand,
    generate_brand_aliases,
    noise_confidence,
)
from services.combo_engine.priority import priority_tier, score_priority
from services.combo_engine.coverage import aggregate, aggregate_by_brand_type
from services.combo_engine.comparison import (
    analyze_keyword_impact,
    calculate_tier_distribution,
    diff_combos,
    extract_strengthen_opportunities,
)
from services.combo_engine.queries import (
    count_combos_with_keyword,
    filter_combos_by_keyword,
    group_combos_by_length,
    select_top_combos,
)
from services.combo_engine.config import EngineConfig, PriorityWeights, build_engine_config

__all__ = [
    # Data models
    "BrandClassification",
    "CandidateCombo",
    "CorpusStats",
    "PriorityScore",
    "TierClassification",
    "Token",

    # Main API functions
    "analyze_combos",
    "run_pipeline",

    # Pipeline stages
    "normalize_text",
    "tokenize",
    "CapacityExceeded",
    "generate_combos",
    "classify",
    "classify_combo_text",
    "classify_brand",
    "extract_canonical_brand",
    "generate_brand_aliases",
    "noise_confidence",
    "priority_tier",
    "score_priority",
    "aggregate",
    "aggregate_by_brand_type",

    # Comparison and queries
    "analyze_keyword_impact",
    "calculate_tier_distribution",
    "diff_combos",
    "extract_strengthen_opportunities",
    "count_combos_with_keyword",
    "filter_combos_by_keyword",
    "group_combos_by_length",
    "select_top_combos",

    # Configuration
    "EngineConfig",
    "PriorityWeights",
    "build_engine_config",
]
