"""Shared fixtures for combo engine tests."""

import sys
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from models.domain import TIER_SCORES, BrandTag, ComboSource, StrengthTier
from models.schemas import Combo, PriorityFactors
from services.combo_engine.rule_sets import reload_rule_sets
from services.combo_engine.tier_classifier import STRENGTHENING_SUGGESTIONS


@pytest.fixture
def make_combo():
    """Build a classified Combo without running the pipeline."""

    def _make(
        text: str,
        tier: StrengthTier = StrengthTier.TITLE_CONSECUTIVE,
        brand_tag: BrandTag = BrandTag.GENERIC,
        is_noise: bool = False,
        priority_score: int = 50,
    ) -> Combo:
        exists = tier is not StrengthTier.MISSING
        can_strengthen = exists and tier is not StrengthTier.TITLE_CONSECUTIVE
        keywords = text.split()
        return Combo(
            text=text,
            keywords=keywords,
            length=len(keywords),
            exists=exists,
            source=ComboSource.CROSS if exists else ComboSource.MISSING,
            strength_tier=tier,
            strength_score=TIER_SCORES[tier],
            is_consecutive=False,
            brand_tag=brand_tag,
            noise_confidence=0.9 if is_noise else 0.0,
            is_noise=is_noise,
            priority_score=priority_score,
            priority_factors=PriorityFactors(
                semantic_relevance=0.5,
                length=0.7,
                brand_hybrid=0.6,
                novelty=0.5,
                noise_inverse=1.0,
            ),
            can_strengthen=can_strengthen,
            strengthening_suggestion=STRENGTHENING_SUGGESTIONS.get(tier) if can_strengthen else None,
        )

    return _make


@pytest.fixture
def fresh_rule_sets():
    reload_rule_sets()
    yield
    reload_rule_sets()
