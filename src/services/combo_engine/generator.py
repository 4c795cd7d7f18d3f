"""
Candidate combo generation.

Combos are combinations (not permutations) of distinct token texts drawn
from title, subtitle, keyword pool and vertical target keywords. Word order
inside a combo follows first appearance across those sources; the sorted
word tuple is kept separately as the deduplication key. Classification may
reorder the words to the arrangement found adjacent in an element.
"""

import itertools
import logging
from math import comb
from typing import Iterable, List, Sequence

from services.combo_engine.models import CandidateCombo, Token
from services.combo_engine.tokenizer import unique_texts

logger = logging.getLogger(__name__)

MIN_COMBO_LENGTH = 2
MAX_COMBO_LENGTH = 4


class CapacityExceeded(ValueError):
    """Raised when the token pool would produce more combos than allowed."""

    def __init__(self, candidate_count: int, ceiling: int):
        self.candidate_count = candidate_count
        self.ceiling = ceiling
        super().__init__(
            f"{candidate_count} candidate combos exceeds the configured ceiling of {ceiling}"
        )


def count_candidates(pool_size: int, min_length: int = MIN_COMBO_LENGTH, max_length: int = MAX_COMBO_LENGTH) -> int:
    lo, hi = _length_bounds(min_length, max_length)
    return sum(comb(pool_size, k) for k in range(lo, hi + 1))


def generate_combos(
    title_tokens: Sequence[Token],
    subtitle_tokens: Sequence[Token],
    keyword_tokens: Sequence[Token] = (),
    target_keywords: Iterable[str] = (),
    *,
    min_length: int = MIN_COMBO_LENGTH,
    max_length: int = MAX_COMBO_LENGTH,
    max_combos: int = 1500,
    include_cross_element: bool = True,
) -> List[CandidateCombo]:
    sources = [
        set(unique_texts(title_tokens)),
        set(unique_texts(subtitle_tokens)),
        set(unique_texts(keyword_tokens)),
    ]
    targets = [t for t in target_keywords if t]
    sources.append(set(targets))

    pool = _ordered_pool(title_tokens, subtitle_tokens, keyword_tokens, targets)
    lo, hi = _length_bounds(min_length, max_length)

    candidate_count = count_candidates(len(pool), lo, hi)
    if candidate_count > max_combos:
        raise CapacityExceeded(candidate_count, max_combos)

    combos: List[CandidateCombo] = []
    for length in range(lo, min(hi, len(pool)) + 1):
        for indices in itertools.combinations(range(len(pool)), length):
            words = tuple(pool[i] for i in indices)
            if not include_cross_element and not _single_source(words, sources):
                continue
            combos.append(CandidateCombo(key=tuple(sorted(words)), keywords=words))

    logger.debug(f"Generated {len(combos)} combos from a pool of {len(pool)} tokens")
    return combos


def _ordered_pool(
    title_tokens: Sequence[Token],
    subtitle_tokens: Sequence[Token],
    keyword_tokens: Sequence[Token],
    targets: Sequence[str],
) -> List[str]:
    pool = unique_texts([*title_tokens, *subtitle_tokens, *keyword_tokens])
    seen = set(pool)
    for word in targets:
        if word not in seen:
            seen.add(word)
            pool.append(word)
    return pool


def _single_source(words: Sequence[str], sources: Sequence[set]) -> bool:
    return any(all(w in source for w in words) for source in sources if source)


def _length_bounds(min_length: int, max_length: int) -> tuple[int, int]:
    return max(min_length, MIN_COMBO_LENGTH), min(max_length, MAX_COMBO_LENGTH)
