"""
Text normalization and tokenization for metadata elements.

Titles, subtitles and keyword fields are lowercased, stripped of punctuation
(internal hyphens survive), and split into ordered tokens. Stopwords and
single-character fragments are dropped before positions are assigned.
"""

import re
import unicodedata
from typing import AbstractSet, Dict, Iterable, List, Optional

from constants import DEFAULT_STOPWORDS
from models.domain import TokenSource
from services.combo_engine.models import CorpusStats, Token

MIN_TOKEN_LENGTH = 2

_PUNCT_RE = re.compile(r"[^\w\s-]", flags=re.UNICODE)
_EDGE_HYPHEN_RE = re.compile(r"(?:^-+|-+$)")


def normalize_text(text: str) -> str:
    """Lowercase, strip punctuation except internal hyphens, collapse whitespace."""
    if not text:
        return ""
    folded = unicodedata.normalize("NFKC", text).lower()
    folded = folded.replace("_", " ")
    cleaned = _PUNCT_RE.sub(" ", folded)
    words = [_EDGE_HYPHEN_RE.sub("", w) for w in cleaned.split()]
    return " ".join(w for w in words if w)


def tokenize(
    text: str,
    source: TokenSource,
    stopwords: Optional[AbstractSet[str]] = None,
) -> List[Token]:
    stop = DEFAULT_STOPWORDS if stopwords is None else stopwords
    tokens: List[Token] = []
    for word in normalize_text(text).split():
        if word in stop or len(word) < MIN_TOKEN_LENGTH:
            continue
        tokens.append(Token(text=word, source=source, position=len(tokens)))
    return tokens


def unique_texts(tokens: Iterable[Token]) -> List[str]:
    seen: Dict[str, None] = {}
    for token in tokens:
        seen.setdefault(token.text, None)
    return list(seen)


def build_corpus_stats(*token_groups: Iterable[Token]) -> CorpusStats:
    frequency: Dict[str, int] = {}
    elements: Dict[str, int] = {}
    for group in token_groups:
        group_words = set()
        for token in group:
            frequency[token.text] = frequency.get(token.text, 0) + 1
            group_words.add(token.text)
        for word in group_words:
            elements[word] = elements.get(word, 0) + 1
    return CorpusStats(token_frequency=frequency, element_counts=elements)


def duplicated_tokens(corpus: CorpusStats) -> List[str]:
    return sorted(w for w, count in corpus.element_counts.items() if count > 1)
