from constants.relevance import (
    CORE_INTENT_VERBS,
    DOMAIN_NOUNS,
    LOW_VALUE_TERMS,
    RELEVANCE_MAX,
    TIME_BOUND_TERMS,
)
from constants.stopwords import DEFAULT_STOPWORDS

__all__ = [
    "CORE_INTENT_VERBS",
    "DEFAULT_STOPWORDS",
    "DOMAIN_NOUNS",
    "LOW_VALUE_TERMS",
    "RELEVANCE_MAX",
    "TIME_BOUND_TERMS",
]
