DEFAULT_STOPWORDS = frozenset({
    "a", "an", "the",
    "and", "or", "but", "nor",
    "for", "with", "of", "in", "on", "at", "to", "by", "from", "as", "into", "via",
    "is", "are", "was", "were", "be", "been", "it", "its", "he", "that",
    "has", "have", "had", "do", "does", "did",
    "will", "would", "should", "could", "may", "might", "can", "must", "shall",
    "&",
})
