"""Stop-word vocabulary for slug generation.

Responsibilities:
- Hold the fixed, lowercase stop-word vocabulary used by the slug pipeline.
- Keep company-suffix terms in both dotted and undotted form, because stop-word
  removal runs before punctuation removal.

Key values:
- `CUSTOM_WORD_LIST`: company-suffix terms common across job titles and employers.
- `STOP_WORDS`: ordered vocabulary (custom terms first, then English stop words).
- `STOP_WORD_SET`: frozen membership set derived from `STOP_WORDS`.
"""

from __future__ import annotations


CUSTOM_WORD_LIST: tuple[str, ...] = (
    "pte", "ltd", "pte.", "ltd.", "private", "limited",
    "llc", "llp", "inc", "inc.", "co", "co.",
)

# English stop words from https://www.ranks.nl/stopwords
_ENGLISH_STOP_WORDS: tuple[str, ...] = (
    "a", "about", "above", "after", "again", "against", "all", "am",
    "an", "and", "any", "are", "aren't", "as", "at", "be",
    "because", "been", "before", "being", "below", "between", "both", "but",
    "by", "can't", "cannot", "could", "couldn't", "did", "didn't", "do",
    "does", "doesn't", "doing", "don't", "down", "during", "each", "few",
    "for", "from", "further", "had", "hadn't", "has", "hasn't", "have",
    "haven't", "having", "he", "he'd", "he'll", "he's", "her", "here",
    "here's", "hers", "herself", "him", "himself", "his", "how", "how's",
    "i", "i'd", "i'll", "i'm", "i've", "if", "in", "into",
    "is", "isn't", "it", "it's", "its", "itself", "let's", "me",
    "more", "most", "mustn't", "my", "myself", "no", "nor", "not",
    "of", "off", "on", "once", "only", "or", "other", "ought",
    "our", "ours", "ourselves", "out", "over", "own", "same", "shan't",
    "she", "she'd", "she'll", "she's", "should", "shouldn't", "so", "some",
    "such", "than", "that", "that's", "the", "their", "theirs", "them",
    "themselves", "then", "there", "there's", "these", "they", "they'd", "they'll",
    "they're", "they've", "this", "those", "through", "to", "too", "under",
    "until", "up", "very", "was", "wasn't", "we", "we'd", "we'll",
    "we're", "we've", "were", "weren't", "what", "what's", "when", "when's",
    "where", "where's", "which", "while", "who", "who's", "whom", "why",
    "why's", "with", "won't", "would", "wouldn't", "you", "you'd", "you'll",
    "you're", "you've", "your", "yours", "yourself", "yourselves",
)

STOP_WORDS: tuple[str, ...] = CUSTOM_WORD_LIST + _ENGLISH_STOP_WORDS
STOP_WORD_SET: frozenset[str] = frozenset(STOP_WORDS)
