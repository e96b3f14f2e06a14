"""Text cleaning and slug generation components.

This package provides the deterministic word-cleaning stages and the slug
pipeline that composes them.
"""

from .cleaners import (
    encode_uri_component,
    join_words,
    remove_excess_whitespaces,
    remove_punctuations,
    remove_repeated_hyphens,
    remove_stop_words,
    remove_words_in_bracket,
)
from .slug import WordCleaner, clean_word
from .stopwords import CUSTOM_WORD_LIST, STOP_WORD_SET, STOP_WORDS

__all__ = [
    "WordCleaner",
    "clean_word",
    "remove_words_in_bracket",
    "remove_stop_words",
    "remove_punctuations",
    "remove_excess_whitespaces",
    "join_words",
    "remove_repeated_hyphens",
    "encode_uri_component",
    "CUSTOM_WORD_LIST",
    "STOP_WORDS",
    "STOP_WORD_SET",
]
