"""Slug generation for job titles and company names.

Responsibilities:
- Compose the cleaning stages in their fixed order.
- Produce URL-path-safe, percent-encoded slug fragments deterministically.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import partial

from .cleaners import (
    encode_uri_component,
    join_words,
    remove_excess_whitespaces,
    remove_punctuations,
    remove_repeated_hyphens,
    remove_stop_words,
    remove_words_in_bracket,
)
from .stopwords import STOP_WORD_SET

CleaningStage = Callable[[str], str]


class WordCleaner:
    """Apply the slug cleaning stages in order.

    Stop-word removal runs before punctuation removal, so dotted company
    suffixes such as `co.` must be listed in the vocabulary as-is.
    """

    def __init__(
        self,
        extra_stop_words: Iterable[str] = (),
        stages: Sequence[CleaningStage] | None = None,
    ) -> None:
        """Initialize with the default stage sequence or a custom one.

        Args:
            extra_stop_words: Lowercase tokens filtered in addition to `STOP_WORD_SET`.
            stages: Explicit stage sequence; overrides the default pipeline.
        """

        self.stop_words = STOP_WORD_SET.union(extra_stop_words)
        self.stages: tuple[CleaningStage, ...] = tuple(stages) if stages else (
            str.lower,
            remove_words_in_bracket,
            partial(remove_stop_words, stop_words=self.stop_words),
            remove_punctuations,
            remove_excess_whitespaces,
            join_words,
            remove_repeated_hyphens,
            encode_uri_component,
        )

    def clean(self, text: str | None = "") -> str:
        """Return the slug fragment for `text`, treating `None` as empty."""

        current = text or ""
        for stage in self.stages:
            current = stage(current)
        return current


_DEFAULT_CLEANER = WordCleaner()


def clean_word(text: str | None = "") -> str:
    """Return a lowercase, stop-word-free, hyphen-joined, percent-encoded slug."""

    return _DEFAULT_CLEANER.clean(text)
