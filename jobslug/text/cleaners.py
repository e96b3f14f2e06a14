"""Deterministic word-cleaning stages for slug generation.

Responsibilities:
- Provide the individual string transforms composed by the slug pipeline.
- Accept `None` as an empty string so every stage is total over its input.

Each stage is a pure `str -> str` function; ordering is owned by
`jobslug.text.slug.WordCleaner`.
"""

from __future__ import annotations

from collections.abc import Collection
import re
from urllib.parse import quote

from .stopwords import STOP_WORD_SET


_BRACKETED_RE = re.compile(r"\(.*?\)")
# `-` is deliberately absent from this class.
_PUNCTUATION_RE = re.compile(r"[~`!@#$%^&*(){}\[\];:\"'<,.>?/\\|_+=]")
# Whitespace and line terminators recognised by the slug format. This differs
# from `str.isspace`: U+FEFF counts, U+001C-U+001F and U+0085 do not.
_SLUG_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_CLASS = f"[{re.escape(_SLUG_WHITESPACE)}]"
_WHITESPACE_RUN_RE = re.compile(_WHITESPACE_CLASS + "+")
_WHITESPACE_RE = re.compile(_WHITESPACE_CLASS)
_HYPHEN_RUN_RE = re.compile(r"-+")

# Characters left unescaped by URI-component encoding.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def remove_words_in_bracket(text: str | None = "") -> str:
    """Delete every `(...)` group, matching each `(` with the next `)`."""

    return _BRACKETED_RE.sub("", text or "")


def remove_stop_words(
    text: str | None = "",
    stop_words: Collection[str] = STOP_WORD_SET,
) -> str:
    """Drop space-delimited tokens that exactly match a stop word.

    Args:
        text: Space-joined tokens. Casing is not changed here; callers
            lowercase beforehand.
        stop_words: Vocabulary to filter against, defaulting to `STOP_WORD_SET`.

    Returns:
        Surviving tokens joined by single spaces, in their original order.
    """

    tokens = (text or "").split(" ")
    return " ".join(token for token in tokens if token not in stop_words)


def remove_punctuations(text: str | None = "") -> str:
    """Delete punctuation characters, keeping hyphens."""

    return _PUNCTUATION_RE.sub("", text or "")


def remove_excess_whitespaces(text: str | None = "") -> str:
    """Collapse every whitespace run into a single space."""

    return _WHITESPACE_RUN_RE.sub(" ", text or "")


def join_words(text: str | None = "") -> str:
    """Trim outer whitespace and replace each inner whitespace character with `-`."""

    return _WHITESPACE_RE.sub("-", (text or "").strip(_SLUG_WHITESPACE))


def remove_repeated_hyphens(text: str | None = "") -> str:
    """Collapse every run of hyphens into one hyphen."""

    return _HYPHEN_RUN_RE.sub("-", text or "")


def encode_uri_component(text: str | None = "") -> str:
    """Percent-encode text as a URI component using UTF-8.

    Unreserved characters (letters, digits and ``-_.!~*'()``) are kept as-is.
    Unpaired surrogates are replaced before encoding instead of raising.
    """

    return quote(text or "", safe=_URI_COMPONENT_SAFE, errors="replace")
