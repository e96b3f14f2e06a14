"""Unit tests for the individual word-cleaning stages."""

from __future__ import annotations

import pytest

from jobslug.text.cleaners import (
    encode_uri_component,
    join_words,
    remove_excess_whitespaces,
    remove_punctuations,
    remove_repeated_hyphens,
    remove_stop_words,
    remove_words_in_bracket,
)
from jobslug.text.slug import clean_word


@pytest.mark.parametrize(
    "stage",
    [
        remove_words_in_bracket,
        remove_stop_words,
        remove_punctuations,
        remove_excess_whitespaces,
        join_words,
        remove_repeated_hyphens,
        encode_uri_component,
    ],
)
def test_stages_treat_missing_input_as_empty_string(stage) -> None:
    """Every stage should return an empty string for `None` and for no argument."""

    assert stage(None) == ""
    assert stage() == ""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("manager (sales & marketing)", "manager "),
        ("a (b) c (d)", "a  c "),
        ("a (b c", "a (b c"),
        ("a b) c", "a b) c"),
        ("a (b (c) d) e", "a  d) e"),
    ],
)
def test_remove_words_in_bracket_matches_each_open_paren_with_next_close(
    text: str, expected: str
) -> None:
    """Bracket removal should be non-greedy and leave unbalanced parentheses alone."""

    assert remove_words_in_bracket(text) == expected


def test_remove_stop_words_drops_exact_tokens_and_keeps_order() -> None:
    """Stop-word removal should filter exact matches and preserve survivor order."""

    assert remove_stop_words("the quick brown fox and the dog") == "quick brown fox dog"


def test_remove_stop_words_matches_dotted_and_undotted_company_suffixes() -> None:
    """Both dotted and undotted company suffixes should be filtered."""

    assert remove_stop_words("acme pte. ltd.") == "acme"
    assert remove_stop_words("acme pte ltd") == "acme"
    assert remove_stop_words("acme co. inc. llc llp private limited") == "acme"


def test_remove_stop_words_is_case_sensitive_and_does_not_trim() -> None:
    """Tokens are compared as-is, so casing and empty tokens survive."""

    assert remove_stop_words("The quick") == "The quick"
    assert remove_stop_words("the  quick") == " quick"
    assert remove_stop_words("acme co.,") == "acme co.,"


def test_remove_stop_words_accepts_custom_vocabulary() -> None:
    """An explicit vocabulary should replace the default stop words."""

    assert remove_stop_words("the senior engineer", stop_words={"senior"}) == "the engineer"


def test_remove_punctuations_keeps_hyphens_and_letters() -> None:
    """Punctuation removal should strip the punctuation set but keep hyphens."""

    assert remove_punctuations("hello-world! it's_ok") == "hello-world itsok"
    assert remove_punctuations("~`!@#$%^&*(){}[];:\"'<,.>?/\\|_+=") == ""
    assert remove_punctuations("c++ / c#") == "c  c"


def test_remove_excess_whitespaces_collapses_every_run() -> None:
    """Whitespace runs, including tabs and newlines, should become single spaces."""

    assert remove_excess_whitespaces("a \t\n b") == "a b"
    assert remove_excess_whitespaces("  a   b  ") == " a b "


def test_join_words_trims_and_hyphenates_each_whitespace_character() -> None:
    """Joining should trim the ends and map each inner whitespace to a hyphen."""

    assert join_words(" a b ") == "a-b"
    assert join_words("a  b") == "a--b"
    assert join_words(remove_excess_whitespaces("  a   b  ")) == "a-b"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\ufeff\u3000b", "a b"),
        ("a\u00a0\u2028\u200ab", "a b"),
        ("a\x1cb", "a\x1cb"),
        ("a\x1fb", "a\x1fb"),
        ("a\x85b", "a\x85b"),
    ],
)
def test_remove_excess_whitespaces_uses_slug_whitespace_set(text: str, expected: str) -> None:
    """BOM and Unicode spaces collapse; information separators and NEL do not."""

    assert remove_excess_whitespaces(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\ufeffa b\ufeff", "a-b"),
        ("\u3000a\u2009b\n", "a-b"),
        ("\x85a\x1fb\x1c", "\x85a\x1fb\x1c"),
        ("-a-", "-a-"),
    ],
)
def test_join_words_trims_only_slug_whitespace(text: str, expected: str) -> None:
    """Trimming should treat BOM as whitespace and keep hyphens and control characters."""

    assert join_words(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\ufeffManager", "manager"),
        ("data\ufeffanalyst", "data-analyst"),
        ("a\x1fb", "a%1Fb"),
        ("a\x85b", "a%C2%85b"),
    ],
)
def test_slug_whitespace_set_flows_through_clean_word(text: str, expected: str) -> None:
    """BOM should split words while separators and NEL are percent-encoded."""

    assert clean_word(text) == expected


@pytest.mark.parametrize("text", ["a---b--c", "-", "", "--a--", "no-hyphen-run", "a - - b"])
def test_remove_repeated_hyphens_is_idempotent(text: str) -> None:
    """Collapsing hyphen runs twice should equal collapsing once."""

    once = remove_repeated_hyphens(text)

    assert "--" not in once
    assert remove_repeated_hyphens(once) == once


def test_encode_uri_component_escapes_reserved_characters() -> None:
    """URI-component encoding should escape reserved characters and UTF-8 text."""

    assert encode_uri_component("a b/c?d#e:f") == "a%20b%2Fc%3Fd%23e%3Af"
    assert encode_uri_component("café") == "caf%C3%A9"
    assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_uri_component("abc-XYZ-123") == "abc-XYZ-123"
