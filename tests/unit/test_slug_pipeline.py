"""Unit tests for the slug pipeline composed by `WordCleaner`."""

from __future__ import annotations

import pytest

from jobslug.text.slug import WordCleaner, clean_word
from jobslug.text.stopwords import CUSTOM_WORD_LIST, STOP_WORD_SET, STOP_WORDS


def test_clean_word_returns_empty_string_for_missing_input() -> None:
    """Missing or empty input should produce an empty slug without raising."""

    assert clean_word(None) == ""
    assert clean_word() == ""
    assert clean_word("") == ""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("The Quick Brown Fox", "quick-brown-fox"),
        ("Pte. Ltd. Acme Co.", "acme"),
        ("Manager (Sales & Marketing)", "manager"),
        ("Sales & Marketing Executive", "sales-marketing-executive"),
        ("Senior Software Engineer (Backend) @ Acme Pte. Ltd.", "senior-software-engineer-acme"),
        ("C++ Developer / Team-Lead", "c-developer-team-lead"),
        ("  Data   Analyst\t(Contract)\n", "data-analyst"),
        ("Front-end -- Developer", "front-end-developer"),
    ],
)
def test_clean_word_builds_expected_slugs(text: str, expected: str) -> None:
    """Slugs should be lowercase, stop-word-free and hyphen-joined."""

    assert clean_word(text) == expected


def test_clean_word_percent_encodes_non_ascii_characters() -> None:
    """Characters outside the URI unreserved set should be percent-encoded."""

    assert clean_word("Café Manager") == "caf%C3%A9-manager"
    assert clean_word("Design – Lead") == "design-%E2%80%93-lead"


def test_clean_word_collapses_stop_word_only_input_to_empty_string() -> None:
    """Input made only of stop words should produce an empty slug."""

    assert clean_word("The And Of") == ""
    assert clean_word("Pte Ltd") == ""


def test_clean_word_filters_stop_words_before_removing_punctuation() -> None:
    """Tokens carrying punctuation other than a listed suffix form survive."""

    assert clean_word("Acme Co.") == "acme"
    assert clean_word("Acme Inc.,") == "acme-inc"
    assert clean_word("The, Company") == "the-company"


def test_clean_word_is_deterministic() -> None:
    """Repeated calls should return identical output."""

    text = "Senior Manager (Finance), Acme Pte. Ltd."

    assert clean_word(text) == clean_word(text) == "senior-manager-acme"


def test_word_cleaner_extra_stop_words_do_not_change_default() -> None:
    """Extra stop words should apply only to the cleaner that declares them."""

    cleaner = WordCleaner(extra_stop_words=["senior", "acme"])

    assert cleaner.clean("Senior Engineer at Acme") == "engineer"
    assert clean_word("Senior Engineer at Acme") == "senior-engineer-acme"
    assert "senior" not in STOP_WORD_SET


def test_word_cleaner_accepts_custom_stage_sequence() -> None:
    """Explicit stages should replace the default pipeline."""

    cleaner = WordCleaner(stages=[str.upper, str.strip])

    assert cleaner.clean("  ab ") == "AB"
    assert cleaner.clean(None) == ""


def test_stop_word_vocabulary_is_lowercase_and_starts_with_company_suffixes() -> None:
    """The vocabulary should be lowercase and list company suffixes first."""

    assert STOP_WORDS[: len(CUSTOM_WORD_LIST)] == CUSTOM_WORD_LIST
    assert all(word == word.lower() for word in STOP_WORDS)
    assert {"co", "co.", "inc", "inc.", "pte", "pte.", "ltd", "ltd."} <= STOP_WORD_SET
    assert "you're" in STOP_WORD_SET
