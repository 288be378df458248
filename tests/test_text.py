from spellcheck.dictionary import Dictionary
from spellcheck.engine import SuggestionEngine
from spellcheck.text import check_text, render_marked, split_words

import pytest


@pytest.fixture
def engine() -> SuggestionEngine:
    return SuggestionEngine(Dictionary(["the", "cat", "car", "cart", "sat"]))


@pytest.mark.parametrize(
    ["text", "words"],
    [
        ("", []),
        ("   ", []),
        ("the cat", ["the", "cat"]),
        ("  the\tcat \n sat ", ["the", "cat", "sat"]),
    ],
)
def test_split_words(text: str, words: list) -> None:
    assert split_words(text) == words


def test_check_text_marks_unknown_words(engine: SuggestionEngine) -> None:
    checked = check_text(engine, "The dgo sat")
    assert [c.correct for c in checked] == [True, False, True]
    assert render_marked(checked) == "The [dgo] sat"
    # last word is correct, so nothing is suggested anywhere
    assert all(c.suggestions == [] for c in checked)


def test_check_text_suggests_for_last_word_only(engine: SuggestionEngine) -> None:
    checked = check_text(engine, "teh ca")
    assert render_marked(checked) == "[teh] [ca]"
    assert checked[0].suggestions == []
    assert checked[-1].suggestions == ["car", "cat", "cart"]


def test_check_text_empty(engine: SuggestionEngine) -> None:
    assert check_text(engine, "") == []
    assert render_marked([]) == ""


def test_checked_word_repr(engine: SuggestionEngine) -> None:
    ok, bad = check_text(engine, "cat ca")
    assert repr(ok) == "cat ok"
    assert repr(bad) == "[ca] -> car, cat, cart"
