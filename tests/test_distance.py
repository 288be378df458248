from spellcheck.distance import levenshtein_distance

import pytest


@pytest.mark.parametrize(
    ["a", "b", "distance"],
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("ca", "cat", 1),
        ("ca", "cart", 2),
        ("teh", "the", 2),
        ("Cat", "cat", 1),
    ],
)
def test_levenshtein_distance(a: str, b: str, distance: int) -> None:
    assert levenshtein_distance(a, b) == distance


@pytest.mark.parametrize("word", ["", "a", "spelling", "mississippi"])
def test_identity(word: str) -> None:
    assert levenshtein_distance(word, word) == 0


@pytest.mark.parametrize(
    ["a", "b"],
    [("sunday", "saturday"), ("abc", "yabd"), ("", "xyz"), ("intention", "execution")],
)
def test_symmetric_and_bounded(a: str, b: str) -> None:
    d = levenshtein_distance(a, b)
    assert d == levenshtein_distance(b, a)
    assert 0 <= d <= max(len(a), len(b))


def test_returns_plain_int() -> None:
    assert type(levenshtein_distance("abc", "abd")) is int
