"""Checking a line of free text word by word."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spellcheck.engine import SuggestionEngine


class CheckedWord:
    """One token of checked text."""

    __slots__ = ("word", "correct", "suggestions")

    def __init__(self, word: str, correct: bool, suggestions: list[str] | None = None):
        self.word = word
        self.correct = correct
        self.suggestions = suggestions or []

    def __repr__(self) -> str:
        if self.correct:
            return f"{self.word} ok"
        hint = f" -> {', '.join(self.suggestions)}" if self.suggestions else ""
        return f"[{self.word}]{hint}"


def split_words(text: str) -> list[str]:
    """Whitespace-separated tokens, no empties."""
    return text.split()


def check_text(engine: "SuggestionEngine", text: str) -> list[CheckedWord]:
    """Check every token of *text*.

    Only the last token gets suggestions, and only when it is misspelled:
    that is the word the user is currently typing.
    """
    words = split_words(text)
    checked = [CheckedWord(w, engine.is_correct(w)) for w in words]
    if checked and not checked[-1].correct:
        checked[-1].suggestions = engine.suggest(checked[-1].word)
    return checked


def render_marked(checked: list[CheckedWord]) -> str:
    """Join tokens with single spaces, misspelled ones as ``[word]``."""
    return " ".join(c.word if c.correct else f"[{c.word}]" for c in checked)
