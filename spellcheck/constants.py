"""Spell checker constants."""

from __future__ import annotations

import os

MAX_SUGGESTIONS = 5  # ranked suggestions returned per query

# Tried in order when no dictionary path is given.
DEFAULT_DICTIONARY_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]
