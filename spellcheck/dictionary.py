"""Word list with set membership and a trie for prefix search."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from spellcheck.trie import Trie

log = logging.getLogger("spellcheck")


class DictionaryLoadError(OSError):
    """The dictionary source could not be read."""

    def __init__(self, path: str | None, reason: str):
        if path is None:
            message = f"No dictionary file found: {reason}"
        else:
            message = f"Failed to open dictionary file: {path} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class Dictionary:
    """Lower-cased known words.  The set and the trie always hold the same words."""

    def __init__(self, words: Iterable[str] | None = None):
        self.words: set[str] = set()
        self.trie = Trie()
        if words is not None:
            self.load(words)

    @classmethod
    def from_search_paths(cls, paths: Iterable[str]) -> Dictionary:
        """Load the first readable file among *paths*."""
        tried: list[str] = []
        for path in paths:
            tried.append(path)
            if not os.path.exists(path):
                continue
            dictionary = cls()
            try:
                dictionary.load_file(path)
            except DictionaryLoadError as exc:
                log.debug("Skipping %s: %s", path, exc.reason)
                continue
            return dictionary
        raise DictionaryLoadError(None, "tried " + ", ".join(tried))

    def load(self, words: Iterable[str]) -> int:
        """Add *words*; returns how many were new."""
        added = 0
        for word in words:
            word = word.lower()
            if not word or word in self.words:
                continue
            self.words.add(word)
            self.trie.insert(word)
            added += 1
        return added

    def load_file(self, path: str) -> int:
        """Load a whitespace-delimited word list from *path*."""
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                added = 0
                for line in f:
                    added += self.load(line.split())
        except OSError as exc:
            raise DictionaryLoadError(path, exc.strerror or str(exc)) from exc
        log.info("Loaded %s words from %s", f"{added:,}", path)
        return added

    def contains(self, word: str) -> bool:
        return word.lower() in self.words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self.words)
