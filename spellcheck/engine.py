"""Suggestion engine: prefix candidates ranked by edit distance."""

from __future__ import annotations

import logging

from spellcheck.constants import DEFAULT_DICTIONARY_PATHS, MAX_SUGGESTIONS
from spellcheck.dictionary import Dictionary, DictionaryLoadError
from spellcheck.distance import levenshtein_distance

log = logging.getLogger("spellcheck")


class SuggestionEngine:
    """Answers "is this word correct" and "what did you mean" over a
    dictionary that is not modified after construction.

    Candidates are only the dictionary words that start with the query.
    A misspelling inside the prefix (``"cta"`` for ``"cat"``) therefore
    gets no suggestions.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_suggestions: int = MAX_SUGGESTIONS,
        load_error: DictionaryLoadError | None = None,
    ):
        if max_suggestions <= 0:
            raise ValueError("max_suggestions must be a positive integer.")
        self.dict = dictionary
        self.trie = dictionary.trie
        self.max_suggestions = max_suggestions
        self.load_error = load_error

    @classmethod
    def from_file(
        cls,
        path: str | None = None,
        max_suggestions: int = MAX_SUGGESTIONS,
    ) -> SuggestionEngine:
        """Build an engine from a word list file.

        With no *path* the default locations are searched.  A dictionary
        that cannot be read leaves the engine empty; check ``loaded``.
        """
        try:
            if path is None:
                dictionary = Dictionary.from_search_paths(DEFAULT_DICTIONARY_PATHS)
            else:
                dictionary = Dictionary()
                dictionary.load_file(path)
        except DictionaryLoadError as exc:
            log.warning("%s -- every word will be reported as misspelled.", exc)
            return cls(Dictionary(), max_suggestions, load_error=exc)
        return cls(dictionary, max_suggestions)

    @property
    def loaded(self) -> bool:
        return self.load_error is None

    # public API

    def is_correct(self, word: str) -> bool:
        if not word:
            return False
        return self.dict.contains(word.lower())

    def suggest(self, word: str) -> list[str]:
        """Up to ``max_suggestions`` words starting with *word*, closest first.

        Ties on distance are broken alphabetically.
        """
        query = word.lower()
        if not query:
            return []

        candidates = self.trie.words_with_prefix(query)
        ranked = sorted(
            (levenshtein_distance(query, candidate), candidate)
            for candidate in candidates
        )
        suggestions = [candidate for _dist, candidate in ranked[:self.max_suggestions]]
        log.debug(
            "SUGGEST %r: %d candidates -> %s",
            query, len(candidates), ", ".join(suggestions) or "(none)",
        )
        return suggestions
