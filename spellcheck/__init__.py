"""Spell checker -- dictionary lookups and ranked suggestions."""

from spellcheck.constants import DEFAULT_DICTIONARY_PATHS, MAX_SUGGESTIONS
from spellcheck.trie import Trie, TrieNode
from spellcheck.distance import levenshtein_distance
from spellcheck.dictionary import Dictionary, DictionaryLoadError
from spellcheck.engine import SuggestionEngine
from spellcheck.text import CheckedWord, check_text, render_marked, split_words

__all__ = [
    "DEFAULT_DICTIONARY_PATHS",
    "MAX_SUGGESTIONS",
    "CheckedWord",
    "Dictionary",
    "DictionaryLoadError",
    "SuggestionEngine",
    "Trie",
    "TrieNode",
    "check_text",
    "levenshtein_distance",
    "render_marked",
    "split_words",
]
