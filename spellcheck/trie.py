"""Prefix trie for exact lookups and ordered prefix enumeration."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie.  Words come back in lexicographic order."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Every stored word starting with *prefix*, sorted.

        Returns an empty list when no stored word has that prefix.  An
        empty prefix returns the whole trie.
        """
        node = self._walk(prefix)
        if node is None:
            return []

        results: list[str] = []
        # Explicit stack; children pushed in reverse so the smallest key pops first.
        stack: list[tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                results.append(word)
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], word + ch))
        return results

    def __contains__(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._size

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
