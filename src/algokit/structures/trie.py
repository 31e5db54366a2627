"""
Prefix tree with index-based nodes.
"""
from __future__ import annotations

from typing import Iterable, Iterator

ROOT = 0


class Trie:
    """
    Character trie.

    Nodes are integer ids into parallel lists (`_children`, `_terminal`,
    `_passing`). `_passing[n]` counts the stored words whose path runs
    through node ``n``; a node whose count drops to zero is unlinked and its
    id recycled.
    """
    def __init__(self, words: Iterable[str] | None = None) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._terminal: list[bool] = [False]
        self._passing: list[int] = [0]
        self._free: list[int] = []
        if words:
            for word in words:
                self.insert(word)

    def __len__(self) -> int:
        return self._passing[ROOT]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words_with_prefix(""))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(words={len(self)})"

    def _new_node(self) -> int:
        if self._free:
            node = self._free.pop()
            self._children[node] = {}
            self._terminal[node] = False
            self._passing[node] = 0
            return node
        self._children.append({})
        self._terminal.append(False)
        self._passing.append(0)
        return len(self._children) - 1

    def _walk(self, prefix: str) -> int:
        """Node reached by `prefix`, or -1."""
        node = ROOT
        for c in prefix:
            node = self._children[node].get(c, -1)
            if node == -1:
                return -1
        return node

    def insert(self, word: str) -> bool:
        """
        Add `word`.

        Returns:
            False if it was already present.
        """
        if self.search(word):
            return False
        node = ROOT
        self._passing[node] += 1
        for c in word:
            child = self._children[node].get(c)
            if child is None:
                child = self._new_node()
                self._children[node][c] = child
            node = child
            self._passing[node] += 1
        self._terminal[node] = True
        return True

    def search(self, word: str) -> bool:
        """True if `word` was inserted."""
        node = self._walk(word)
        return node != -1 and self._terminal[node]

    def starts_with(self, prefix: str) -> bool:
        """True if some stored word begins with `prefix`."""
        node = self._walk(prefix)
        return node != -1 and self._passing[node] > 0

    def count_prefix(self, prefix: str) -> int:
        """Number of stored words beginning with `prefix`."""
        node = self._walk(prefix)
        return 0 if node == -1 else self._passing[node]

    def delete(self, word: str) -> bool:
        """
        Remove `word`.

        Returns:
            False if it was not present.
        """
        if not self.search(word):
            return False
        node = ROOT
        self._passing[node] -= 1
        for c in word:
            child = self._children[node][c]
            self._passing[child] -= 1
            if self._passing[child] == 0:
                # the rest of the path belonged to this word alone
                del self._children[node][c]
                self._release_subtree(child)
                return True
            node = child
        self._terminal[node] = False
        return True

    def _release_subtree(self, node: int) -> None:
        stack = [node]
        while stack:
            n = stack.pop()
            stack.extend(self._children[n].values())
            self._children[n] = {}
            self._terminal[n] = False
            self._free.append(n)

    def words_with_prefix(self, prefix: str, limit: int | None = None) -> list[str]:
        """
        Stored words starting with `prefix`, in lexicographic order.

        Args:
            prefix: Required prefix ("" lists everything).
            limit: Maximum number of words to return.
        """
        start = self._walk(prefix)
        if start == -1:
            return []
        out: list[str] = []
        stack = [(start, prefix)]
        while stack and (limit is None or len(out) < limit):
            node, word = stack.pop()
            if self._terminal[node]:
                out.append(word)
            for c in sorted(self._children[node], reverse=True):
                stack.append((self._children[node][c], word + c))
        return out
