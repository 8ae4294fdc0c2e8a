"""A prefix tree (trie) storing sequences of hashable keys."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)


class _Node(Generic[K]):
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[K, _Node[K]] = {}
        self.is_end = False


class Trie(Generic[K]):
    """A set of sequences organised by shared prefixes.

    Each stored item is a sequence of hashable keys (a string is a sequence
    of characters). Iteration visits stored sequences depth-first, a
    sequence before its extensions, siblings in the order they were first
    inserted. Sequences come back as lists.
    """

    def __init__(self) -> None:
        self._root: _Node[K] = _Node()
        self._size = 0

    def _walk(self, keys: Iterable[K]) -> _Node[K] | None:
        node = self._root
        for key in keys:
            child = node.children.get(key)
            if child is None:
                return None
            node = child
        return node

    def insert(self, keys: Iterable[K]) -> None:
        """Add a sequence; adding one already present changes nothing."""
        node = self._root
        for key in keys:
            node = node.children.setdefault(key, _Node())
        if not node.is_end:
            node.is_end = True
            self._size += 1

    def erase(self, keys: Iterable[K]) -> None:
        """Remove a sequence if it is stored; otherwise do nothing."""
        node = self._walk(keys)
        if node is not None and node.is_end:
            node.is_end = False
            self._size -= 1

    def __contains__(self, keys: object) -> bool:
        try:
            node = self._walk(keys)  # type: ignore[arg-type]
        except TypeError:
            return False
        return node is not None and node.is_end

    def find_full(self, keys: Iterable[K]) -> list[list[K]]:
        """Return every stored sequence that starts with ``keys``."""
        prefix = list(keys)
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._collect(node, prefix))

    @staticmethod
    def _collect(start: _Node[K], prefix: list[K]) -> Iterator[list[K]]:
        stack: list[tuple[_Node[K], list[K]]] = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_end:
                yield list(path)
            for key, child in reversed(list(node.children.items())):
                stack.append((child, path + [key]))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[list[K]]:
        return self._collect(self._root, [])