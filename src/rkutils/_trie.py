"""Prefix trie with longest-match lookup over token sequences."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Generator, Hashable, Iterable

logger = logging.getLogger(__name__)

_EMPTY: Final = object()

V = TypeVar("V")


@dataclass(slots=True)
class TrieNode:
    """A node owning its children and an optional value.

    `value` holds the module-private sentinel while no value is attached, so
    that None can be stored like any other value.
    """

    children: dict[Hashable, TrieNode] = field(default_factory=dict)
    value: Any = _EMPTY

    @property
    def has_value(self) -> bool:
        return self.value is not _EMPTY


class Trie(Generic[V]):
    """A tree keyed by token sequences, used for longest-prefix lookup.

    Values can be attached at any depth, so both ``["/", "a"]`` and
    ``["/", "a", "b"]`` may carry one. A query returns the value of the deepest
    valued node on the query's own path before the first unmatched token.

    Example:
        >>> trie = Trie()
        >>> trie.insert(["a", "b", "c"], 1)
        >>> trie.insert(["a", "b", "d"], 2)
        >>> trie.find_longest_match(["a", "b", "c", "d"])
        1
        >>> trie.find_longest_match(["a", "b", "d", "e"])
        2

    """

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    def insert(self, path: Iterable[Hashable], value: V) -> None:
        """Attach `value` at `path`, replacing any value already there.

        An empty path attaches the value to the root, where it acts as the
        fallback for every query.
        """
        node = self._root
        for token in path:
            child = node.children.get(token)
            if child is None:
                child = node.children[token] = TrieNode()
            node = child
        if not node.has_value:
            self._size += 1
        node.value = value

    def find_longest_match(self, path: Iterable[Hashable]) -> V | None:
        """Return the value attached to the longest matched prefix of `path`.

        The walk follows `path` one token at a time starting at the root and
        remembers the last valued node it passes. It stops at the first token
        without a matching child, without trying other branches.

        Returns:
            The best value found, or None when no node along the walk has one.

        """
        node = self._root
        best = node.value if node.has_value else None
        depth = 0
        for token in path:
            child = node.children.get(token)
            if child is None:
                break
            node = child
            depth += 1
            if node.has_value:
                best = node.value
        logger.debug(f"Longest match walk stopped at depth {depth}")
        return best

    def get(self, path: Iterable[Hashable]) -> V | None:
        """Return the value stored at exactly `path`, or None."""
        node = self._find_node(path)
        if node is None or not node.has_value:
            return None
        return node.value

    def items(self) -> Generator[tuple[tuple[Hashable, ...], V]]:
        """Iterate over (path, value) pairs depth-first, parents before children."""
        stack: list[tuple[tuple[Hashable, ...], TrieNode]] = [((), self._root)]
        while stack:
            path, node = stack.pop()
            if node.has_value:
                yield path, node.value
            stack.extend(((*path, token), child) for token, child in reversed(node.children.items()))

    def _find_node(self, path: Iterable[Hashable]) -> TrieNode | None:
        node = self._root
        for token in path:
            child = node.children.get(token)
            if child is None:
                return None
            node = child
        return node

    def __contains__(self, path: Iterable[Hashable]) -> bool:
        node = self._find_node(path)
        return node is not None and node.has_value

    def __len__(self) -> int:
        return self._size
