"""URL route table built on the longest-match trie."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from ._str import url_to_nodes
from ._trie import Trie

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

logger = logging.getLogger(__name__)

V = TypeVar("V")


class RouteTable(Generic[V]):
    """Map URL routes to values and resolve requests to the most specific route.

    Routes are tokenised with `url_to_nodes`, so trailing and repeated slashes
    do not matter and ``"/"`` is the catch-all route.

    Example:
        >>> table = RouteTable.from_mapping({"/": "root", "/cloud": "cloud"})
        >>> table.match("/cloud/instance")
        'cloud'
        >>> table.match("/builder")
        'root'

    """

    __slots__ = ("_trie",)

    def __init__(self) -> None:
        self._trie: Trie[V] = Trie()

    @classmethod
    def from_mapping(cls, routes: Mapping[str, V]) -> RouteTable[V]:
        table: RouteTable[V] = cls()
        for route, value in routes.items():
            table.add(route, value)
        return table

    def add(self, route: str, value: V) -> None:
        """Register `value` for `route`, replacing an existing registration."""
        tokens = url_to_nodes(route)
        if tokens in self._trie:
            logger.debug(f"Replacing value for route {route!r}")
        self._trie.insert(tokens, value)

    def match(self, url: str) -> V | None:
        """Return the value of the most specific route that is a prefix of `url`."""
        return self._trie.find_longest_match(url_to_nodes(url))

    def routes(self) -> Generator[tuple[str, V]]:
        """Iterate over registered (route, value) pairs, parents first."""
        for tokens, value in self._trie.items():
            yield "/" + "/".join(tokens[1:]), value

    def __contains__(self, route: str) -> bool:
        return url_to_nodes(route) in self._trie

    def __len__(self) -> int:
        return len(self._trie)
