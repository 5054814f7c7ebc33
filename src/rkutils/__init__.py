"""String helpers, dependency sorting and longest-match tries."""

__all__ = [
    "ROOT_TOKEN",
    "CycleReferenceError",
    "DependencyGraph",
    "RouteTable",
    "TopoSort",
    "Trie",
    "drop_prefix",
    "drop_suffix",
    "ensure_prefix",
    "ensure_suffix",
    "is_quoted",
    "join_path_segment",
    "join_path_segments",
    "substring",
    "topological_sort",
    "unquote",
    "url_to_nodes",
]

from ._graph import CycleReferenceError, DependencyGraph, TopoSort, topological_sort
from ._routes import RouteTable
from ._str import (
    ROOT_TOKEN,
    drop_prefix,
    drop_suffix,
    ensure_prefix,
    ensure_suffix,
    is_quoted,
    join_path_segment,
    join_path_segments,
    substring,
    unquote,
    url_to_nodes,
)
from ._trie import Trie
