"""Generic dependency graph abstraction."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from ._algorithms import CycleReferenceError, topological_sort

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DependencyGraph(Generic[T]):
    """An immutable directed graph of "depends on" relationships.

    It is generic over the node type T (e.g., str, int, tuple).

    - predecessors[b] = {a} means "b depends on a"
    - successors[a] = {b} means "a is depended on by b"

    Attributes:
        _predecessors: Mapping from node to its direct dependencies.
        _successors: Mapping from node to nodes that depend on it.

    """

    _predecessors: dict[T, frozenset[T]] = field(default_factory=dict)
    _successors: dict[T, frozenset[T]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> DependencyGraph[T]:
        """Build a graph from (source, target) edges.

        An edge (a, b) means "b depends on a".

        Example:
            >>> graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
            >>> graph.predecessors("b")
            frozenset({'a'})

        """
        predecessors: defaultdict[T, set[T]] = defaultdict(set)
        successors: defaultdict[T, set[T]] = defaultdict(set)

        for src, dst in edges:
            predecessors[dst].add(src)
            successors[src].add(dst)
            predecessors.setdefault(src, set())
            successors.setdefault(dst, set())

        return cls(
            _predecessors={k: frozenset(v) for k, v in predecessors.items()},
            _successors={k: frozenset(v) for k, v in successors.items()},
        )

    @classmethod
    def from_dependencies(cls, dependencies: Mapping[T, Collection[T]]) -> DependencyGraph[T]:
        """Build a graph from a mapping of node to the nodes it depends on.

        Keys with an empty collection become isolated nodes.

        Example:
            >>> graph = DependencyGraph.from_dependencies({"b": ["a"], "c": []})
            >>> sorted(graph.nodes)
            ['a', 'b', 'c']

        """
        predecessors: defaultdict[T, set[T]] = defaultdict(set)
        successors: defaultdict[T, set[T]] = defaultdict(set)

        for node, deps in dependencies.items():
            predecessors[node].update(deps)
            successors.setdefault(node, set())
            for dep in deps:
                successors[dep].add(node)
                predecessors.setdefault(dep, set())

        return cls(
            _predecessors={k: frozenset(v) for k, v in predecessors.items()},
            _successors={k: frozenset(v) for k, v in successors.items()},
        )

    @property
    def nodes(self) -> frozenset[T]:
        """All nodes in the graph."""
        return frozenset(self._predecessors.keys()) | frozenset(self._successors.keys())

    def predecessors(self, node: T) -> frozenset[T]:
        """Get direct dependencies of a node (nodes it depends on)."""
        return self._predecessors.get(node, frozenset())

    def successors(self, node: T) -> frozenset[T]:
        """Get direct dependents of a node (nodes that depend on it)."""
        return self._successors.get(node, frozenset())

    def roots(self) -> frozenset[T]:
        """Get nodes with no dependencies."""
        return frozenset(n for n in self.nodes if not self._predecessors.get(n))

    def leaves(self) -> frozenset[T]:
        """Get nodes that nothing depends on."""
        return frozenset(n for n in self.nodes if not self._successors.get(n))

    def ancestors(self, node: T) -> frozenset[T]:
        """Get all transitive dependencies of a node.

        Args:
            node: The node to query.

        Returns:
            Set of all nodes that this node transitively depends on.

        """
        visited: set[T] = set()
        stack = list(self.predecessors(node))
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.predecessors(current))
        return frozenset(visited)

    def descendants(self, node: T) -> frozenset[T]:
        """Get all transitive dependents of a node.

        Args:
            node: The node to query.

        Returns:
            Set of all nodes that transitively depend on this node.

        """
        visited: set[T] = set()
        stack = list(self.successors(node))
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.successors(current))
        return frozenset(visited)

    def topological_order(self) -> list[T]:
        """Return nodes in topological order (dependencies before dependents).

        Raises:
            CycleReferenceError: If the graph contains a cycle.

        """
        return topological_sort(self._predecessors)

    def cycle_members(self) -> frozenset[T]:
        """Return the nodes that cannot be ordered, or an empty set for a DAG."""
        try:
            self.topological_order()
        except CycleReferenceError as e:
            return frozenset(e.unresolved)
        return frozenset()

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        return bool(self.cycle_members())

    def subgraph(self, nodes: frozenset[T]) -> DependencyGraph[T]:
        """Create a subgraph containing only the specified nodes.

        Edges are kept only if both endpoints are in the node set.
        """
        return DependencyGraph(
            _predecessors={n: self._predecessors.get(n, frozenset()) & nodes for n in nodes},
            _successors={n: self._successors.get(n, frozenset()) & nodes for n in nodes},
        )

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self.nodes)

    def __contains__(self, node: T) -> bool:
        """Check if a node is in the graph."""
        return node in self._predecessors or node in self._successors
