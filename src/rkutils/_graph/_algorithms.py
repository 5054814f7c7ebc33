"""Graph algorithms for dependency graph operations."""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Collection, Hashable, Iterator, Mapping

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Hashable")


class CycleReferenceError(ValueError):
    """Raised when some nodes can never be resolved because of a cycle.

    Attributes:
        unresolved: Every node still waiting on a dependency when sorting
            stopped. This includes the cycle members and anything that
            (transitively) depends on them.

    """

    def __init__(self, unresolved: frozenset[Hashable]) -> None:
        self.unresolved = unresolved
        ids = ", ".join(sorted(repr(node) for node in unresolved))
        super().__init__(f"Cycle detected in graph; unresolved: [{ids}]")


@dataclass(slots=True)
class TopoSort(Generic[T]):
    """Working state of a single topological sort.

    Attributes:
        depends_on: Node to its remaining unresolved dependencies. Holds exactly
            the nodes that still wait on something.
        dependents: Node to the nodes that depend on it.
        ready: Nodes whose dependencies are all satisfied, not yet emitted.

    """

    depends_on: dict[T, set[T]] = field(default_factory=dict)
    dependents: defaultdict[T, set[T]] = field(default_factory=lambda: defaultdict(set))
    ready: deque[T] = field(default_factory=deque)

    @classmethod
    def from_dependencies(cls, dependencies: Mapping[T, Collection[T]]) -> TopoSort[T]:
        """Build a fresh working state from a dependency mapping.

        The mapping is only read; its collections are copied.
        """
        state = cls()
        queued: set[T] = set()
        # Nodes that only show up on the right-hand side
        referenced: set[T] = set()

        for node, deps in dependencies.items():
            if not deps:
                state.ready.append(node)
                queued.add(node)
                continue
            state.depends_on.setdefault(node, set()).update(deps)
            for dep in deps:
                state.dependents[dep].add(node)
                referenced.add(dep)

        for node in referenced:
            if node not in state.depends_on and node not in queued:
                state.ready.append(node)
                queued.add(node)

        return state

    def dependents_of(self, dependency: T) -> frozenset[T]:
        return frozenset(self.dependents.get(dependency, ()))

    def is_resolved(self) -> bool:
        return not self.depends_on

    def resolve(self, dependent: T, dependency: T) -> None:
        """Mark `dependency` as satisfied for `dependent`.

        Once the last dependency is gone the dependent moves to the ready
        frontier. Resolving an edge that was already resolved does nothing.
        """
        remaining = self.depends_on.get(dependent)
        if remaining is None:
            return
        remaining.discard(dependency)
        if not remaining:
            del self.depends_on[dependent]
            self.ready.append(dependent)

    def pop_ready(self) -> T:
        return self.ready.popleft()

    def unresolved(self) -> Iterator[T]:
        return iter(self.depends_on)


def topological_sort(dependencies: Mapping[T, Collection[T]]) -> list[T]:
    """Sort a graph topologically (dependencies before dependents).

    Given a graph represented as a mapping from nodes to the nodes they depend
    on, return every node (keys and referenced dependencies alike) in an order
    where each node appears after all of its dependencies. Ties among ready
    nodes carry no ordering guarantee.

    Args:
        dependencies: Mapping from node to collection of nodes it depends on.
            An entry ``b: [a]`` means "b depends on a".

    Returns:
        List of nodes in topological order.

    Raises:
        CycleReferenceError: If some nodes can never be resolved. The error
            carries the complete unresolved set.

    Example:
        >>> topological_sort({"b": ["a"], "c": ["b"]})
        ['a', 'b', 'c']

    """
    state = TopoSort.from_dependencies(dependencies)
    order: list[T] = []

    while state.ready:
        node = state.pop_ready()
        order.append(node)
        for dependent in state.dependents_of(node):
            state.resolve(dependent, node)

    if not state.is_resolved():
        unresolved = frozenset(state.unresolved())
        logger.debug(f"Sorted {len(order)} nodes, {len(unresolved)} left unresolved")
        raise CycleReferenceError(unresolved)

    logger.debug(f"Sorted {len(order)} nodes")
    return order
