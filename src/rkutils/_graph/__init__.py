"""Graph module providing dependency graph abstractions.

This module contains:
- DependencyGraph[T]: A generic, immutable dependency graph
- topological_sort: Algorithm for ordering nodes by dependencies
- CycleReferenceError: Raised with the unresolved nodes when a cycle exists
"""

from ._algorithms import CycleReferenceError, TopoSort, topological_sort
from ._dependency_graph import DependencyGraph

__all__ = ["CycleReferenceError", "DependencyGraph", "TopoSort", "topological_sort"]
