from __future__ import annotations

"""Exception taxonomy for the DAG engine.

A rejected cycle-forming edge is *not* an error: ``DAG.add_edge`` reports it
by returning ``False``.  Everything below is raised and propagated as-is.
"""

__all__ = [
    "DagError",
    "NodeNotFound",
    "DuplicateNode",
    "CycleInvariantViolated",
]


class DagError(Exception):
    """Base class for every error raised by dagette."""


class NodeNotFound(DagError, KeyError):
    """Lookup by name failed (or a handle belongs to another graph)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:  # KeyError would repr() the args
        return f"Node '{self.name}' not found."


class DuplicateNode(DagError, ValueError):
    """Raised by ``add_node`` when the graph is configured with ``duplicate_nodes="raise"``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Node with name '{name}' already exists.")


class CycleInvariantViolated(DagError, RuntimeError):
    """The topological sort met a back edge.

    The cycle guard makes this unreachable through the public API; seeing it
    means the node collections were mutated directly.
    """

    def __init__(self, node: str) -> None:
        self.node = node
        super().__init__(f"Graph has a cycle through '{node}' and is not a DAG.")
