from __future__ import annotations

"""Node handle owned by a :class:`~dagette.core.graph.DAG`."""

from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

__all__ = ["Node"]


class Node(Generic[T]):
    """A named vertex carrying an optional payload.

    ``children`` and ``parents`` are read-only snapshots; the backing lists
    belong to the graph and are only touched by its cycle-checked operations.
    Nodes compare and hash by identity.
    """

    __slots__ = ("_name", "data", "_children", "_parents")

    def __init__(self, name: str, data: Optional[T] = None) -> None:
        self._name = name
        self.data = data
        self._children: List["Node[T]"] = []
        self._parents: List["Node[T]"] = []

    # -------------------------------------------------- #
    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> Tuple["Node[T]", ...]:
        """Successors in edge-insertion order."""
        return tuple(self._children)

    @property
    def parents(self) -> Tuple["Node[T]", ...]:
        """Predecessors in edge-insertion order."""
        return tuple(self._parents)

    # -------------------------------------------------- #
    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Node({self._name!r}, data={self.data!r})"
