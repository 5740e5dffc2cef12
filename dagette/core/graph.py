from __future__ import annotations

"""The DAG engine.

``DAG`` owns every node it creates (keyed by name, in registration order) and
is the only thing that mutates their edge lists.  Edges go in through
:meth:`DAG.add_edge`, which runs the cycle guard first, so the graph is
acyclic after every call.

Example::

    dag = DAG()
    dag.add_edge("A", "B")
    dag.add_edge("B", "C")
    dag.add_edge("C", "A")        # False – would close a cycle
    [n.name for n in dag.topological_order()]   # ["A", "B", "C"]
"""

from logging import DEBUG, WARNING
from typing import Any, Dict, Generic, Iterator, List, Optional, Set, Tuple, TypeVar, Union

from dagette.utils.logging import log

from . import cycle, paths, topo
from .config import GraphConfig
from .errors import DuplicateNode, NodeNotFound
from .node import Node

T = TypeVar("T")

NodeLike = Union[str, Node]

__all__ = ["DAG", "NodeLike"]


class DAG(Generic[T]):
    """Mutable directed acyclic graph with named nodes and optional payloads."""

    def __init__(self, config: Optional[GraphConfig] = None, **overrides: Any) -> None:
        if config is None or overrides:
            base = config.model_dump() if config is not None else {}
            config = GraphConfig(**{**base, **overrides})
        self.config = config
        self._nodes: Dict[str, Node[T]] = {}

    # ------------------------------------------------------------------ #
    # Node registry
    # ------------------------------------------------------------------ #

    def add_node(self, name: str, data: Optional[T] = None) -> Node[T]:
        """Register a node called *name* and return its handle.

        An existing name is returned untouched (``duplicate_nodes="ignore"``)
        or rejected with :class:`DuplicateNode` (``duplicate_nodes="raise"``).
        """
        _check_name(name)

        existing = self._nodes.get(name)
        if existing is not None:
            if self.config.duplicate_nodes == "raise":
                raise DuplicateNode(name)
            return existing

        node: Node[T] = Node(name, data)
        self._nodes[name] = node
        log.debug("Added node '%s'", name)
        return node

    def get_node(self, name: str) -> Node[T]:
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFound(name) from None

    def remove_node(self, node: NodeLike) -> bool:
        """Remove *node* and every edge touching it.  False if it was absent."""
        name = node.name if isinstance(node, Node) else node
        target = self._nodes.get(name)
        if target is None or (isinstance(node, Node) and node is not target):
            return False

        for child in list(target._children):
            self._unlink(target, child)
        for parent in list(target._parents):
            self._unlink(parent, target)

        del self._nodes[name]
        log.debug("Removed node '%s'", name)
        return True

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def nodes(self) -> List[Node[T]]:
        """All nodes in registration order."""
        return list(self._nodes.values())

    def roots(self) -> List[Node[T]]:
        return [n for n in self._nodes.values() if not n._parents]

    def leaves(self) -> List[Node[T]]:
        return [n for n in self._nodes.values() if not n._children]

    def successors(self, node: NodeLike) -> List[Node[T]]:
        return list(self._resolve(node)._children)

    def predecessors(self, node: NodeLike) -> List[Node[T]]:
        return list(self._resolve(node)._parents)

    def descendants(self, node: NodeLike) -> Set[Node[T]]:
        """Every node reachable from *node*."""
        return cycle.reachable(self._resolve(node))

    def ancestors(self, node: NodeLike) -> Set[Node[T]]:
        """Every node that can reach *node*."""
        return cycle.reachable(self._resolve(node), reverse=True)

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #

    def add_edge(self, source: NodeLike, destination: NodeLike) -> bool:
        """Add the edge *source* -> *destination* unless it would close a cycle.

        Returns:
            True when the edge is present afterwards (already-present edges are
            a no-op), False when it was rejected for cycle safety.  A rejected
            call leaves the graph exactly as it was.

        Raises:
            NodeNotFound: an endpoint is unknown and ``implicit_nodes`` is off,
                or a handle belongs to another graph.
        """
        src_name = source.name if isinstance(source, Node) else source
        dst_name = destination.name if isinstance(destination, Node) else destination

        for endpoint in (source, destination):
            if not isinstance(endpoint, Node):
                _check_name(endpoint)

        if src_name == dst_name:
            self._reject(src_name, dst_name)
            return False

        # Validate before creating anything.  A node that does not exist yet
        # has no edges and cannot close a cycle, so creation is never undone.
        for endpoint in (source, destination):
            if isinstance(endpoint, Node) or not self.config.implicit_nodes:
                self._resolve(endpoint)
        src = self._resolve(source, create=True)
        dst = self._resolve(destination, create=True)

        if dst in src._children:
            return True

        if cycle.would_create_cycle(src, dst):
            self._reject(src_name, dst_name)
            return False

        src._children.append(dst)
        dst._parents.append(src)
        log.debug("Added edge %s -> %s", src_name, dst_name)
        return True

    def remove_edge(self, source: NodeLike, destination: NodeLike) -> bool:
        """Remove the edge *source* -> *destination*.  False if it did not exist."""
        src = self._resolve(source)
        dst = self._resolve(destination)
        if dst not in src._children:
            return False
        self._unlink(src, dst)
        log.debug("Removed edge %s -> %s", src.name, dst.name)
        return True

    def has_edge(self, source: NodeLike, destination: NodeLike) -> bool:
        src = self._resolve(source)
        dst = self._resolve(destination)
        return dst in src._children

    def edges(self) -> List[Tuple[str, str]]:
        """``(source, destination)`` name pairs, grouped by source in registration order."""
        return [(n.name, c.name) for n in self._nodes.values() for c in n._children]

    def would_create_cycle(self, source: NodeLike, destination: NodeLike) -> bool:
        return cycle.would_create_cycle(self._resolve(source), self._resolve(destination))

    # ------------------------------------------------------------------ #
    # Derived queries
    # ------------------------------------------------------------------ #

    def topological_order(self) -> List[Node[T]]:
        """Every node once, each before all of its children."""
        return topo.topological_order(self._nodes.values())

    def all_paths(
        self, source: NodeLike, destination: NodeLike, limit: Optional[int] = None
    ) -> List[List[Node[T]]]:
        """Every simple path from *source* to *destination* (at most *limit*)."""
        return paths.all_paths(self._resolve(source), self._resolve(destination), limit=limit)

    def iter_paths(self, source: NodeLike, destination: NodeLike) -> Iterator[List[Node[T]]]:
        """Lazy variant of :meth:`all_paths`."""
        return paths.iter_paths(self._resolve(source), self._resolve(destination))

    def render(self) -> str:
        """Plain-text dump, one ``name -> children`` line per node."""
        from dagette.utils.render import render_lines

        return "\n".join(render_lines(self))

    # ------------------------------------------------------------------ #
    # Dunder helpers
    # ------------------------------------------------------------------ #

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return self._nodes.get(item.name) is item
        return item in self._nodes

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(list(self._nodes.values()))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        n_edges = sum(len(n._children) for n in self._nodes.values())
        return f"DAG(nodes={len(self._nodes)}, edges={n_edges})"

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _resolve(self, node: NodeLike, create: bool = False) -> Node[T]:
        if isinstance(node, Node):
            if self._nodes.get(node.name) is not node:
                raise NodeNotFound(node.name)
            return node
        if create and node not in self._nodes:
            return self.add_node(node)
        return self.get_node(node)

    @staticmethod
    def _unlink(src: Node, dst: Node) -> None:
        # both sides together so parents/children never disagree
        src._children.remove(dst)
        dst._parents.remove(src)

    def _reject(self, src_name: str, dst_name: str) -> None:
        level = WARNING if self.config.log_rejections else DEBUG
        log.log(level, "Edge %s -> %s would create a cycle; not added", src_name, dst_name)


def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Node name must be a string, got {type(name).__name__}")
    if not name:
        raise ValueError("Node name must not be empty")
