from __future__ import annotations

"""Exhaustive simple-path enumeration (backtracking DFS with an explicit stack)."""

from typing import Iterator, List, Optional, Set, Tuple

from .node import Node

__all__ = ["iter_paths", "all_paths"]


def iter_paths(source: Node, destination: Node) -> Iterator[List[Node]]:
    """Yield every simple path from *source* to *destination*.

    Paths come out in the order the search completes them.  Each yielded list
    is a fresh copy.
    """
    path: List[Node] = [source]
    on_path: Set[Node] = {source}
    stack: List[Tuple[Node, Iterator[Node]]] = [(source, iter(source._children))]

    if source is destination:
        yield list(path)
        return

    while stack:
        _, children = stack[-1]
        for child in children:
            if child in on_path:
                continue
            if child is destination:
                yield path + [child]
                continue
            path.append(child)
            on_path.add(child)
            stack.append((child, iter(child._children)))
            break
        else:
            # backtrack so sibling branches may pass through this node again
            node, _ = stack.pop()
            on_path.discard(node)
            path.pop()


def all_paths(source: Node, destination: Node, limit: Optional[int] = None) -> List[List[Node]]:
    """Collect :func:`iter_paths`, stopping after *limit* paths when given."""
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    paths: List[List[Node]] = []
    if limit == 0:
        return paths
    for p in iter_paths(source, destination):
        paths.append(p)
        if limit is not None and len(paths) >= limit:
            break
    return paths
