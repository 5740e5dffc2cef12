from __future__ import annotations

"""Cycle guard: breadth-first reachability run before every edge insertion.

No reachability index is kept, each check walks the graph again (O(V + E)).
"""

from collections import deque
from typing import Deque, Set

from .node import Node

__all__ = ["would_create_cycle", "reachable"]


def would_create_cycle(source: Node, destination: Node) -> bool:
    """Return True if the edge *source* -> *destination* would close a cycle.

    That is the case exactly when *source* is already reachable from
    *destination*.  A self-loop is reported immediately.
    """
    if source is destination:
        return True

    visited: Set[Node] = set()
    queue: Deque[Node] = deque([destination])

    while queue:
        current = queue.popleft()
        if current is source:
            return True
        if current in visited:
            continue
        visited.add(current)
        queue.extend(current._children)

    return False


def reachable(start: Node, *, reverse: bool = False) -> Set[Node]:
    """Return every node reachable from *start* (excluding *start* itself).

    With ``reverse=True`` parent edges are followed instead, giving ancestors.
    """
    seen: Set[Node] = set()
    queue: Deque[Node] = deque([start])

    while queue:
        current = queue.popleft()
        for nxt in (current._parents if reverse else current._children):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)

    seen.discard(start)
    return seen
