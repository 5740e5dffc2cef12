from __future__ import annotations

"""Topological sort by depth-first search with three-colour marking.

Nodes are appended once every child has finished (post-order) and the list is
reversed at the end, so for each edge ``u -> v`` *u* comes before *v*.  The
walk uses an explicit stack; the output matches the recursive formulation.
"""

from typing import Dict, Iterable, Iterator, List, Tuple

from dagette.utils.logging import log

from .errors import CycleInvariantViolated
from .node import Node

__all__ = ["topological_order"]

_UNVISITED, _IN_PROGRESS, _DONE = 0, 1, 2


def topological_order(nodes: Iterable[Node]) -> List[Node]:
    """Return *nodes* in a topological order.

    Roots are taken in the iteration order of *nodes*, children in insertion
    order, which makes the result deterministic.

    Raises:
        CycleInvariantViolated: a back edge was found.
    """
    marks: Dict[Node, int] = {}
    result: List[Node] = []

    for root in nodes:
        if marks.get(root, _UNVISITED) != _UNVISITED:
            continue

        marks[root] = _IN_PROGRESS
        stack: List[Tuple[Node, Iterator[Node]]] = [(root, iter(root._children))]

        while stack:
            node, children = stack[-1]
            for child in children:
                mark = marks.get(child, _UNVISITED)
                if mark == _IN_PROGRESS:
                    log.error("Back edge %s -> %s found during topological sort", node.name, child.name)
                    raise CycleInvariantViolated(child.name)
                if mark == _UNVISITED:
                    marks[child] = _IN_PROGRESS
                    stack.append((child, iter(child._children)))
                    break
            else:
                stack.pop()
                marks[node] = _DONE
                result.append(node)

    result.reverse()
    return result
