from __future__ import annotations

"""Rendering helpers (no side-effects).

render_lines(dag) yields the ``name -> children`` text dump.
build_rich_tree(dag) returns a Rich *Tree* ready for printing.
"""
from typing import TYPE_CHECKING, Iterator, List, Sequence, Set

from dagette.utils.constants import NO_CONNECTIONS, SYMBOLS, STYLE

if TYPE_CHECKING:  # pragma: no cover
    from dagette.core.graph import DAG
    from dagette.core.node import Node

__all__ = [
    "render_lines",
    "format_path",
    "build_rich_tree",
]

# --------------------------------------------------------------------------- #
# Plain text
# --------------------------------------------------------------------------- #

def render_lines(dag: "DAG") -> Iterator[str]:  # noqa: D401
    """Yield one ``"<name> -> <children>"`` line per node in registration order."""
    for node in dag.nodes():
        kids = node.children
        targets = ", ".join(c.name for c in kids) if kids else NO_CONNECTIONS
        yield f"{node.name} -> {targets}"


def format_path(path: Sequence["Node"], sep: str = " -> ") -> str:
    return sep.join(n.name for n in path)


# --------------------------------------------------------------------------- #
# Rich tree (import lazily to keep this module lightweight)
# --------------------------------------------------------------------------- #

def build_rich_tree(dag: "DAG", title: str = "DAG"):  # noqa: D401 – return type is Tree but avoid import
    """Return a *rich.tree.Tree* with one branch per root of *dag*.

    A node reachable along several paths is expanded only the first time;
    later occurrences are shown dimmed with a ``↑`` marker.
    """
    from rich.markup import escape
    from rich.tree import Tree  # local import keeps this module lightweight

    tree = Tree(f"[{STYLE['header']}]{title}[/]")
    expanded: Set["Node"] = set()

    def _add(parent: "Tree", node: "Node"):
        if node in expanded:
            parent.add(f"[{STYLE['dim']}]{escape(node.name)} {SYMBOLS['seen']}[/]")
            return
        expanded.add(node)
        style = STYLE["root"] if not node.parents else STYLE["node"]
        branch = parent.add(f"[{style}]{escape(node.name)}[/]")
        for child in node.children:
            _add(branch, child)

    roots: List["Node"] = dag.roots()
    if not roots:
        tree.add(f"[{STYLE['dim']}](empty)[/]")
    for root in roots:
        _add(tree, root)
    return tree
