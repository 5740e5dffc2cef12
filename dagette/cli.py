from __future__ import annotations

"""dagette Command Line Interface."""

from typing import List, Optional, Tuple

import typer
from rich.markup import escape

from dagette import DAG, DagError, build_rich_tree, format_path
from dagette.utils.constants import SYMBOLS
from dagette.utils.logging import console, setup

app = typer.Typer(
    name="dagette",
    help="CLI for dagette: build and query cycle-safe DAGs.",
    add_completion=False,
)

_EDGES_HELP = "Edges as SRC:DST, e.g. A:B A:C B:D."


@app.callback()
def main(
    log_level: str = typer.Option("warning", "--log-level", help="debug, info, warning or error."),
):
    """Build a graph from the command line and print what it derives."""
    setup(log_level)


def _parse_edge(raw: str) -> Tuple[str, str]:
    src, sep, dst = raw.partition(":")
    if not sep or not src or not dst or ":" in dst:
        console.print(f"[bold red]Error: malformed edge '{escape(raw)}' (expected SRC:DST)[/]")
        raise typer.Exit(code=1)
    return src, dst


def _build(edges: List[str]) -> DAG:
    """Insert *edges* in order, reporting (not failing on) rejected ones."""
    dag: DAG = DAG()
    for raw in edges:
        src, dst = _parse_edge(raw)
        if not dag.add_edge(src, dst):
            console.print(
                f"{SYMBOLS['warning']}[yellow]Skipped {escape(src)} -> {escape(dst)}: would create a cycle[/]"
            )
    return dag


def _print_structure(dag: DAG) -> None:
    console.print("Graph Structure:")
    console.print(dag.render(), markup=False, highlight=False)


@app.command()
def show(
    edges: List[str] = typer.Argument(..., help=_EDGES_HELP),
    tree: bool = typer.Option(True, "--tree/--no-tree", help="Also print a Rich tree."),
):
    """Print the node -> children dump (and a tree view)."""
    dag = _build(edges)
    _print_structure(dag)
    if tree:
        console.print("")
        console.print(build_rich_tree(dag))


@app.command()
def order(edges: List[str] = typer.Argument(..., help=_EDGES_HELP)):
    """Print a topological order of the graph."""
    dag = _build(edges)
    try:
        ordered = dag.topological_order()
    except DagError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise typer.Exit(code=1)
    console.print(format_path(ordered), markup=False, highlight=False)


@app.command()
def paths(
    edges: List[str] = typer.Argument(..., help=_EDGES_HELP),
    source: str = typer.Option(..., "--source", "-s", help="Start node."),
    target: str = typer.Option(..., "--target", "-t", help="End node."),
    limit: Optional[int] = typer.Option(None, "--limit", min=0, help="Stop after this many paths."),
):
    """Print every simple path from SOURCE to TARGET."""
    dag = _build(edges)
    try:
        found = dag.all_paths(source, target, limit=limit)
    except DagError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise typer.Exit(code=1)

    if not found:
        console.print(f"[yellow]No path from {escape(source)} to {escape(target)}.[/]")
        return
    for p in found:
        console.print(format_path(p), markup=False, highlight=False)
    console.print(f"{SYMBOLS['success']}{len(found)} path(s)")


@app.command()
def demo():
    """Walk through the sample T1..T5 task graph."""
    dag: DAG[str] = DAG()
    for i in range(1, 6):
        dag.add_node(f"T{i}", f"Task {i}")

    for src, dst in [("T1", "T2"), ("T1", "T3"), ("T2", "T4"), ("T3", "T4"), ("T4", "T5")]:
        dag.add_edge(src, dst)

    _print_structure(dag)

    console.print("\nTopological Order:")
    console.print(format_path(dag.topological_order()), markup=False, highlight=False)

    console.print("\nAll paths from T1 to T5:")
    for p in dag.all_paths("T1", "T5"):
        console.print(format_path(p), markup=False, highlight=False)

    added = dag.add_edge("T5", "T1")
    console.print(f"\nAdded edge T5 -> T1: {added}", highlight=False)

    removed = dag.remove_edge("T1", "T3")
    console.print(f"\nRemoved edge T1 -> T3: {removed}", highlight=False)

    console.print("\nUpdated graph:")
    _print_structure(dag)


if __name__ == "__main__":
    app()
