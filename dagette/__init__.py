"""dagette: a tiny, cycle-safe directed acyclic graph.

Main components:
* `DAG`: node registry with cycle-checked edge insertion
* `Node`: read-only handle to a vertex and its optional payload
* `GraphConfig`: per-graph duplicate / implicit-node policies
* derived queries: `DAG.topological_order`, `DAG.all_paths`
"""

# Version info
__version__ = "0.1.0"

# Core components
from dagette.core.config import GraphConfig
from dagette.core.errors import (
    DagError,
    NodeNotFound,
    DuplicateNode,
    CycleInvariantViolated,
)
from dagette.core.graph import DAG
from dagette.core.node import Node

# Utility re-exports
from dagette.utils.render import build_rich_tree, format_path

# Export all important symbols
__all__ = [
    # Core classes
    "DAG",
    "Node",
    "GraphConfig",

    # Errors
    "DagError",
    "NodeNotFound",
    "DuplicateNode",
    "CycleInvariantViolated",

    # Functions
    "build_rich_tree",
    "format_path",
]
