"""dagette utilities."""

from .render import render_lines, format_path, build_rich_tree

__all__ = [
    "render_lines",
    "format_path",
    "build_rich_tree",
]
