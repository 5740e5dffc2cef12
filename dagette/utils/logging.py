from __future__ import annotations
"""Rich-backed logging helpers.

The library only emits records on the ``dagette`` logger.  Console callers
(the CLI, notebooks) call :func:`setup` once to get Rich formatting.
"""
from logging import Formatter, Logger, getLogger, INFO, DEBUG, WARNING, ERROR

from rich.console import Console
from rich.logging import RichHandler

console = Console()

__all__ = [
    "console",
    "get",
    "log",
    "setup",
]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("dagette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("dagette")
    lg.setLevel(lvl)
    return lg


def setup(level: str = "info") -> Logger:
    """Attach a single RichHandler to the package logger and set *level*."""
    lg = get(level)
    if not any(isinstance(h, RichHandler) for h in lg.handlers):
        handler = RichHandler(console=console, rich_tracebacks=True, markup=True, show_path=False)
        handler.setFormatter(Formatter("%(message)s", datefmt="%H:%M:%S"))
        lg.addHandler(handler)
    return lg
