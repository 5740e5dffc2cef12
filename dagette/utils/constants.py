"""
Centralized UI constants for consistent styling across dagette.

This module defines standard symbols, colors, and styles used in Rich
console output throughout the application.
"""

# Placeholder used by the text dump for nodes without successors
NO_CONNECTIONS = "[no connections]"

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
    "warning": "[bold yellow]⚠[/bold yellow] ",
    "arrow": " → ",
    "seen": "↑",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "info": "blue",
    "warning": "yellow",
    "error": "red",
    "success": "green",
    "root": "bold magenta",
    "node": "cyan",
}
