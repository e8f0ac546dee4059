"""Diagnostic output on stderr using Rich."""
from rich.console import Console
from rich.markup import escape

# Reports go to stdout, diagnostics to stderr
_console = Console(stderr=True)


def log(message: str) -> None:
    """Print an informational message."""
    _console.print(escape(message))


def warn(message: str) -> None:
    """Print a warning message."""
    _console.print(f"[yellow]{escape(message)}[/yellow]")


def error(message: str) -> None:
    """Print an error message."""
    _console.print(f"[red bold]{escape(message)}[/red bold]")
