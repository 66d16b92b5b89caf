"""Console output for the CLI.

Wraps rich so every command prints status lines and tables the same way.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.table import Table

_STATUS_STYLES = {
    "pending": "yellow",
    "verified": "green",
    "rejected": "red",
}


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {escape(message)}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    def portfolios(self, items: list[dict[str, Any]]) -> None:
        """Print portfolios as a table, newest first as returned by the server."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Title")
        table.add_column("Skills")
        table.add_column("Level")
        table.add_column("Owner")
        table.add_column("Status")

        for item in items:
            status = item.get("status", "pending")
            style = _STATUS_STYLES.get(status, "white")
            table.add_row(
                item.get("id", ""),
                item.get("title", ""),
                ", ".join(item.get("skills", [])),
                item.get("experienceLevel", ""),
                item.get("owner", ""),
                f"[{style}]{status}[/{style}]",
            )

        self._console.print(table)


_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
