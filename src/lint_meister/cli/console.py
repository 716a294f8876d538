"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

:class:`ConsoleReporter` is the concrete
:class:`~lint_meister.core.protocols.Reporter` handed to the core
services.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from lint_meister.core.models import RunSummary, ToolOutcome
from lint_meister.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, **options: Any) -> None:
        """Render with Rich when available, else plain stderr print.

        *options* are Rich ``Console.print`` keywords (``markup``,
        ``highlight``…) and are ignored by the plain fallback.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, **options)


console = _ConsoleProxy()


def escape(text: str) -> str:
    """Escape Rich markup in *text*; identity when Rich is missing."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


# ---------------------------------------------------------------------------
# Banner
# ---------------------------------------------------------------------------

_BANNER: str = r"""
  _     _       _     __  __       _     _
 | |   (_) _ _ | |_  |  \/  | ___ (_)___| |_ ___ _ __
 | |   | | '_ \| __| | |\/| |/ _ \| / __| __/ _ \ '__|
 | |___| | | | | |_  | |  | |  __/| \__ \ ||  __/ |
 |_____|_|_| |_|\__| |_|  |_|\___||_|___/\__\___|_|
"""


def print_banner() -> None:
    console.print(_BANNER, style="magenta", markup=False, highlight=False)
    console.print("[cyan]               The Python hygiene tool![/cyan]\n")


# ---------------------------------------------------------------------------
# Reporter
# ---------------------------------------------------------------------------

_SUMMARY_COLUMNS: tuple[tuple[str, ToolOutcome], ...] = (
    ("Unchanged", ToolOutcome.UNCHANGED),
    ("Applied", ToolOutcome.CHANGES_APPLIED),
    ("Pending", ToolOutcome.CHANGES_PENDING_APPROVAL),
    ("Errors", ToolOutcome.ERROR),
)


class ConsoleReporter:
    """Render core progress events on the console.

    Tool output and diffs are printed with markup disabled so square
    brackets in source code are shown verbatim.
    """

    def section(self, title: str) -> None:
        console.print(f"\n[blue]{title}[/blue]")

    def processing(self, path: Path) -> None:
        console.print(f"Linting file: {path}", markup=False, highlight=False)

    def tool_output(self, text: str) -> None:
        console.print(text.rstrip("\n"), markup=False, highlight=False)

    def diff(self, text: str) -> None:
        if not text.strip():
            return
        try:
            from rich.syntax import Syntax
        except ModuleNotFoundError:
            self.tool_output(text)
            return
        console.print(Syntax(text.rstrip("\n"), "diff", background_color="default"))

    def error(self, message: str) -> None:
        console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)

    def nothing_to_do(self) -> None:
        console.print(
            "[red]No Python files to lint based on the specified criteria.[/red]",
        )

    def summary(self, summary: RunSummary) -> None:
        try:
            from rich.table import Table
        except ModuleNotFoundError:
            _print_plain_summary(summary)
            return

        table = Table(
            title=f"Linted {len(summary.files)} file(s)",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Tool", style="bold", min_width=8)
        for label, _ in _SUMMARY_COLUMNS:
            table.add_column(label, justify="right")

        for tool in summary.tools:
            table.add_row(
                tool,
                *(str(summary.count(tool, outcome)) for _, outcome in _SUMMARY_COLUMNS),
            )

        console.print()
        console.print(table)
        for result in summary.errors:
            console.print(
                f"[red]FAIL[/red] {result.tool}: {escape(str(result.path))}",
                highlight=False,
            )


def _print_plain_summary(summary: RunSummary) -> None:
    """Render the summary table without Rich."""
    header = f"{'Tool':<8}" + "".join(f"{label:>11}" for label, _ in _SUMMARY_COLUMNS)
    print(f"\nLinted {len(summary.files)} file(s)", file=sys.stderr)
    print(header, file=sys.stderr)
    print("-" * len(header), file=sys.stderr)
    for tool in summary.tools:
        counts = "".join(
            f"{summary.count(tool, outcome):>11}" for _, outcome in _SUMMARY_COLUMNS
        )
        print(f"{tool:<8}{counts}", file=sys.stderr)
    for result in summary.errors:
        print(f"FAIL {result.tool}: {result.path}", file=sys.stderr)
