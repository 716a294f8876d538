"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and CLI
renderers must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations — preserving the dependency
inversion principle.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from lint_meister.core.models import FormatResult, RunSummary

Confirm = Callable[[str], bool]
"""Ask a yes/no question and return ``True`` only on an explicit yes."""

RequireTools = Callable[[Sequence[str]], None]
"""Raise :class:`~lint_meister.exceptions.MissingDependencyError` for the
first executable in the sequence that is not installed."""


class VcsProvider(Protocol):
    """Contract for the version-control queries behind the git modes.

    Every method returns paths relative to the current working directory
    in the order git reports them, unfiltered by extension.  Failures
    must be raised as :class:`~lint_meister.exceptions.VersionControlError`.
    """

    def modified_files(self) -> list[Path]:
        """Files differing between the working tree and ``HEAD``."""
        ...  # pragma: no cover

    def staged_files(self) -> list[Path]:
        """Files differing between the index and ``HEAD``."""
        ...  # pragma: no cover

    def untracked_files(self) -> list[Path]:
        """Files neither tracked nor ignored."""
        ...  # pragma: no cover


class OrderingTool(Protocol):
    """Contract for the import-ordering tool (isort).

    All methods raise :class:`~lint_meister.exceptions.ToolInvocationError`
    when the tool cannot be launched or exits with an unexpected status.
    """

    name: str

    def needs_changes(self, path: Path) -> bool:
        """Run in check-only mode; ``True`` when imports are out of order."""
        ...  # pragma: no cover

    def diff(self, path: Path) -> str:
        """Return the proposed change as a unified diff."""
        ...  # pragma: no cover

    def apply(self, path: Path) -> str:
        """Rewrite *path* in place and return the tool's output."""
        ...  # pragma: no cover


class FormattingTool(Protocol):
    """Contract for the code formatter (ruff format).

    Implementations own the translation from exit status and free-text
    output into :class:`~lint_meister.core.models.FormatResult`.
    """

    name: str

    def preview(self, path: Path) -> FormatResult:
        """Run in diff mode without touching the file."""
        ...  # pragma: no cover

    def apply(self, path: Path) -> FormatResult:
        """Format *path* in place."""
        ...  # pragma: no cover


class Reporter(Protocol):
    """Console reporting collaborator used by the core services."""

    def section(self, title: str) -> None:
        """Announce the start of a tool pass."""
        ...  # pragma: no cover

    def processing(self, path: Path) -> None:
        """Announce the file about to be checked."""
        ...  # pragma: no cover

    def tool_output(self, text: str) -> None:
        """Echo raw tool output verbatim."""
        ...  # pragma: no cover

    def diff(self, text: str) -> None:
        """Show a proposed change."""
        ...  # pragma: no cover

    def error(self, message: str) -> None:
        """Report a non-fatal, per-file failure."""
        ...  # pragma: no cover

    def nothing_to_do(self) -> None:
        """Report that the selection produced no files."""
        ...  # pragma: no cover

    def summary(self, summary: RunSummary) -> None:
        """Render the end-of-run report."""
        ...  # pragma: no cover
