"""Domain models for lint-meister.

All records are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial aggregation.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeAlias

from lint_meister.exceptions import InvalidConfigurationError

DEFAULT_LINE_LENGTH: int = 90
"""Line length handed to ruff when ``--line-length`` is not given."""

FileList: TypeAlias = tuple[Path, ...]
"""Ordered files selected for one run.  Duplicates are allowed."""


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class SelectionMode(str, Enum):
    """Keywords accepted by ``--files`` in place of a path."""

    ALL = "all"
    MODIFIED = "modified"
    MODIFIED_CACHED = "modified-cached"
    UNTRACKED = "untracked"

    @classmethod
    def from_token(cls, token: str) -> SelectionMode | None:
        """Return the mode named by *token*, or ``None`` if it names none."""
        for mode in cls:
            if mode.value == token:
                return mode
        return None


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable options for a single lint run."""

    selection: tuple[str, ...] = ()
    """``--files`` tokens in the order they were given."""

    diff: bool = False
    """Show each proposed change and ask before applying it."""

    verbose: bool = False
    """Forward ``--verbose`` to isort and ruff."""

    line_length: int = DEFAULT_LINE_LENGTH
    """Maximum line length passed to ``ruff format``."""

    def __post_init__(self) -> None:
        if isinstance(self.line_length, bool) or not isinstance(self.line_length, int):
            raise InvalidConfigurationError(
                f"--line-length must be a number, got {self.line_length!r}.",
            )
        if self.line_length < 0:
            raise InvalidConfigurationError(
                f"--line-length must be a non-negative number, got {self.line_length}.",
            )


# ---------------------------------------------------------------------------
# Tool outcomes
# ---------------------------------------------------------------------------

class ToolOutcome(Enum):
    """Result of running one tool against one file."""

    UNCHANGED = "unchanged"
    CHANGES_APPLIED = "changes applied"
    CHANGES_PENDING_APPROVAL = "changes pending approval"
    ERROR = "error"


class FormatState(Enum):
    """What ``ruff format`` reported for a single file."""

    UNCHANGED = "unchanged"
    REFORMATTED = "reformatted"
    WOULD_REFORMAT = "would reformat"


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Classified output of one ``ruff format`` invocation."""

    state: FormatState
    output: str
    """Combined stdout/stderr, including the diff in preview mode."""


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Outcome of one (file, tool) pair."""

    path: Path
    tool: str
    outcome: ToolOutcome
    detail: str | None = None
    """Error text when ``outcome`` is :attr:`ToolOutcome.ERROR`."""


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Everything a finished run produced, for the final report."""

    files: FileList
    results: tuple[ToolResult, ...] = ()

    def count(self, tool: str, outcome: ToolOutcome) -> int:
        return sum(
            1 for result in self.results
            if result.tool == tool and result.outcome is outcome
        )

    @property
    def tools(self) -> tuple[str, ...]:
        """Tool names in the order they first ran."""
        return tuple(dict.fromkeys(result.tool for result in self.results))

    @property
    def errors(self) -> tuple[ToolResult, ...]:
        return tuple(r for r in self.results if r.outcome is ToolOutcome.ERROR)

    def __bool__(self) -> bool:
        return len(self.files) > 0
