"""Custom exception hierarchy for lint-meister.

All exceptions that cross layer boundaries must inherit from
:class:`LintMeisterError`.  Raw ``OSError`` / ``subprocess`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
LintMeisterError
├── InvalidConfigurationError
├── InvalidSelectionTokenError
├── MissingDependencyError
├── VersionControlError
├── ToolInvocationError
└── EnvironmentError
"""

from __future__ import annotations


class LintMeisterError(Exception):
    """Base exception for all lint-meister errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class InvalidConfigurationError(LintMeisterError):
    """Raised for malformed options (bad ``--line-length``, unknown flags)."""


# --- File selection --------------------------------------------------------

class InvalidSelectionTokenError(LintMeisterError):
    """Raised when a ``--files`` token is neither a path nor a known mode."""

    def __init__(self, token: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid file or directory '{token}'.", hint=hint)
        self.token: str = token


class VersionControlError(LintMeisterError):
    """Raised when a git query fails (e.g. outside a repository)."""


# --- External tools --------------------------------------------------------

class MissingDependencyError(LintMeisterError):
    """Raised when a required executable cannot be located on PATH."""

    def __init__(self, tool: str, *, hint: str | None = None) -> None:
        super().__init__(f"{tool} is not installed.", hint=hint)
        self.tool: str = tool


class ToolInvocationError(LintMeisterError):
    """Raised when isort or ruff fails for a single file.

    This is the only error the batch recovers from: the runner marks the
    (file, tool) pair as failed and moves on to the next file.
    """

    def __init__(
        self,
        tool: str,
        path: str,
        message: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"{tool} failed on '{path}': {message}", hint=hint)
        self.tool: str = tool
        self.path: str = path


# --- Environment / optional UI libraries -----------------------------------

class EnvironmentError(LintMeisterError):
    """Raised when a required runtime library is not available."""
