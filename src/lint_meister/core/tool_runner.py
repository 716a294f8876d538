"""Per-file tool execution — isort and ruff against a single path.

The runner turns adapter results into a closed
:class:`~lint_meister.core.models.ToolOutcome`.  It never inspects tool
output itself; exit codes and message matching stay inside the infra
adapters.  A :class:`~lint_meister.exceptions.ToolInvocationError` is
reported and folded into :attr:`ToolOutcome.ERROR` so one broken file
never stops the batch.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from lint_meister.core.models import FormatResult, FormatState, RunConfig, ToolOutcome
from lint_meister.core.protocols import Confirm, FormattingTool, OrderingTool, Reporter
from lint_meister.exceptions import ToolInvocationError


class ToolRunner:
    """Run the ordering and formatting checks for one file at a time.

    Parameters
    ----------
    config:
        Run options; only ``diff`` and ``verbose`` are consulted here.
    ordering_tool, formatting_tool:
        Adapters satisfying :class:`OrderingTool` / :class:`FormattingTool`.
    reporter:
        Sink for tool output, diffs and per-file errors.
    confirm:
        Yes/no prompt used when diff review is enabled.
    """

    def __init__(
        self,
        config: RunConfig,
        ordering_tool: OrderingTool,
        formatting_tool: FormattingTool,
        reporter: Reporter,
        confirm: Confirm,
    ) -> None:
        self._config = config
        self._ordering = ordering_tool
        self._formatting = formatting_tool
        self._reporter = reporter
        self._confirm = confirm
        self.last_error: str | None = None
        """Message of the most recent ``ERROR`` outcome, if any."""

    @property
    def ordering_tool_name(self) -> str:
        return self._ordering.name

    @property
    def formatting_tool_name(self) -> str:
        return self._formatting.name

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_ordering_check(self, path: Path) -> ToolOutcome:
        """Check import order for *path*, fixing or asking as configured."""
        return self._guarded(path, self._ordering_check)

    def run_format_check(self, path: Path) -> ToolOutcome:
        """Check formatting for *path*, fixing or asking as configured."""
        return self._guarded(path, self._format_check)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _ordering_check(self, path: Path) -> ToolOutcome:
        tool = self._ordering
        if not tool.needs_changes(path):
            return ToolOutcome.UNCHANGED

        if self._config.diff:
            self._reporter.diff(tool.diff(path))
            if not self._ask(tool.name, path):
                return ToolOutcome.CHANGES_PENDING_APPROVAL

        self._echo_verbose(tool.apply(path))
        return ToolOutcome.CHANGES_APPLIED

    def _format_check(self, path: Path) -> ToolOutcome:
        tool = self._formatting
        if self._config.diff:
            result = tool.preview(path)
        else:
            result = tool.apply(path)

        if result.state is FormatState.UNCHANGED:
            return ToolOutcome.UNCHANGED

        self._reporter.tool_output(result.output)
        if result.state is FormatState.REFORMATTED:
            return ToolOutcome.CHANGES_APPLIED

        if not self._ask(tool.name, path):
            return ToolOutcome.CHANGES_PENDING_APPROVAL
        applied: FormatResult = tool.apply(path)
        self._echo_verbose(applied.output)
        return ToolOutcome.CHANGES_APPLIED

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _guarded(
        self,
        path: Path,
        check: Callable[[Path], ToolOutcome],
    ) -> ToolOutcome:
        self.last_error = None
        try:
            return check(path)
        except ToolInvocationError as exc:
            self.last_error = str(exc)
            self._reporter.error(self.last_error)
            return ToolOutcome.ERROR

    def _ask(self, tool_name: str, path: Path) -> bool:
        return self._confirm(f"Apply {tool_name} changes to '{path}'?")

    def _echo_verbose(self, output: str) -> None:
        if self._config.verbose and output.strip():
            self._reporter.tool_output(output)
