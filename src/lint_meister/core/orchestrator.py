"""Core orchestrator — the linear lint pipeline.

Sequence
--------
1. Require ``isort``, ``ruff`` and ``git`` on PATH.
2. Select files (:class:`~lint_meister.core.file_selector.FileSelector`).
3. Stop with "nothing to do" when the selection is empty.
4. isort pass over every file, in order.
5. ruff pass over every file, in order, so formatting sees the
   reordered imports.
6. Remove the ruff cache directory if this run created it.

Configuration and dependency errors propagate before any file is
touched.  Per-file tool errors are recorded and the batch continues.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from lint_meister.core.file_selector import FileSelector
from lint_meister.core.models import RunConfig, RunSummary, ToolOutcome, ToolResult
from lint_meister.core.protocols import Reporter, RequireTools
from lint_meister.core.tool_runner import ToolRunner

REQUIRED_TOOLS: tuple[str, ...] = ("isort", "ruff", "git")

RUFF_CACHE_DIR: Path = Path(".ruff_cache")


def remove_cache_dir(path: Path) -> None:
    """Delete *path* recursively if it is a directory."""
    if path.is_dir():
        shutil.rmtree(path)


class Orchestrator:
    """Drive selection and both tool passes for one invocation.

    Parameters
    ----------
    selector:
        Resolves ``--files`` tokens.
    runner:
        Runs isort / ruff against single files.
    reporter:
        Console reporting collaborator.
    require_tools:
        Dependency probe; raises ``MissingDependencyError``.
    cache_dir:
        Formatter cache removed at the end of the run.
    cleanup:
        Called with *cache_dir* when the run created it.
    """

    def __init__(
        self,
        selector: FileSelector,
        runner: ToolRunner,
        reporter: Reporter,
        *,
        require_tools: RequireTools,
        cache_dir: Path = RUFF_CACHE_DIR,
        cleanup: Callable[[Path], None] = remove_cache_dir,
    ) -> None:
        self._selector = selector
        self._runner = runner
        self._reporter = reporter
        self._require_tools = require_tools
        self._cache_dir = cache_dir
        self._cleanup = cleanup

    def run(self, config: RunConfig) -> RunSummary:
        """Execute the pipeline and return what happened to each file.

        Raises
        ------
        MissingDependencyError
            When a required executable is not installed.
        InvalidSelectionTokenError
            When a ``--files`` token cannot be resolved.
        VersionControlError
            When a git-backed selection mode fails.
        """
        self._require_tools(REQUIRED_TOOLS)

        files = self._selector.select(config)
        if not files:
            self._reporter.nothing_to_do()
            return RunSummary(files=files)

        cache_existed = self._cache_dir.is_dir()
        results: list[ToolResult] = []
        try:
            self._reporter.section(
                f"Running {self._runner.ordering_tool_name} on Python files:",
            )
            for path in files:
                self._reporter.processing(path)
                outcome = self._runner.run_ordering_check(path)
                results.append(self._result(path, self._runner.ordering_tool_name, outcome))

            self._reporter.section(
                f"Running {self._runner.formatting_tool_name} on Python files:",
            )
            for path in files:
                self._reporter.processing(path)
                outcome = self._runner.run_format_check(path)
                results.append(self._result(path, self._runner.formatting_tool_name, outcome))
        finally:
            if not cache_existed:
                self._cleanup(self._cache_dir)

        summary = RunSummary(files=files, results=tuple(results))
        self._reporter.summary(summary)
        return summary

    def _result(self, path: Path, tool: str, outcome: ToolOutcome) -> ToolResult:
        detail = self._runner.last_error if outcome is ToolOutcome.ERROR else None
        return ToolResult(path=path, tool=tool, outcome=outcome, detail=detail)
