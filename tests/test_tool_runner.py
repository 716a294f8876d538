"""Tests for per-file tool execution (core/tool_runner.py).

Tools are in-memory fakes; the ordering fake really rewrites files under
``tmp_path`` so idempotence can be observed on disk.

Coverage:
* Ordering check: unchanged, auto-apply, diff review yes/no, errors.
* Formatting check: unchanged, reformatted, would-reformat yes/no, errors.
* Verbose mode echoes apply output.
* Idempotence of the ordering check.
"""

from __future__ import annotations

from pathlib import Path

from conftest import (
    FakeFormattingTool,
    FakeOrderingTool,
    RecordingReporter,
    ScriptedConfirm,
    write_file,
)

from lint_meister.core.models import FormatState, RunConfig, ToolOutcome
from lint_meister.core.tool_runner import ToolRunner

UNSORTED = "import sys\nimport os\n\nprint(os, sys)\n"
SORTED = "import os\nimport sys\n\nprint(os, sys)\n"


def _runner(
    reporter: RecordingReporter,
    *,
    diff: bool = False,
    verbose: bool = False,
    ordering: FakeOrderingTool | None = None,
    formatting: FakeFormattingTool | None = None,
    confirm: ScriptedConfirm | None = None,
) -> ToolRunner:
    return ToolRunner(
        RunConfig(diff=diff, verbose=verbose),
        ordering or FakeOrderingTool(),
        formatting or FakeFormattingTool(),
        reporter,
        confirm or ScriptedConfirm(),
    )


# ---------------------------------------------------------------------------
# Ordering check
# ---------------------------------------------------------------------------

class TestOrderingCheck:
    def test_sorted_file_is_unchanged(self, tmp_path: Path, reporter: RecordingReporter) -> None:
        path = write_file(tmp_path / "a.py", SORTED)
        tool = FakeOrderingTool()

        outcome = _runner(reporter, ordering=tool).run_ordering_check(path)

        assert outcome is ToolOutcome.UNCHANGED
        assert tool.calls == [("check", path)]
        assert reporter.events == []

    def test_unsorted_file_is_fixed_without_asking(
        self, tmp_path: Path, reporter: RecordingReporter,
    ) -> None:
        path = write_file(tmp_path / "a.py", UNSORTED)
        confirm = ScriptedConfirm()

        outcome = _runner(reporter, confirm=confirm).run_ordering_check(path)

        assert outcome is ToolOutcome.CHANGES_APPLIED
        assert path.read_text() == SORTED
        assert confirm.questions == []

    def test_diff_review_accepted(self, tmp_path: Path, reporter: RecordingReporter) -> None:
        path = write_file(tmp_path / "a.py", UNSORTED)
        tool = FakeOrderingTool()
        confirm = ScriptedConfirm(True)

        outcome = _runner(
            reporter, diff=True, ordering=tool, confirm=confirm,
        ).run_ordering_check(path)

        assert outcome is ToolOutcome.CHANGES_APPLIED
        assert [call for call, _ in tool.calls] == ["check", "diff", "apply"]
        assert reporter.kinds() == ["diff"]
        assert confirm.questions == [f"Apply isort changes to '{path}'?"]
        assert path.read_text() == SORTED

    def test_diff_review_declined(self, tmp_path: Path, reporter: RecordingReporter) -> None:
        path = write_file(tmp_path / "a.py", UNSORTED)
        tool = FakeOrderingTool()

        outcome = _runner(
            reporter, diff=True, ordering=tool, confirm=ScriptedConfirm(False),
        ).run_ordering_check(path)

        assert outcome is ToolOutcome.CHANGES_PENDING_APPROVAL
        assert ("apply", path) not in tool.calls
        assert path.read_text() == UNSORTED

    def test_tool_error_is_reported_not_raised(
        self, tmp_path: Path, reporter: RecordingReporter,
    ) -> None:
        path = write_file(tmp_path / "a.py", UNSORTED)
        runner = _runner(reporter, ordering=FakeOrderingTool(failing=(str(path),)))

        outcome = runner.run_ordering_check(path)

        assert outcome is ToolOutcome.ERROR
        assert reporter.kinds() == ["error"]
        assert runner.last_error is not None
        assert "isort failed" in runner.last_error

    def test_last_error_resets_on_success(
        self, tmp_path: Path, reporter: RecordingReporter,
    ) -> None:
        bad = write_file(tmp_path / "bad.py", UNSORTED)
        good = write_file(tmp_path / "good.py", SORTED)
        runner = _runner(reporter, ordering=FakeOrderingTool(failing=(str(bad),)))

        runner.run_ordering_check(bad)
        runner.run_ordering_check(good)

        assert runner.last_error is None

    def test_second_run_is_unchanged(self, tmp_path: Path, reporter: RecordingReporter) -> None:
        path = write_file(tmp_path / "a.py", UNSORTED)
        runner = _runner(reporter)

        assert runner.run_ordering_check(path) is ToolOutcome.CHANGES_APPLIED
        assert runner.run_ordering_check(path) is ToolOutcome.UNCHANGED

    def test_verbose_echoes_apply_output(
        self, tmp_path: Path, reporter: RecordingReporter,
    ) -> None:
        path = write_file(tmp_path / "a.py", UNSORTED)

        _runner(reporter, verbose=True).run_ordering_check(path)

        assert reporter.payloads("tool_output") == [f"Fixing {path}\n"]


# ---------------------------------------------------------------------------
# Formatting check
# ---------------------------------------------------------------------------

class TestFormatCheck:
    def test_unchanged_prints_nothing(self, reporter: RecordingReporter) -> None:
        tool = FakeFormattingTool(apply_state=FormatState.UNCHANGED)

        outcome = _runner(reporter, formatting=tool).run_format_check(Path("a.py"))

        assert outcome is ToolOutcome.UNCHANGED
        assert tool.calls == [("apply", Path("a.py"))]
        assert reporter.events == []

    def test_reformatted_without_diff_review(self, reporter: RecordingReporter) -> None:
        tool = FakeFormattingTool(apply_state=FormatState.REFORMATTED)

        outcome = _runner(reporter, formatting=tool).run_format_check(Path("a.py"))

        assert outcome is ToolOutcome.CHANGES_APPLIED
        assert reporter.payloads("tool_output") == ["1 file reformatted\n"]

    def test_diff_review_previews_first(self, reporter: RecordingReporter) -> None:
        tool = FakeFormattingTool(preview_state=FormatState.UNCHANGED)

        outcome = _runner(reporter, diff=True, formatting=tool).run_format_check(Path("a.py"))

        assert outcome is ToolOutcome.UNCHANGED
        assert tool.calls == [("preview", Path("a.py"))]

    def test_would_reformat_accepted(self, reporter: RecordingReporter) -> None:
        tool = FakeFormattingTool(
            preview_state=FormatState.WOULD_REFORMAT,
            apply_state=FormatState.REFORMATTED,
        )
        confirm = ScriptedConfirm(True)

        outcome = _runner(
            reporter, diff=True, formatting=tool, confirm=confirm,
        ).run_format_check(Path("a.py"))

        assert outcome is ToolOutcome.CHANGES_APPLIED
        assert [call for call, _ in tool.calls] == ["preview", "apply"]
        assert confirm.questions == ["Apply ruff changes to 'a.py'?"]
        assert "would be reformatted" in str(reporter.payloads("tool_output")[0])

    def test_would_reformat_declined(self, reporter: RecordingReporter) -> None:
        tool = FakeFormattingTool(preview_state=FormatState.WOULD_REFORMAT)

        outcome = _runner(
            reporter, diff=True, formatting=tool, confirm=ScriptedConfirm(False),
        ).run_format_check(Path("a.py"))

        assert outcome is ToolOutcome.CHANGES_PENDING_APPROVAL
        assert tool.calls == [("preview", Path("a.py"))]

    def test_tool_error_is_reported_not_raised(self, reporter: RecordingReporter) -> None:
        tool = FakeFormattingTool(failing=("a.py",))

        outcome = _runner(reporter, formatting=tool).run_format_check(Path("a.py"))

        assert outcome is ToolOutcome.ERROR
        assert reporter.kinds() == ["error"]
        assert "ruff failed on 'a.py'" in str(reporter.payloads("error")[0])
