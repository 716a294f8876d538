"""Shared pytest fixtures and in-memory fakes for the lint-meister suite.

Guidelines
----------
* No test ever launches isort, ruff or git — subprocess calls are
  patched at :mod:`lint_meister.infra.process` or replaced by the fakes
  below.
* Core tests must be pure — fakes record calls instead of printing.
* Filesystem scenarios run under ``tmp_path`` with ``monkeypatch.chdir``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lint_meister.core.models import FormatResult, FormatState, RunSummary
from lint_meister.exceptions import ToolInvocationError


# ---------------------------------------------------------------------------
# Reporter
# ---------------------------------------------------------------------------

class RecordingReporter:
    """:class:`Reporter` that stores every event as ``(kind, payload)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def section(self, title: str) -> None:
        self.events.append(("section", title))

    def processing(self, path: Path) -> None:
        self.events.append(("processing", path))

    def tool_output(self, text: str) -> None:
        self.events.append(("tool_output", text))

    def diff(self, text: str) -> None:
        self.events.append(("diff", text))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def nothing_to_do(self) -> None:
        self.events.append(("nothing_to_do", None))

    def summary(self, summary: RunSummary) -> None:
        self.events.append(("summary", summary))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]

    def payloads(self, kind: str) -> list[object]:
        return [payload for k, payload in self.events if k == kind]


# ---------------------------------------------------------------------------
# Version control
# ---------------------------------------------------------------------------

class FakeVcs:
    """:class:`VcsProvider` returning canned path lists."""

    def __init__(
        self,
        *,
        modified: list[str] | None = None,
        staged: list[str] | None = None,
        untracked: list[str] | None = None,
    ) -> None:
        self.modified = [Path(p) for p in modified or []]
        self.staged = [Path(p) for p in staged or []]
        self.untracked = [Path(p) for p in untracked or []]
        self.calls: list[str] = []

    def modified_files(self) -> list[Path]:
        self.calls.append("modified")
        return list(self.modified)

    def staged_files(self) -> list[Path]:
        self.calls.append("staged")
        return list(self.staged)

    def untracked_files(self) -> list[Path]:
        self.calls.append("untracked")
        return list(self.untracked)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

def _sorted_imports(text: str) -> str:
    """Sort the leading ``import`` block of *text* — a stand-in for isort."""
    lines = text.splitlines(keepends=True)
    head = [line for line in lines if line.startswith("import ")]
    rest = [line for line in lines if not line.startswith("import ")]
    return "".join(sorted(head) + rest)


class FakeOrderingTool:
    """:class:`OrderingTool` that really sorts ``import`` lines on disk.

    Paths listed in *failing* raise :class:`ToolInvocationError`.
    """

    name = "isort"

    def __init__(self, *, failing: tuple[str, ...] = ()) -> None:
        self.failing = failing
        self.calls: list[tuple[str, Path]] = []

    def _check_failure(self, path: Path) -> None:
        if str(path) in self.failing:
            raise ToolInvocationError(self.name, str(path), "exit status 2: boom")

    def needs_changes(self, path: Path) -> bool:
        self.calls.append(("check", path))
        self._check_failure(path)
        text = path.read_text()
        return _sorted_imports(text) != text

    def diff(self, path: Path) -> str:
        self.calls.append(("diff", path))
        return f"--- {path}:before\n+++ {path}:after\n"

    def apply(self, path: Path) -> str:
        self.calls.append(("apply", path))
        self._check_failure(path)
        path.write_text(_sorted_imports(path.read_text()))
        return f"Fixing {path}\n"


class FakeFormattingTool:
    """:class:`FormattingTool` returning scripted states per call."""

    name = "ruff"

    def __init__(
        self,
        *,
        preview_state: FormatState = FormatState.UNCHANGED,
        apply_state: FormatState = FormatState.UNCHANGED,
        failing: tuple[str, ...] = (),
    ) -> None:
        self.preview_state = preview_state
        self.apply_state = apply_state
        self.failing = failing
        self.calls: list[tuple[str, Path]] = []

    def preview(self, path: Path) -> FormatResult:
        self.calls.append(("preview", path))
        if str(path) in self.failing:
            raise ToolInvocationError(self.name, str(path), "exit status 2: syntax")
        return FormatResult(self.preview_state, f"diff for {path}\n1 file would be reformatted\n")

    def apply(self, path: Path) -> FormatResult:
        self.calls.append(("apply", path))
        if str(path) in self.failing:
            raise ToolInvocationError(self.name, str(path), "exit status 2: syntax")
        return FormatResult(self.apply_state, "1 file reformatted\n")


class ScriptedConfirm:
    """``Confirm`` capability answering from a fixed list."""

    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answers.pop(0)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_file(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path
