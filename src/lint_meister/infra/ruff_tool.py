"""ruff-backed implementation of :class:`~lint_meister.core.protocols.FormattingTool`.

This module is the **only** place that knows what ``ruff format``
prints.  Its free-text summary lines are matched here and nowhere else:

* ``"1 file left unchanged"`` / ``"1 file already formatted"`` — nothing to do.
* ``"1 file would be reformatted"`` — ``--diff`` found changes (exit 1).
* ``"1 file reformatted"`` — the file was rewritten in place.

Exit status ``2`` (or ``1`` outside ``--diff`` mode) means ruff failed,
e.g. on a syntax error.
"""

from __future__ import annotations

from pathlib import Path

from lint_meister.core.models import DEFAULT_LINE_LENGTH, FormatResult, FormatState
from lint_meister.exceptions import ToolInvocationError
from lint_meister.infra.process import run_command


class RuffFormatTool:
    """Concrete :class:`FormattingTool` wrapping ``ruff format``."""

    name: str = "ruff"

    _UNCHANGED_SIGNALS: tuple[str, ...] = (
        "left unchanged",
        "already formatted",
    )
    _WOULD_REFORMAT_SIGNAL: str = "would be reformatted"

    def __init__(
        self,
        *,
        line_length: int = DEFAULT_LINE_LENGTH,
        verbose: bool = False,
    ) -> None:
        self._line_length = line_length
        self._verbose = verbose

    def _args(self, path: Path, *extra: str) -> list[str]:
        args = [self.name, "format", str(path), "--line-length", str(self._line_length)]
        if self._verbose:
            args.append("--verbose")
        args.extend(extra)
        return args

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def preview(self, path: Path) -> FormatResult:
        return self._run(path, "--diff", preview=True)

    def apply(self, path: Path) -> FormatResult:
        return self._run(path, preview=False)

    # ------------------------------------------------------------------
    # Output classification
    # ------------------------------------------------------------------

    @classmethod
    def classify(cls, returncode: int, output: str, *, preview: bool) -> FormatState | None:
        """Map an exit status and combined output to a :class:`FormatState`.

        Returns ``None`` when the invocation failed.
        """
        allowed = (0, 1) if preview else (0,)
        if returncode not in allowed:
            return None
        if any(signal in output for signal in cls._UNCHANGED_SIGNALS):
            return FormatState.UNCHANGED
        if preview:
            if returncode == 1 or cls._WOULD_REFORMAT_SIGNAL in output:
                return FormatState.WOULD_REFORMAT
            return FormatState.UNCHANGED
        return FormatState.REFORMATTED

    def _run(self, path: Path, *extra: str, preview: bool) -> FormatResult:
        try:
            result = run_command(self._args(path, *extra))
        except OSError as exc:
            raise ToolInvocationError(self.name, str(path), str(exc)) from exc

        output = result.stdout or ""
        state = self.classify(result.returncode, output, preview=preview)
        if state is None:
            detail = output.strip() or "no output"
            raise ToolInvocationError(
                self.name,
                str(path),
                f"exit status {result.returncode}: {detail}",
            )
        return FormatResult(state=state, output=output)
