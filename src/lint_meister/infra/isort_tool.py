"""isort-backed implementation of :class:`~lint_meister.core.protocols.OrderingTool`.

Exit-status contract of ``isort --check-only``:

* ``0`` — imports already sorted.
* ``1`` — imports would be re-sorted.
* anything else — isort itself failed.

Every invocation uses the black profile and atomic writes, so a file
that would no longer parse after sorting is left untouched.
"""

from __future__ import annotations

from pathlib import Path

from lint_meister.exceptions import ToolInvocationError
from lint_meister.infra.process import run_command


class IsortTool:
    """Concrete :class:`OrderingTool` wrapping the ``isort`` executable."""

    name: str = "isort"

    _CHECK_CLEAN: int = 0
    _CHECK_UNSORTED: int = 1

    def __init__(self, *, verbose: bool = False) -> None:
        self._verbose = verbose

    def _args(self, path: Path, *extra: str) -> list[str]:
        args = [self.name, str(path)]
        if self._verbose:
            args.append("--verbose")
        args.extend(("--profile=black", "--atomic", *extra))
        return args

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def needs_changes(self, path: Path) -> bool:
        returncode, output = self._run(path, "--check-only")
        if returncode == self._CHECK_CLEAN:
            return False
        if returncode == self._CHECK_UNSORTED:
            return True
        raise self._failure(path, returncode, output)

    def diff(self, path: Path) -> str:
        returncode, output = self._run(path, "--diff")
        if returncode not in (self._CHECK_CLEAN, self._CHECK_UNSORTED):
            raise self._failure(path, returncode, output)
        return output

    def apply(self, path: Path) -> str:
        returncode, output = self._run(path)
        if returncode != 0:
            raise self._failure(path, returncode, output)
        return output

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run(self, path: Path, *extra: str) -> tuple[int, str]:
        try:
            result = run_command(self._args(path, *extra))
        except OSError as exc:
            raise ToolInvocationError(self.name, str(path), str(exc)) from exc
        return result.returncode, result.stdout or ""

    def _failure(self, path: Path, returncode: int, output: str) -> ToolInvocationError:
        detail = output.strip() or "no output"
        return ToolInvocationError(
            self.name,
            str(path),
            f"exit status {returncode}: {detail}",
        )
