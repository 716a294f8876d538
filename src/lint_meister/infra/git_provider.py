"""git-backed implementation of :class:`~lint_meister.core.protocols.VcsProvider`.

Every query uses NUL-separated output (``-z``) so unusual file names
survive unquoted.  ``git diff`` reports paths relative to the repository
top level; they are rebased onto the working directory so callers can
open them directly.
"""

from __future__ import annotations

import os
from pathlib import Path

from lint_meister.exceptions import VersionControlError
from lint_meister.infra.process import run_command


class GitProvider:
    """Concrete :class:`VcsProvider` backed by the ``git`` executable.

    This class satisfies the :class:`~lint_meister.core.protocols.VcsProvider`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd: Path = cwd if cwd is not None else Path.cwd()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def modified_files(self) -> list[Path]:
        return self._from_top_level(self._git("diff", "--name-only", "-z", "HEAD"))

    def staged_files(self) -> list[Path]:
        return self._from_top_level(
            self._git("diff", "--cached", "--name-only", "-z", "HEAD"),
        )

    def untracked_files(self) -> list[Path]:
        names = self._git("ls-files", "--others", "--exclude-standard", "-z")
        return [Path(name) for name in names]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def top_level(self) -> Path:
        """Return the absolute path of the repository root."""
        return Path(self._run("rev-parse", "--show-toplevel").strip())

    def _from_top_level(self, names: list[str]) -> list[Path]:
        if not names:
            return []
        top = self.top_level()
        return [Path(os.path.relpath(top / name, self._cwd)) for name in names]

    def _git(self, *args: str) -> list[str]:
        return [name for name in self._run(*args).split("\0") if name]

    def _run(self, *args: str) -> str:
        try:
            result = run_command(["git", *args], cwd=self._cwd, merge_stderr=False)
        except OSError as exc:
            raise VersionControlError(
                f"Could not run git: {exc}",
                hint="Make sure git is installed and on PATH.",
            ) from exc
        if result.returncode != 0:
            raise self._error(list(args), result.stderr)
        return result.stdout

    @staticmethod
    def _error(args: list[str], stderr: str | None) -> VersionControlError:
        detail = (stderr or "").strip() or "unknown error"
        return VersionControlError(
            f"git {' '.join(args)} failed: {detail}",
            hint="Git-based selection modes must run inside a repository "
            "with at least one commit.",
        )
