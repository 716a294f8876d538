"""Blocking subprocess execution shared by every infra adapter.

This module is the **only** place in the codebase that calls
:mod:`subprocess`.  Launch failures (missing binary, permission
denied) are surfaced as ``OSError`` subclasses by the standard
library; callers translate them into typed
:class:`~lint_meister.exceptions.LintMeisterError` subclasses.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path


def run_command(
    args: Sequence[str | os.PathLike[str]],
    *,
    cwd: Path | None = None,
    merge_stderr: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run *args* to completion and capture its output as text.

    With *merge_stderr* (the default) stderr is folded into
    ``stdout`` so tool messages and diffs arrive in the order the tool
    wrote them.  The exit status is never checked here.

    Raises
    ------
    OSError
        When the executable cannot be launched.
    """
    return subprocess.run(
        [os.fspath(arg) for arg in args],
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
        text=True,
        check=False,
    )
