"""Infrastructure: executable detection and install guidance.

This module is responsible for locating ``isort``, ``ruff`` and ``git``
on the system PATH and for suggesting how to install whichever one is
missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from lint_meister.exceptions import MissingDependencyError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of probing PATH for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool.  Empty when
        it is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present — the caller decides whether to abort.
    """
    result = shutil.which(name)

    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=install_commands_for(name),
    )


def require_tools(names: Sequence[str]) -> None:
    """Raise :class:`MissingDependencyError` for the first missing tool."""
    for name in names:
        status = detect_tool(name)
        if status.found:
            continue
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append(f"Install {name} using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise MissingDependencyError(
            name,
            hint="\n".join(hint_lines) if hint_lines else None,
        )


# ---------------------------------------------------------------------------
# Install guidance
# ---------------------------------------------------------------------------

def install_commands_for(name: str) -> tuple[str, ...]:
    """Return install commands for *name* on the current OS."""
    if name in ("isort", "ruff"):
        return (f"pip install {name}", f"pipx install {name}")
    if name == "git":
        return _platform_git_install_commands()
    return ()


def _platform_git_install_commands() -> tuple[str, ...]:
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Git.Git",
            "choco install git",
        )
    if system == "linux":
        return (
            "sudo apt install git",
            "sudo dnf install git",
            "sudo pacman -S git",
        )
    if system == "darwin":
        return ("brew install git", "xcode-select --install")
    # Fallback — generic guidance.
    return ("Please install git from https://git-scm.com/downloads",)
