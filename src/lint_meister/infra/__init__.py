"""Infrastructure layer — external system integration.

This layer wraps all interaction with isort, ruff, git and the
operating system.  Every raw ``OSError`` must be caught here and
re-raised as a :class:`~lint_meister.exceptions.LintMeisterError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from lint_meister.infra.dependency_check import ToolStatus, detect_tool, require_tools
from lint_meister.infra.git_provider import GitProvider
from lint_meister.infra.isort_tool import IsortTool
from lint_meister.infra.ruff_tool import RuffFormatTool

__all__: list[str] = [
    "GitProvider",
    "IsortTool",
    "RuffFormatTool",
    "ToolStatus",
    "detect_tool",
    "require_tools",
]
