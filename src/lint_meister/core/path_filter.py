"""Pure path exclusion logic.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

A path is excluded when one of its segments is exactly one of
:data:`EXCLUDED_FRAGMENTS`.  Segments are split on ``/`` and ``\\`` so
``./.venv/lib/x.py`` is excluded but ``./src/envious.py`` and
``./.github/workflows/ci.py`` are not.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path

EXCLUDED_FRAGMENTS: tuple[str, ...] = (
    ".bzr",
    ".direnv",
    ".eggs",
    ".git",
    ".git-rewrite",
    ".hg",
    ".ipynb_checkpoints",
    ".mypy_cache",
    ".nox",
    ".pants.d",
    ".pyenv",
    ".pytest_cache",
    ".pytype",
    ".ruff_cache",
    ".svn",
    ".tox",
    ".venv",
    ".vscode",
    "__pypackages__",
    "_build",
    "buck-out",
    "build",
    "dist",
    "node_modules",
    "site-packages",
    "venv",
)

EXCLUDE_PATTERN: re.Pattern[str] = re.compile(
    r"(?:^|[\\/])(?:"
    + "|".join(re.escape(fragment) for fragment in EXCLUDED_FRAGMENTS)
    + r")(?=[\\/]|$)"
)


def is_excluded(path: str | os.PathLike[str]) -> bool:
    """Return ``True`` if any segment of *path* is a denylisted fragment."""
    return EXCLUDE_PATTERN.search(os.fspath(path)) is not None


def filter_paths(paths: Iterable[Path]) -> list[Path]:
    """Drop excluded paths, preserving order and duplicates."""
    return [path for path in paths if not is_excluded(path)]
