"""File selection — turns ``--files`` tokens into an ordered file list.

Each token is resolved in priority order: an existing directory, an
existing file, then a :class:`~lint_meister.core.models.SelectionMode`
keyword.  Anything else is fatal.  Every candidate is passed through
:func:`~lint_meister.core.path_filter.is_excluded`; excluded ones are
dropped silently.

Guarantees
----------
* Filesystem reads only (``os.walk`` / ``stat``) — no subprocess, no
  ``print()``.  Git queries go through the injected
  :class:`~lint_meister.core.protocols.VcsProvider`.
* Token order is preserved.  Duplicates across tokens are kept.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from lint_meister.core.models import FileList, RunConfig, SelectionMode
from lint_meister.core.path_filter import filter_paths, is_excluded
from lint_meister.core.protocols import VcsProvider
from lint_meister.exceptions import InvalidSelectionTokenError

SOURCE_SUFFIX: str = ".py"


def iter_source_files(directory: Path) -> Iterator[Path]:
    """Yield every ``*.py`` file beneath *directory*.

    Excluded directories are pruned instead of descended into; entries
    are visited in sorted order so runs are reproducible.
    """
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = sorted(
            name for name in dirnames
            if not is_excluded(os.path.join(dirpath, name))
        )
        for name in sorted(filenames):
            if name.endswith(SOURCE_SUFFIX):
                yield Path(dirpath, name)


class FileSelector:
    """Resolve selection tokens into a :data:`FileList`.

    Parameters
    ----------
    vcs:
        Any object satisfying the :class:`VcsProvider` protocol.
    root:
        Working-tree root walked by the ``all`` mode.
    """

    def __init__(self, vcs: VcsProvider, *, root: Path | None = None) -> None:
        self._vcs: VcsProvider = vcs
        self._root: Path = root if root is not None else Path(".")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def select(self, config: RunConfig) -> FileList:
        """Return the files to lint for *config*.

        Raises
        ------
        InvalidSelectionTokenError
            For the first token that is neither a path nor a mode.
        VersionControlError
            When a git-backed mode cannot query the repository.
        """
        selected: list[Path] = []
        for token in config.selection:
            selected.extend(filter_paths(self._candidates(token)))
        return tuple(selected)

    # ------------------------------------------------------------------
    # Token dispatch
    # ------------------------------------------------------------------

    def _candidates(self, token: str) -> list[Path]:
        path = Path(token)
        if path.is_dir():
            return list(iter_source_files(path))
        if path.is_file():
            # An explicit file is taken as-is, whatever its extension.
            return [path]

        mode = SelectionMode.from_token(token)
        if mode is None:
            raise InvalidSelectionTokenError(
                token,
                hint="Use a file, a directory, or one of: "
                + ", ".join(m.value for m in SelectionMode),
            )
        return self._candidates_for_mode(mode)

    def _candidates_for_mode(self, mode: SelectionMode) -> list[Path]:
        if mode is SelectionMode.ALL:
            return list(iter_source_files(self._root))
        if mode is SelectionMode.MODIFIED:
            reported = self._vcs.modified_files()
        elif mode is SelectionMode.MODIFIED_CACHED:
            reported = self._vcs.staged_files()
        else:
            reported = self._vcs.untracked_files()
        # Deleted files still show up in ``git diff`` — skip them.
        return [
            path for path in reported
            if path.suffix == SOURCE_SUFFIX and path.is_file()
        ]
