"""lint-meister — the Python hygiene tool.

Selects Python files by git state or path and runs isort and
ruff format over them, optionally reviewing each change as a diff.
"""

from lint_meister.version import __version__

__all__: list[str] = ["__version__"]
