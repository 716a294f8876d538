"""Interactive apply-or-skip confirmation for diff-review mode.

The returned callable is the ``Confirm`` capability injected into
:class:`~lint_meister.core.tool_runner.ToolRunner`; core code never
touches standard input directly.
"""

from __future__ import annotations

from typing import Any

from lint_meister.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def confirm_apply(question: str) -> bool:
    """Ask *question* and return ``True`` only on an explicit yes.

    Blocks until the user answers.  A cancelled prompt (Esc, or Ctrl+C
    which questionary swallows and turns into ``None``) counts as "no",
    leaving the file untouched.
    """
    questionary = _import_questionary()

    answer: bool | None = questionary.confirm(
        question,
        default=False,
        auto_enter=False,
    ).ask()

    return answer is True
