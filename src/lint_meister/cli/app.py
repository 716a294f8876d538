"""CLI application entry point and command routing for lint-meister.

This module is the **sole error boundary** for the entire application.
It catches :class:`~lint_meister.exceptions.LintMeisterError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Argument errors that argparse would report with exit status 2 are
  raised as :class:`~lint_meister.exceptions.InvalidConfigurationError`
  instead, so every configuration mistake exits with status 1.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import NoReturn

from lint_meister.cli import exit_codes
from lint_meister.cli.console import console, escape
from lint_meister.core.models import DEFAULT_LINE_LENGTH, RunConfig, SelectionMode
from lint_meister.exceptions import InvalidConfigurationError, LintMeisterError
from lint_meister.version import __version__

_EPILOG = """\
selection modes:
  all               every *.py file under the current directory
  modified          files changed in the working tree since HEAD
  modified-cached   files staged in the index
  untracked         files not tracked and not ignored by git

pre-commit hook (.git/hooks/pre-commit):
  lint-meister --files modified-cached --line-length 79 || exit 1
  if ! git diff --quiet; then
      echo "Files were modified during linting."
      echo "Please review the changes and re-add/re-commit again."
      exit 1
  fi
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidConfigurationError(
            message,
            hint=f"Run {self.prog} --help for usage.",
        )


def _line_length(value: str) -> int:
    """argparse ``type`` for ``--line-length``: digits only."""
    if re.fullmatch(r"[0-9]+", value) is None:
        raise argparse.ArgumentTypeError(
            f"must be a non-negative number, got {value!r}",
        )
    return int(value)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = _ArgumentParser(
        prog="lint-meister",
        description="Run isort and ruff format over selected Python files.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--files",
        nargs="+",
        action="extend",
        default=[],
        metavar="TOKEN",
        help="Files to lint: "
        + ", ".join(f"'{mode.value}'" for mode in SelectionMode)
        + ", or file/directory paths.",
    )
    parser.add_argument(
        "-d",
        "--diff",
        action="store_true",
        help="Show the diff and ask before applying each change.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Run isort and ruff in verbose mode.",
    )
    parser.add_argument(
        "--line-length",
        type=_line_length,
        default=DEFAULT_LINE_LENGTH,
        metavar="N",
        help=f"Line length for ruff format (default is {DEFAULT_LINE_LENGTH}).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_lint(config: RunConfig) -> int:
    """Wire infra adapters into the core services and run them.

    Flow:
    1. Instantiate git / isort / ruff adapters for *config*.
    2. Build the selector, runner and orchestrator around them.
    3. Run the pipeline; per-file failures are already reported.
    """
    from lint_meister.cli.console import ConsoleReporter, print_banner
    from lint_meister.cli.prompt import confirm_apply
    from lint_meister.core.file_selector import FileSelector
    from lint_meister.core.orchestrator import Orchestrator
    from lint_meister.core.tool_runner import ToolRunner
    from lint_meister.infra.dependency_check import require_tools
    from lint_meister.infra.git_provider import GitProvider
    from lint_meister.infra.isort_tool import IsortTool
    from lint_meister.infra.ruff_tool import RuffFormatTool

    print_banner()

    reporter = ConsoleReporter()
    runner = ToolRunner(
        config,
        IsortTool(verbose=config.verbose),
        RuffFormatTool(line_length=config.line_length, verbose=config.verbose),
        reporter,
        confirm_apply,
    )
    orchestrator = Orchestrator(
        FileSelector(GitProvider()),
        runner,
        reporter,
        require_tools=require_tools,
    )
    orchestrator.run(config)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lint-meister CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    InvalidConfigurationError
        For unknown flags or a malformed ``--line-length``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = RunConfig(
        selection=tuple(args.files),
        diff=args.diff,
        verbose=args.verbose,
        line_length=args.line_length,
    )
    return _handle_lint(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LintMeisterError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
