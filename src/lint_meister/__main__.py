"""Allow ``python -m lint_meister`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m lint_meister`` behaves identically to the
``lint-meister`` console script.
"""

from __future__ import annotations

from lint_meister.cli.app import cli

if __name__ == "__main__":
    cli()
