"""Core / service layer — selection policy and tool orchestration.

Rules
-----
* No ``print()`` calls — output goes through the injected ``Reporter``.
* No subprocess calls — tools and git are reached through protocols.
* No imports from ``cli`` or ``infra``.
"""

from lint_meister.core.file_selector import FileSelector
from lint_meister.core.models import (
    FileList,
    FormatResult,
    FormatState,
    RunConfig,
    RunSummary,
    SelectionMode,
    ToolOutcome,
    ToolResult,
)
from lint_meister.core.orchestrator import Orchestrator
from lint_meister.core.path_filter import is_excluded
from lint_meister.core.protocols import (
    Confirm,
    FormattingTool,
    OrderingTool,
    Reporter,
    VcsProvider,
)
from lint_meister.core.tool_runner import ToolRunner

__all__: list[str] = [
    "Confirm",
    "FileList",
    "FileSelector",
    "FormatResult",
    "FormatState",
    "FormattingTool",
    "Orchestrator",
    "OrderingTool",
    "Reporter",
    "RunConfig",
    "RunSummary",
    "SelectionMode",
    "ToolOutcome",
    "ToolResult",
    "ToolRunner",
    "VcsProvider",
    "is_excluded",
]
