"""Hook type enum for tool lifecycle events."""

from __future__ import annotations

from enum import Enum


class HookType(str, Enum):
    """Hook kinds a runner may report listeners for."""

    # Tool Execution
    BEFORE_TOOL_CALL = "before_tool_call"
    AFTER_TOOL_CALL = "after_tool_call"
