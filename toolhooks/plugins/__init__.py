"""Tool hook system: ``after_tool_call`` events for observability plugins.

Public API::

    from toolhooks.plugins import HookType, initialize_hook_runner, run_after_tool_call_hook
"""

from __future__ import annotations

from toolhooks.plugins.base import ToolCallBlockedError
from toolhooks.plugins.dispatch import pending_dispatches, run_after_tool_call_hook
from toolhooks.plugins.hooks.tool import AfterToolCallPayload, HookContext
from toolhooks.plugins.manager import (
    HookRunner,
    get_global_hook_runner,
    has_hook_runner,
    initialize_hook_runner,
    reset_hook_runner,
)
from toolhooks.plugins.policies import BLOCKED_CALL_MARKERS, is_blocked_tool_call
from toolhooks.plugins.types import HookType

__all__ = [
    "BLOCKED_CALL_MARKERS",
    "AfterToolCallPayload",
    "HookContext",
    "HookRunner",
    "HookType",
    "ToolCallBlockedError",
    "get_global_hook_runner",
    "has_hook_runner",
    "initialize_hook_runner",
    "is_blocked_tool_call",
    "pending_dispatches",
    "reset_hook_runner",
    "run_after_tool_call_hook",
]
