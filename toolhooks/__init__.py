"""toolhooks: post-execution instrumentation for agent tools.

Wrap a tool once and every call is reported to ``after_tool_call`` hooks::

    from toolhooks import initialize_hook_runner, wrap_tool_with_after_tool_call_hook

    initialize_hook_runner(my_runner)
    tool = wrap_tool_with_after_tool_call_hook(tool, {"agent_id": "main"})
"""

from toolhooks.config import InstrumentationConfig
from toolhooks.core.tool import AgentTool, ToolInvocable, normalize_tool_name
from toolhooks.plugins import (
    AfterToolCallPayload,
    HookContext,
    HookRunner,
    HookType,
    ToolCallBlockedError,
    get_global_hook_runner,
    initialize_hook_runner,
    reset_hook_runner,
    run_after_tool_call_hook,
)
from toolhooks.stdlib.tools import (
    wrap_tool_with_after_tool_call_hook,
    wrap_tools_with_after_tool_call_hook,
)

__all__ = [
    "AfterToolCallPayload",
    "AgentTool",
    "HookContext",
    "HookRunner",
    "HookType",
    "InstrumentationConfig",
    "ToolCallBlockedError",
    "ToolInvocable",
    "get_global_hook_runner",
    "initialize_hook_runner",
    "normalize_tool_name",
    "reset_hook_runner",
    "run_after_tool_call_hook",
    "wrap_tool_with_after_tool_call_hook",
    "wrap_tools_with_after_tool_call_hook",
]
