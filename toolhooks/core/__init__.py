"""Core tool abstractions shared by the plugin and stdlib layers."""

from toolhooks.core.tool import (
    TOOL_NAME_ALIASES,
    AgentTool,
    ToolInvocable,
    normalize_tool_name,
)

__all__ = ["TOOL_NAME_ALIASES", "AgentTool", "ToolInvocable", "normalize_tool_name"]
