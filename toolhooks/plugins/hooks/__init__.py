"""Hook payload classes for the tool hook system."""

from toolhooks.plugins.hooks.tool import AfterToolCallPayload, HookContext

__all__ = [
    # Tool
    "AfterToolCallPayload",
    "HookContext",
]
