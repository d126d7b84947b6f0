"""Ready-made tool wrappers."""

from toolhooks.stdlib.tools import (
    wrap_tool_with_after_tool_call_hook,
    wrap_tools_with_after_tool_call_hook,
)

__all__ = ["wrap_tool_with_after_tool_call_hook", "wrap_tools_with_after_tool_call_hook"]
