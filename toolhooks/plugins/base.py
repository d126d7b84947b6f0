"""Base types for the tool hook system."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ToolCallBlockedError(Exception):
    """Raised by a before-call gate when a hook refuses a tool call.

    The message always starts with ``"Tool call blocked by plugin hook"`` so
    that gates raising a plain ``Exception`` with the same wording and gates
    raising this error are classified the same way.
    """

    def __init__(  # noqa: D107
        self, tool_name: str, reason: str = "", code: str = "", plugin_name: str = ""
    ):
        self.tool_name = tool_name
        self.reason = reason
        self.code = code
        self.plugin_name = plugin_name
        detail = f"[{code}] " if code else ""
        suffix = f": {detail}{reason}" if reason or detail else ""
        super().__init__(f"Tool call blocked by plugin hook{suffix}")


class BasePayload(BaseModel):
    """Frozen base for every hook payload.

    Hooks receive the same instance the dispatcher built; use
    ``model_copy(update={...})`` to derive a modified copy.
    """

    model_config = ConfigDict(frozen=True)
