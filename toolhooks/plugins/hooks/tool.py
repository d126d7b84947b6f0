"""Tool execution hook payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from toolhooks.plugins.base import BasePayload


class AfterToolCallPayload(BasePayload):
    """Payload for ``after_tool_call``, sent after the tool body ran.

    Exactly one of ``result`` and ``error`` describes the outcome: ``error`` is
    ``None`` on success, ``result`` is ``None`` on failure.
    """

    tool_name: str = ""
    params: dict[str, Any] = Field(default_factory=dict)
    result: Any = None
    error: str | None = None
    duration_ms: int | None = Field(default=None, ge=0)


class HookContext(BasePayload):
    """Correlation metadata passed alongside the payload, not part of it."""

    tool_name: str = ""
    agent_id: str | None = None
    session_key: str | None = None
