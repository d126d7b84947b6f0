"""Interfaces for invocable agent tools."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

ToolUpdateCallback = Callable[[Any], Any]
ToolExecute = Callable[..., Awaitable[Any]]

# Canonical names for tools that are commonly registered under a second name.
TOOL_NAME_ALIASES: dict[str, str] = {
    "bash": "exec",
    "apply-patch": "apply_patch",
}


@runtime_checkable
class ToolInvocable(Protocol):
    """Anything with a ``name`` and an async ``execute``.

    ``execute`` is called as ``execute(call_id, params, signal, on_update)``;
    ``signal`` is an opaque cancellation handle (typically an ``asyncio.Event``)
    and ``on_update`` an optional progress callback. Both are forwarded as-is.
    """

    name: str

    async def execute(
        self,
        call_id: str,
        params: Any,
        signal: Any | None = None,
        on_update: ToolUpdateCallback | None = None,
    ) -> Any: ...


@dataclass
class AgentTool:
    """A concrete tool: a name plus the coroutine function that does the work.

    Args:
        name: Tool identifier as the model sees it; may be mixed case.
        execute: Coroutine function ``(call_id, params, signal, on_update)``.
            ``None`` marks a declaration-only tool that cannot be invoked.
        description: Human readable description forwarded to the model.
        label: Display label for UIs.
        parameters: JSON schema of the accepted parameters.
    """

    name: str
    execute: ToolExecute | None = None
    description: str = ""
    label: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)


def normalize_tool_name(name: str, aliases: Mapping[str, str] | None = None) -> str:
    """Canonical form of a tool name: trimmed, lower-cased and de-aliased.

    Idempotent, so ``normalize_tool_name(normalize_tool_name(x)) == normalize_tool_name(x)``
    as long as no alias maps onto another alias.
    """
    normalized = name.strip().lower()
    table = TOOL_NAME_ALIASES if aliases is None else aliases
    return table.get(normalized, normalized)
