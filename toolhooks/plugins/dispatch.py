"""Fire-and-forget dispatch of ``after_tool_call`` events."""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from toolhooks.core.tool import normalize_tool_name
from toolhooks.plugins.hooks.tool import AfterToolCallPayload, HookContext
from toolhooks.plugins.manager import HookRunner, get_global_hook_runner
from toolhooks.plugins.types import HookType

logger = logging.getLogger(__name__)

# Strong references to in-flight dispatches; the event loop only keeps weak ones.
_pending_dispatches: set[asyncio.Future[Any]] = set()


def pending_dispatches() -> frozenset[asyncio.Future[Any]]:
    """Snapshot of dispatches that have been spawned but not yet settled."""
    return frozenset(_pending_dispatches)


def _context_value(ctx: Any, key: str) -> str | None:
    if ctx is None:
        return None
    if isinstance(ctx, Mapping):
        value = ctx.get(key)
    else:
        value = getattr(ctx, key, None)
    return None if value is None else str(value)


def _normalize_params(params: Any) -> dict[str, Any]:
    if not isinstance(params, Mapping):
        return {}
    return {str(key): value for key, value in params.items()}


def _log_dispatch_failure(
    tool_name: str, tool_call_id: str | None, err: BaseException
) -> None:
    call_id = f" toolCallId={tool_call_id}" if tool_call_id else ""
    logger.warning(
        "after_tool_call hook failed: tool=%s%s error=%s", tool_name, call_id, err
    )


def _on_dispatch_done(
    tool_name: str, tool_call_id: str | None, future: asyncio.Future[Any]
) -> None:
    _pending_dispatches.discard(future)
    if future.cancelled():
        return
    err = future.exception()
    if err is not None:
        _log_dispatch_failure(tool_name, tool_call_id, err)


def run_after_tool_call_hook(
    *,
    tool_name: str,
    params: Any,
    result: Any = None,
    error: str | None = None,
    duration_ms: int | None = None,
    tool_call_id: str | None = None,
    ctx: Any = None,
    runner: HookRunner | None = None,
    normalize: Callable[[str], str] = normalize_tool_name,
) -> asyncio.Future[Any] | None:
    """Hand an ``after_tool_call`` event to the hook runner without waiting on it.

    Returns the spawned future when the runner produced an awaitable, else
    ``None``. Nothing raised by the runner, synchronously or later, escapes
    this function: failures are logged at WARNING and dropped.

    Two no-op guards keep the common case free:
    1. no runner installed (and none passed as ``runner``)
    2. the runner reports no ``after_tool_call`` hooks
    """
    hook_runner = runner if runner is not None else get_global_hook_runner()
    if hook_runner is None:
        return None

    name = tool_name or "tool"
    try:
        if not hook_runner.has_hooks(HookType.AFTER_TOOL_CALL.value):
            return None

        name = normalize(name)
        event = AfterToolCallPayload(
            tool_name=name,
            params=_normalize_params(params),
            result=result,
            error=error,
            duration_ms=duration_ms,
        )
        context = HookContext(
            tool_name=name,
            agent_id=_context_value(ctx, "agent_id"),
            session_key=_context_value(ctx, "session_key"),
        )
        outcome = hook_runner.run_after_tool_call(event, context)
    except Exception as exc:
        _log_dispatch_failure(name, tool_call_id, exc)
        return None

    if not inspect.isawaitable(outcome):
        return None

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as exc:
        if inspect.iscoroutine(outcome):
            outcome.close()
        _log_dispatch_failure(name, tool_call_id, exc)
        return None

    future = asyncio.ensure_future(outcome, loop=loop)
    _pending_dispatches.add(future)
    future.add_done_callback(
        functools.partial(_on_dispatch_done, name, tool_call_id)
    )
    return future
