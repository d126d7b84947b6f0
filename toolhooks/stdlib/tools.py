"""Tool wrappers that report every call to ``after_tool_call`` hooks."""

from __future__ import annotations

import copy
import dataclasses
import logging
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from toolhooks.config import DEFAULT_CONFIG, InstrumentationConfig
from toolhooks.core.tool import ToolUpdateCallback
from toolhooks.plugins.dispatch import run_after_tool_call_hook
from toolhooks.plugins.hooks.tool import HookContext
from toolhooks.plugins.policies import describe_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

CallerContext = HookContext | Mapping[str, Any]


def _classify_blocked(
    is_blocked: Callable[[BaseException], bool], tool_name: str, exc: BaseException
) -> bool:
    try:
        return bool(is_blocked(exc))
    except Exception:
        logger.warning(
            "blocked-call predicate failed for tool=%s; dispatching anyway",
            tool_name,
            exc_info=True,
        )
        return False


def _with_execute(tool: T, execute: Callable[..., Any]) -> T:
    """Copy of ``tool`` whose ``execute`` is replaced; ``tool`` itself is untouched."""
    if dataclasses.is_dataclass(tool) and not isinstance(tool, type):
        if "execute" in {f.name for f in dataclasses.fields(tool)}:
            return dataclasses.replace(tool, execute=execute)  # type: ignore[type-var]
    if isinstance(tool, BaseModel) and "execute" in type(tool).model_fields:
        return tool.model_copy(update={"execute": execute})
    wrapped = copy.copy(tool)
    wrapped.execute = execute  # type: ignore[attr-defined]
    return wrapped


def wrap_tool_with_after_tool_call_hook(
    tool: T,
    ctx: CallerContext | None = None,
    *,
    config: InstrumentationConfig | None = None,
) -> T:
    """Return a copy of ``tool`` whose ``execute`` fires ``after_tool_call`` hooks.

    The wrapped ``execute`` awaits the original with the same arguments and
    returns its result (or re-raises its exception) unchanged. Once the call
    settles, an event with the normalized tool name, params, outcome and
    duration is handed to :func:`run_after_tool_call_hook`, which never waits
    on the hooks. Calls refused by a before-call gate produce no event.

    Args:
        tool: Any object with ``name`` and an async ``execute``. Tools without
            ``execute`` are returned as-is.
        ctx: Caller correlation data; ``agent_id`` and ``session_key`` are
            forwarded to the hook context.
        config: Instrumentation settings; defaults to :data:`DEFAULT_CONFIG`.
    """
    execute = getattr(tool, "execute", None)
    if execute is None:
        return tool

    cfg = config or DEFAULT_CONFIG
    tool_name = getattr(tool, "name", "") or cfg.default_tool_name
    is_blocked = cfg.blocked_predicate()
    normalize = cfg.name_normalizer()

    async def instrumented_execute(
        tool_call_id: str,
        params: Any,
        signal: Any | None = None,
        on_update: ToolUpdateCallback | None = None,
    ) -> Any:
        started = time.monotonic()
        result: Any = None
        error: str | None = None
        blocked = False
        try:
            result = await execute(tool_call_id, params, signal, on_update)
            return result
        except BaseException as exc:
            error = describe_error(exc)
            blocked = _classify_blocked(is_blocked, tool_name, exc)
            raise
        finally:
            if not blocked:
                run_after_tool_call_hook(
                    tool_name=tool_name,
                    params=params,
                    result=result,
                    error=error,
                    duration_ms=max(0, int((time.monotonic() - started) * 1000)),
                    tool_call_id=tool_call_id,
                    ctx=ctx,
                    normalize=normalize,
                )

    return _with_execute(tool, instrumented_execute)


def wrap_tools_with_after_tool_call_hook(
    tools: Iterable[T],
    ctx: CallerContext | None = None,
    *,
    config: InstrumentationConfig | None = None,
) -> list[T]:
    """Wrap every tool in ``tools``; order is preserved."""
    return [
        wrap_tool_with_after_tool_call_hook(tool, ctx, config=config) for tool in tools
    ]
