"""Blocked-call classification for tool failures.

A before-call gate refuses a tool call by raising before the tool body runs.
Such failures must not produce an ``after_tool_call`` event, so the
instrumenter asks a predicate whether a given exception is a refusal.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from toolhooks.plugins.base import ToolCallBlockedError

# Substrings a before-call gate puts in the message of the error it raises.
BLOCKED_CALL_MARKERS: tuple[str, ...] = ("blocked by plugin hook", "Tool call blocked")

BlockedCallPredicate = Callable[[BaseException], bool]


def describe_error(exc: BaseException) -> str:
    """String description of an exception as recorded in hook payloads.

    Falls back to the bare type name when ``str(exc)`` is empty or raises.
    """
    try:
        message = str(exc)
    except Exception:
        message = ""
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


def is_blocked_tool_call(
    exc: BaseException, markers: Iterable[str] = BLOCKED_CALL_MARKERS
) -> bool:
    """Return ``True`` when ``exc`` signals a gate refusal rather than a tool failure."""
    if isinstance(exc, ToolCallBlockedError):
        return True
    description = describe_error(exc)
    return any(marker in description for marker in markers)
