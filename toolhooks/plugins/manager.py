"""Process-wide hook runner reference, resolved at dispatch time."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from toolhooks.plugins.hooks.tool import AfterToolCallPayload, HookContext

logger = logging.getLogger(__name__)


@runtime_checkable
class HookRunner(Protocol):
    """The two operations this package needs from a hook execution engine."""

    def has_hooks(self, hook_type: str) -> bool:
        """Fast check: does any hook listen for ``hook_type``?"""
        ...

    def run_after_tool_call(
        self, event: AfterToolCallPayload, context: HookContext
    ) -> Awaitable[Any] | None:
        """Run every ``after_tool_call`` hook; may raise or return a failing awaitable."""
        ...


# Module-level singleton state
_hook_runner: HookRunner | None = None


def has_hook_runner() -> bool:
    """Fast check: is a hook runner installed?"""
    return _hook_runner is not None


def get_global_hook_runner() -> HookRunner | None:
    """Returns the installed hook runner, or ``None`` if hooks are not configured."""
    return _hook_runner


def initialize_hook_runner(runner: HookRunner) -> HookRunner:
    """Install ``runner`` as the process-wide hook runner, replacing any previous one."""
    global _hook_runner

    if _hook_runner is not None and _hook_runner is not runner:
        logger.debug("Replacing hook runner %r with %r", _hook_runner, runner)
    _hook_runner = runner
    return runner


def reset_hook_runner() -> None:
    """Remove the installed hook runner; dispatch becomes a no-op again."""
    global _hook_runner

    _hook_runner = None
