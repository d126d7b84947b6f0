"""Hook runner backed by the ContextForge plugin framework."""

from __future__ import annotations

import logging
from typing import Any

from toolhooks.plugins.hooks.tool import AfterToolCallPayload, HookContext
from toolhooks.plugins.manager import (
    get_global_hook_runner,
    initialize_hook_runner,
    reset_hook_runner,
)
from toolhooks.plugins.types import HookType

try:
    from mcpgateway.plugins.framework.hooks.registry import get_hook_registry
    from mcpgateway.plugins.framework.manager import PluginManager
    from mcpgateway.plugins.framework.models import (
        GlobalContext,
        PluginPayload,
        PluginResult,
    )

    _HAS_PLUGIN_FRAMEWORK = True
except ImportError:
    _HAS_PLUGIN_FRAMEWORK = False

logger = logging.getLogger(__name__)


def _require_plugin_framework() -> None:
    if not _HAS_PLUGIN_FRAMEWORK:
        raise ImportError(
            "The ContextForge hook runner requires the ContextForge plugin framework. "
            "Install it with: pip install 'toolhooks[contextforge]'"
        )


if _HAS_PLUGIN_FRAMEWORK:

    class AfterToolCallPluginPayload(PluginPayload):
        """``after_tool_call`` payload in the shape ContextForge plugins receive."""

        tool_name: str = ""
        params: dict[str, Any] = {}
        result: Any = None
        error: str | None = None
        duration_ms: int | None = None


def register_tool_hooks() -> None:
    """Register the tool hook types with the ContextForge HookRegistry.

    Idempotent; skips already-registered hook types.
    """
    _require_plugin_framework()

    registry: Any = get_hook_registry()
    if not registry.is_registered(HookType.AFTER_TOOL_CALL.value):
        registry.register_hook(
            HookType.AFTER_TOOL_CALL.value, AfterToolCallPluginPayload, PluginResult
        )


class ContextForgeHookRunner:
    """Adapts a ContextForge ``PluginManager`` to the :class:`HookRunner` protocol."""

    def __init__(self, manager: Any):
        _require_plugin_framework()
        self._manager = manager

    @property
    def manager(self) -> Any:
        """The wrapped ``PluginManager``."""
        return self._manager

    def has_hooks(self, hook_type: str) -> bool:
        return bool(self._manager.has_hooks_for(hook_type))

    async def run_after_tool_call(
        self, event: AfterToolCallPayload, context: HookContext
    ) -> None:
        payload = AfterToolCallPluginPayload(
            tool_name=event.tool_name,
            params=event.params,
            result=event.result,
            error=event.error,
            duration_ms=event.duration_ms,
        )
        global_ctx = GlobalContext(
            request_id=context.session_key or "",
            state={
                "tool_name": context.tool_name,
                "agent_id": context.agent_id,
                "session_key": context.session_key,
            },
        )
        # Observe-only hook: violations are reported, never enforced.
        await self._manager.invoke_hook(
            hook_type=HookType.AFTER_TOOL_CALL.value,
            payload=payload,
            global_context=global_ctx,
            violations_as_exceptions=False,
        )


async def initialize_contextforge_runner(
    config_path: str | None = None, *, timeout: float = 5.0
) -> ContextForgeHookRunner:
    """Start a ContextForge ``PluginManager`` and install it as the global hook runner.

    Args:
        config_path: Optional path to a YAML plugin configuration file.
        timeout: Maximum execution time per plugin in seconds.
    """
    _require_plugin_framework()

    register_tool_hooks()
    PluginManager.reset()
    pm = PluginManager(config_path or "", timeout=max(1, round(timeout)))
    await pm.initialize()
    runner = ContextForgeHookRunner(pm)
    initialize_hook_runner(runner)
    logger.debug("ContextForge hook runner initialized (config=%r)", config_path)
    return runner


async def shutdown_contextforge_runner() -> None:
    """Shut down the installed ContextForge runner, if any, and clear the global runner."""
    runner = get_global_hook_runner()
    if isinstance(runner, ContextForgeHookRunner):
        await runner.manager.shutdown()
    reset_hook_runner()
