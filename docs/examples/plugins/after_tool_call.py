#
# after_tool_call hooks: audit every tool call without slowing it down.
#
# This example wires a tiny in-process hook runner into the global runner slot
# and drives four scenarios through wrapped tools:
#
#   1. Successful call      : the audit hook sees params, result and duration
#   2. Failing call         : the hook sees the error string, the caller the error
#   3. Blocked call         : a before-call gate refused it; no event is emitted
#   4. Broken hook          : the hook raises; the caller never notices
#
# Run:
#   python docs/examples/plugins/after_tool_call.py

import asyncio
import logging

from toolhooks import (
    AgentTool,
    HookType,
    ToolCallBlockedError,
    initialize_hook_runner,
    reset_hook_runner,
    wrap_tool_with_after_tool_call_hook,
)
from toolhooks.plugins import pending_dispatches

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
log = logging.getLogger("after_tool_call")


# ---------------------------------------------------------------------------
# Hook runner
# ---------------------------------------------------------------------------


class AuditRunner:
    """Records every after_tool_call event; optionally fails on purpose."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.events = []

    def has_hooks(self, hook_type):
        return hook_type == HookType.AFTER_TOOL_CALL.value

    async def run_after_tool_call(self, event, context):
        if self.fail:
            raise RuntimeError("audit sink unavailable")
        self.events.append(event)
        log.info(
            "[audit] tool=%s agent=%s duration=%sms error=%s",
            event.tool_name,
            context.agent_id,
            event.duration_ms,
            event.error,
        )


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


async def _exec(call_id, params, signal=None, on_update=None):
    if params.get("cmd") == "false":
        raise RuntimeError("command exited with status 1")
    return {"content": [], "details": {"ok": True, "cmd": params.get("cmd")}}


async def _gated(call_id, params, signal=None, on_update=None):
    raise ToolCallBlockedError("exec", reason="rm is not allowed", code="DENY_RM")


CTX = {"agent_id": "main", "session_key": "main"}


async def _drain():
    pending = pending_dispatches()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)


async def main():
    runner = AuditRunner()
    initialize_hook_runner(runner)

    exec_tool = wrap_tool_with_after_tool_call_hook(
        AgentTool(name="Exec", execute=_exec), CTX
    )
    gated_tool = wrap_tool_with_after_tool_call_hook(
        AgentTool(name="exec", execute=_gated), CTX
    )

    log.info("=== Scenario 1: successful call ===")
    result = await exec_tool.execute("call-1", {"cmd": "ls"})
    log.info("result: %s", result)
    await _drain()

    log.info("=== Scenario 2: failing call ===")
    try:
        await exec_tool.execute("call-2", {"cmd": "false"})
    except RuntimeError as exc:
        log.info("caller saw: %s", exc)
    await _drain()

    log.info("=== Scenario 3: blocked call ===")
    try:
        await gated_tool.execute("call-3", {"cmd": "rm -rf /"})
    except ToolCallBlockedError as exc:
        log.info("caller saw: %s", exc)
    await _drain()
    assert len(runner.events) == 2, "blocked call must not be audited"

    log.info("=== Scenario 4: broken hook ===")
    runner.fail = True
    result = await exec_tool.execute("call-4", {"cmd": "pwd"})
    log.info("result despite failing hook: %s", result)
    await _drain()

    reset_hook_runner()


if __name__ == "__main__":
    asyncio.run(main())
