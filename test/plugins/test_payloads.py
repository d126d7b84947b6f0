"""Tests for hook payload models."""

import pytest
from pydantic import ValidationError

from toolhooks.plugins.base import BasePayload
from toolhooks.plugins.hooks.tool import AfterToolCallPayload, HookContext


class TestBasePayload:
    def test_frozen(self):
        payload = HookContext(tool_name="read")
        with pytest.raises(ValidationError):
            payload.tool_name = "write"

    def test_base_is_frozen_config(self):
        assert BasePayload.model_config["frozen"] is True


class TestAfterToolCallPayload:
    def test_defaults(self):
        payload = AfterToolCallPayload()
        assert payload.tool_name == ""
        assert payload.params == {}
        assert payload.result is None
        assert payload.error is None
        assert payload.duration_ms is None

    def test_success_shape(self):
        result = {"content": [], "details": {"ok": True}}
        payload = AfterToolCallPayload(
            tool_name="exec", params={"cmd": "ls"}, result=result, duration_ms=4
        )
        assert payload.result is result
        assert payload.error is None

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            AfterToolCallPayload(tool_name="exec", duration_ms=-1)

    def test_params_must_be_mapping(self):
        with pytest.raises(ValidationError):
            AfterToolCallPayload(tool_name="exec", params=["cmd"])

    def test_frozen(self):
        payload = AfterToolCallPayload(tool_name="exec")
        with pytest.raises(ValidationError):
            payload.error = "late"

    def test_model_copy(self):
        payload = AfterToolCallPayload(tool_name="exec", params={"cmd": "ls"})
        modified = payload.model_copy(update={"error": "RuntimeError: boom"})
        assert modified.error == "RuntimeError: boom"
        assert modified.params == {"cmd": "ls"}
        # Original unchanged
        assert payload.error is None


class TestHookContext:
    def test_defaults(self):
        ctx = HookContext()
        assert ctx.tool_name == ""
        assert ctx.agent_id is None
        assert ctx.session_key is None

    def test_equality(self):
        assert HookContext(tool_name="read", agent_id="main") == HookContext(
            tool_name="read", agent_id="main"
        )
