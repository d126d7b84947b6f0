"""Tests for ``InstrumentationConfig``."""

import pytest
from pydantic import ValidationError

from toolhooks.config import DEFAULT_CONFIG, InstrumentationConfig
from toolhooks.core.tool import AgentTool, normalize_tool_name


class TestDefaults:
    def test_default_values(self):
        assert DEFAULT_CONFIG.default_tool_name == "tool"
        assert DEFAULT_CONFIG.blocked_markers == (
            "blocked by plugin hook",
            "Tool call blocked",
        )
        assert DEFAULT_CONFIG.is_blocked is None
        assert DEFAULT_CONFIG.tool_name_aliases == {
            "bash": "exec",
            "apply-patch": "apply_patch",
        }

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.default_tool_name = "other"


class TestBlockedPredicate:
    def test_default_predicate_uses_markers(self):
        predicate = InstrumentationConfig(blocked_markers=("denied",)).blocked_predicate()
        assert predicate(RuntimeError("denied"))
        assert not predicate(RuntimeError("Tool call blocked"))

    def test_custom_predicate_wins(self):
        def never(exc):
            return False

        config = InstrumentationConfig(is_blocked=never)
        assert config.blocked_predicate() is never

    def test_non_callable_predicate_rejected(self):
        with pytest.raises(ValidationError):
            InstrumentationConfig(is_blocked="not callable")


class TestNameNormalizer:
    def test_default_aliases(self):
        normalize = DEFAULT_CONFIG.name_normalizer()
        assert normalize("Bash") == "exec"
        assert normalize("APPLY-PATCH") == "apply_patch"
        assert normalize("Read") == "read"

    def test_custom_aliases(self):
        normalize = InstrumentationConfig(
            tool_name_aliases={"sh": "exec"}
        ).name_normalizer()
        assert normalize("SH") == "exec"
        assert normalize("bash") == "bash"


class TestNormalizeToolName:
    @pytest.mark.parametrize("name", ["read", "Read", "ReAd", " READ "])
    def test_case_insensitive(self, name):
        assert normalize_tool_name(name) == "read"

    @pytest.mark.parametrize("name", ["ReAd", "Bash", "apply-patch", "web_fetch"])
    def test_idempotent(self, name):
        once = normalize_tool_name(name)
        assert normalize_tool_name(once) == once


class TestAgentTool:
    def test_defaults(self):
        tool = AgentTool(name="read")
        assert tool.execute is None
        assert tool.description == ""
        assert tool.parameters == {}
