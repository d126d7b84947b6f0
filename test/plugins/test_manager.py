"""Tests for the global hook runner registry."""

from unittest.mock import MagicMock

import pytest

from toolhooks.plugins.manager import (
    HookRunner,
    get_global_hook_runner,
    has_hook_runner,
    initialize_hook_runner,
    reset_hook_runner,
)


@pytest.fixture(autouse=True)
def cleanup_runner():
    """Ensure no hook runner leaks between tests."""
    yield
    reset_hook_runner()


class _Runner:
    def has_hooks(self, hook_type):
        return True

    async def run_after_tool_call(self, event, context):
        return None


class TestNoOpState:
    def test_no_runner_by_default(self):
        assert get_global_hook_runner() is None
        assert not has_hook_runner()


class TestInitialize:
    def test_initialize_installs_runner(self):
        runner = _Runner()

        assert initialize_hook_runner(runner) is runner
        assert get_global_hook_runner() is runner
        assert has_hook_runner()

    def test_initialize_replaces_previous_runner(self):
        first, second = _Runner(), _Runner()
        initialize_hook_runner(first)

        initialize_hook_runner(second)

        assert get_global_hook_runner() is second

    def test_initialize_is_idempotent_for_same_runner(self):
        runner = _Runner()
        initialize_hook_runner(runner)
        initialize_hook_runner(runner)
        assert get_global_hook_runner() is runner

    def test_reset_clears_runner(self):
        initialize_hook_runner(_Runner())

        reset_hook_runner()

        assert get_global_hook_runner() is None
        assert not has_hook_runner()


class TestProtocol:
    def test_duck_typed_runner_satisfies_protocol(self):
        assert isinstance(_Runner(), HookRunner)

    def test_object_missing_operations_does_not(self):
        assert not isinstance(MagicMock(spec=["has_hooks"]), HookRunner)
