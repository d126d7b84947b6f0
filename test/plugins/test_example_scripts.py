"""Tests that the docs/examples/plugins example scripts run without throwing errors.

Each test runs the example script end-to-end using runpy.run_path (with
run_name="__main__" so the if __name__ == "__main__": block executes).
"""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

from toolhooks.plugins.manager import get_global_hook_runner, reset_hook_runner


EXAMPLES_DIR = Path(__file__).parent.parent.parent / "docs" / "examples" / "plugins"


@pytest.fixture(autouse=True)
def reset_runner():
    """Reset the global hook runner after every test."""
    yield
    reset_hook_runner()


def test_after_tool_call_example():
    """after_tool_call.py runs all four scenarios and leaves no runner installed."""
    runpy.run_path(str(EXAMPLES_DIR / "after_tool_call.py"), run_name="__main__")
    assert get_global_hook_runner() is None
