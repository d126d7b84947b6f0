"""Instrumentation settings."""

from __future__ import annotations

import functools
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from toolhooks.core.tool import TOOL_NAME_ALIASES, normalize_tool_name
from toolhooks.plugins.policies import BLOCKED_CALL_MARKERS, is_blocked_tool_call


class InstrumentationConfig(BaseModel):
    """Knobs for :func:`toolhooks.stdlib.tools.wrap_tool_with_after_tool_call_hook`.

    Args:
        default_tool_name: Name used when a tool has an empty ``name``.
        blocked_markers: Message substrings that mark a before-call gate refusal.
        is_blocked: Replaces the marker check entirely when set.
        tool_name_aliases: Lower-case alias -> canonical tool name.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    default_tool_name: str = "tool"
    blocked_markers: tuple[str, ...] = BLOCKED_CALL_MARKERS
    is_blocked: Callable[[BaseException], bool] | None = None
    tool_name_aliases: dict[str, str] = Field(
        default_factory=lambda: dict(TOOL_NAME_ALIASES)
    )

    def blocked_predicate(self) -> Callable[[BaseException], bool]:
        """The predicate the instrumenter uses to suppress events for refused calls."""
        if self.is_blocked is not None:
            return self.is_blocked
        return functools.partial(is_blocked_tool_call, markers=self.blocked_markers)

    def name_normalizer(self) -> Callable[[str], str]:
        """Tool-name canonicalization bound to this config's alias table."""
        return functools.partial(normalize_tool_name, aliases=self.tool_name_aliases)


DEFAULT_CONFIG = InstrumentationConfig()
