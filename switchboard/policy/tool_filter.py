"""Tool filtering against an ActionPolicy.

Matching is fuzzy on purpose: a tool is blocked when its normalized name
contains a disabled entry or is contained in one. "create_booking_v2" is
blocked by "create_booking", and so is "booking".
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from switchboard.policy.constants import REFUSAL_TEMPLATES
from switchboard.policy.models import ActionPolicy

_WHITESPACE = re.compile(r"\s+")


@runtime_checkable
class HasName(Protocol):
    """Tool schema exposing its name directly (Anthropic-style)."""

    name: str


class _FunctionSpec(Protocol):
    name: str


@runtime_checkable
class HasFunctionName(Protocol):
    """Tool schema nesting its name under ``function`` (OpenAI-style)."""

    function: _FunctionSpec


ToolT = TypeVar("ToolT")


def normalize_name(name: str) -> str:
    """Lowercase and replace whitespace runs with underscores."""
    return _WHITESPACE.sub("_", name.lower())


def matches_any(candidate: str, patterns: Iterable[str]) -> bool:
    """Check bidirectional substring containment against any pattern.

    Args:
        candidate: Already normalized name
        patterns: Entries to match against

    Returns:
        True on the first pattern that contains or is contained in candidate
    """
    return any(pattern in candidate or candidate in pattern for pattern in patterns)


def extract_tool_name(tool: Any) -> str:
    """Read a tool's name from ``name`` or ``function.name``.

    Both mapping keys and attributes are accepted. A tool with neither
    yields an empty string.
    """
    if isinstance(tool, Mapping):
        name = tool.get("name")
        if not name:
            function = tool.get("function")
            if isinstance(function, Mapping):
                name = function.get("name")
            elif function is not None:
                name = getattr(function, "name", None)
        return str(name or "")

    if isinstance(tool, HasName) and tool.name:
        return tool.name
    if isinstance(tool, HasFunctionName):
        return getattr(tool.function, "name", None) or ""
    return ""


def is_tool_allowed(tool_name: str, policy: ActionPolicy) -> bool:
    """Check whether the policy permits a tool."""
    return not matches_any(normalize_name(tool_name), policy.disabled_tools)


def filter_tool_schemas(tools: Iterable[ToolT], policy: ActionPolicy) -> list[ToolT]:
    """Drop tool schemas the policy disables.

    Use this on the function-calling schema list before handing it to the
    language model. Order and identity of surviving tools are preserved.

    Args:
        tools: Tool schemas (mappings or objects)
        policy: Resolved action policy

    Returns:
        The allowed subset of tools
    """
    return [tool for tool in tools if is_tool_allowed(extract_tool_name(tool), policy)]


def get_tool_refusal(tool_name: str, policy: ActionPolicy) -> str:
    """Pick the refusal message for a blocked tool.

    Keyword priority: booking, then transfer/escalation, then pricing,
    falling back to generic intake.
    """
    name = tool_name.lower()

    if "book" in name or "schedule" in name or "appointment" in name:
        return REFUSAL_TEMPLATES["BOOKING_UNAVAILABLE"]
    if "transfer" in name or "escalat" in name:
        return REFUSAL_TEMPLATES["ESCALATION_UNAVAILABLE"]
    if "quote" in name or "pric" in name:
        return REFUSAL_TEMPLATES["PRICING_VARIES"]

    return REFUSAL_TEMPLATES["GENERIC_INTAKE"]
