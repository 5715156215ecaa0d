"""Action policy: tool gating, restricted topics and refusal text."""

from switchboard.policy.builder import (
    build_action_policy,
    build_action_policy_from_settings,
    derive_policy_features,
)
from switchboard.policy.constants import (
    PRIMARY_REFUSAL_KEY,
    REFUSAL_TEMPLATES,
    RESTRICTED_TOPICS,
    TOOL_FEATURE_MAP,
)
from switchboard.policy.guardrails import (
    generate_enforcement_prompt_section,
    get_topic_refusal,
    is_topic_restricted,
)
from switchboard.policy.models import ActionPolicy, PolicyFeatures
from switchboard.policy.tool_filter import (
    HasFunctionName,
    HasName,
    extract_tool_name,
    filter_tool_schemas,
    get_tool_refusal,
    is_tool_allowed,
    matches_any,
    normalize_name,
)

__all__ = [
    # Models
    "ActionPolicy",
    "PolicyFeatures",
    # Tables
    "PRIMARY_REFUSAL_KEY",
    "REFUSAL_TEMPLATES",
    "RESTRICTED_TOPICS",
    "TOOL_FEATURE_MAP",
    # Builder
    "build_action_policy",
    "build_action_policy_from_settings",
    "derive_policy_features",
    # Tool filtering
    "HasFunctionName",
    "HasName",
    "extract_tool_name",
    "filter_tool_schemas",
    "get_tool_refusal",
    "is_tool_allowed",
    "matches_any",
    "normalize_name",
    # Content guardrails
    "generate_enforcement_prompt_section",
    "get_topic_refusal",
    "is_topic_restricted",
]
