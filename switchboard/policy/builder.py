"""Action policy construction.

Merges a vertical's default feature flags with customer overrides and
derives the tool, topic and refusal sets a conversation runtime enforces.
"""

from collections.abc import Mapping

from switchboard.observability.logging import get_logger
from switchboard.observability.metrics import ACTION_POLICIES_BUILT
from switchboard.policy.constants import (
    PRIMARY_REFUSAL_KEY,
    REFUSAL_TEMPLATES,
    RESTRICTED_TOPICS,
    TOOL_FEATURE_MAP,
)
from switchboard.policy.models import ActionPolicy, PolicyFeatures
from switchboard.policy.tool_filter import normalize_name
from switchboard.verticals.compliance import classify_vertical
from switchboard.verticals.models import (
    Channel,
    CustomerSettings,
    FeatureConfig,
    FeatureFlag,
)
from switchboard.verticals.overrides import build_feature_overrides
from switchboard.verticals.registry import get_vertical_config
from switchboard.verticals.resolver import DEFAULT_VERTICAL_ID, normalize_business_type

logger = get_logger(__name__)

# Short keyword list used when building straight from settings. Unlike
# VERTICAL_KEYWORDS it has one keyword per vertical and no exact-match pass.
_SETTINGS_TYPE_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("plumbing", 1),
    ("hvac", 2),
    ("electrician", 3),
    ("roofing", 4),
    ("water_damage", 5),
    ("locksmith", 6),
    ("towing", 7),
    ("auto_repair", 8),
    ("tree_service", 9),
    ("garage_door", 10),
    ("appliance_repair", 11),
    ("pest_control", 12),
    ("junk_removal", 13),
    ("bail_bonds", 14),
    ("criminal_defense", 15),
    ("personal_injury", 16),
    ("dentist", 17),
    ("property_management", 18),
    ("moving", 19),
    ("concrete", 20),
)


def derive_policy_features(flags: FeatureConfig) -> PolicyFeatures:
    """Collapse tri-state flags into runtime booleans.

    OPTIONAL counts as enabled everywhere except pricing, which must be
    explicitly ON.
    """
    return PolicyFeatures(
        booking_enabled=flags.appointment_booking != FeatureFlag.OFF,
        escalation_enabled=flags.emergency_escalation != FeatureFlag.OFF,
        after_hours_enabled=flags.after_hours_handling != FeatureFlag.OFF,
        lead_capture_enabled=flags.lead_capture != FeatureFlag.OFF,
        pricing_enabled=flags.price_quoting == FeatureFlag.ON,
        transfer_enabled=flags.transfer_to_human != FeatureFlag.OFF,
    )


def build_action_policy(
    vertical_id: int | None,
    channel: Channel,
    feature_overrides: Mapping[str, FeatureFlag] | None = None,
) -> ActionPolicy:
    """Build the action policy for a vertical on a channel.

    Args:
        vertical_id: Vertical identifier; None means the generic vertical
        channel: Session channel
        feature_overrides: Partial flags overriding the vertical defaults

    Returns:
        A fresh ActionPolicy
    """
    if vertical_id is None:
        vertical_id = DEFAULT_VERTICAL_ID
    config = get_vertical_config(vertical_id)
    flags = config.feature_config.with_overrides(feature_overrides)
    compliance = classify_vertical(vertical_id)
    features = derive_policy_features(flags)

    # Tools gated by feature flags
    allowed_tools: list[str] = []
    disabled_tools: list[str] = []
    for tool, feature_key in TOOL_FEATURE_MAP:
        if flags.flag(feature_key) == FeatureFlag.OFF:
            disabled_tools.append(tool)
        else:
            allowed_tools.append(tool)

    # Workflow-forbidden actions are blocked as tools too
    for forbidden in config.workflow_permissions.forbidden:
        normalized = normalize_name(forbidden)
        if normalized not in disabled_tools:
            disabled_tools.append(normalized)

    restricted_topics = list(RESTRICTED_TOPICS["safety"])
    if compliance.medical:
        restricted_topics.extend(RESTRICTED_TOPICS["medical"])
    if compliance.legal:
        restricted_topics.extend(RESTRICTED_TOPICS["legal"])
    if not features.pricing_enabled:
        restricted_topics.extend(RESTRICTED_TOPICS["financial"])

    refusal_templates = dict(REFUSAL_TEMPLATES)
    if compliance.medical:
        refusal_templates[PRIMARY_REFUSAL_KEY] = REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]
    elif compliance.legal:
        refusal_templates[PRIMARY_REFUSAL_KEY] = REFUSAL_TEMPLATES["LEGAL_NO_ADVICE"]
    else:
        refusal_templates[PRIMARY_REFUSAL_KEY] = REFUSAL_TEMPLATES["GENERIC_INTAKE"]

    ACTION_POLICIES_BUILT.labels(channel=Channel(channel).value).inc()

    return ActionPolicy(
        vertical_id=vertical_id,
        vertical_name=config.name,
        channel=channel,
        allowed_tools=allowed_tools,
        disabled_tools=disabled_tools,
        restricted_topics=restricted_topics,
        refusal_templates=refusal_templates,
        is_legal_vertical=compliance.legal,
        is_medical_vertical=compliance.medical,
        requires_compliance_guardrails=compliance.requires_guardrails,
        features=features,
    )


def _resolve_settings_vertical_id(business_type: str | None) -> int:
    if not business_type:
        return DEFAULT_VERTICAL_ID

    normalized = normalize_business_type(business_type)
    for keyword, vertical_id in _SETTINGS_TYPE_KEYWORDS:
        if keyword in normalized or normalized in keyword:
            return vertical_id

    logger.debug("settings_business_type_unmatched", business_type=business_type)
    return DEFAULT_VERTICAL_ID


def build_action_policy_from_settings(
    settings: CustomerSettings,
    channel: Channel,
) -> ActionPolicy:
    """Build an action policy directly from customer settings.

    Args:
        settings: Customer settings
        channel: Session channel

    Returns:
        A fresh ActionPolicy
    """
    vertical_id = _resolve_settings_vertical_id(settings.business_type)
    overrides = build_feature_overrides(settings)
    return build_action_policy(vertical_id, channel, overrides)
