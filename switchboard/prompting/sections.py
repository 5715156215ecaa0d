"""Prompt section generators.

Each generator renders one markdown block of the system prompt from a
piece of vertical configuration. Generators return an empty string when
they have nothing to say; the composer drops empty blocks.
"""

from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

from switchboard.observability.logging import get_logger
from switchboard.verticals.models import (
    BrainRules,
    Channel,
    ChannelBehavior,
    FeatureConfig,
    FeatureFlag,
    GreetingStyle,
    ResponseLength,
    UrgencyLevel,
    WorkflowPermissions,
)

logger = get_logger(__name__)

KeyT = TypeVar("KeyT", bound=Enum)

URGENCY_TEXT: Mapping[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "Treat all calls as potentially urgent. Prioritize speed and safety.",
    UrgencyLevel.HIGH: (
        "Many calls are time-sensitive. Assess urgency quickly and act accordingly."
    ),
    UrgencyLevel.MEDIUM: (
        "Balance efficiency with thoroughness. Some situations require urgency."
    ),
    UrgencyLevel.LOW: "Focus on quality over speed. Most inquiries are planning-oriented.",
}

GREETING_TEXT: Mapping[GreetingStyle, str] = {
    GreetingStyle.URGENT: "Get to the point quickly. The caller may be stressed.",
    GreetingStyle.PROFESSIONAL: "Be polite and efficient. Maintain business tone.",
    GreetingStyle.WARM: "Be friendly and personable. Build rapport naturally.",
    GreetingStyle.EMPATHETIC: (
        "Show understanding and compassion. Acknowledge their situation."
    ),
}

RESPONSE_LENGTH_TEXT: Mapping[ResponseLength, str] = {
    ResponseLength.BRIEF: "Keep responses short and action-oriented.",
    ResponseLength.MODERATE: "Provide helpful context but stay focused.",
    ResponseLength.DETAILED: "Offer thorough explanations when helpful.",
}

CHANNEL_TITLES: Mapping[Channel, str] = {
    Channel.PHONE: "Phone Call",
    Channel.WEB_CHAT: "Web Chat",
    Channel.WEB_VOICE: "Web Voice",
    Channel.SMS: "SMS",
}


def _lookup_template(table: Mapping[KeyT, str], key: object, default: KeyT) -> str:
    """Look up template text, falling back to a known key for unknown values."""
    text = table.get(key)  # type: ignore[call-overload]
    if text is None:
        logger.warning(
            "unknown_template_key",
            key=str(key),
            fallback=default.value,
        )
        return table[default]
    return text


def _title_words(identifier: str) -> str:
    """'callback_number' -> 'Callback Number'."""
    return " ".join(word[:1].upper() + word[1:] for word in identifier.split("_"))


def _spaced_words(identifier: str) -> str:
    """'quote_prices' -> 'quote prices'."""
    return identifier.replace("_", " ")


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def generate_brain_rules_prompt(brain_rules: BrainRules) -> str:
    """Render urgency, required info, prohibitions, escalation and tone."""
    blocks = [
        "## Urgency Level\n"
        + _lookup_template(URGENCY_TEXT, brain_rules.urgency_classification, UrgencyLevel.MEDIUM)
    ]

    if brain_rules.always_collect:
        blocks.append(
            "## Required Information\n"
            "You MUST collect the following before ending any interaction:\n"
            + _bullets([_title_words(item) for item in brain_rules.always_collect])
        )

    if brain_rules.never_do:
        blocks.append(
            "## Strict Prohibitions\n"
            "You must NEVER do the following:\n"
            + _bullets([_spaced_words(item) for item in brain_rules.never_do])
        )

    if brain_rules.escalation_triggers:
        blocks.append(
            "## Emergency Escalation\n"
            "Immediately escalate or dispatch for:\n"
            + _bullets([_title_words(item) for item in brain_rules.escalation_triggers])
        )

    blocks.append(f"## Communication Style\n{brain_rules.tone_guidance}")

    if brain_rules.compliance_notes:
        blocks.append("## Compliance Requirements\n" + _bullets(brain_rules.compliance_notes))

    return "\n\n".join(blocks)


def generate_channel_behavior_prompt(channel: Channel, behavior: ChannelBehavior) -> str:
    """Render how the agent behaves on one channel."""
    title = CHANNEL_TITLES.get(channel, str(channel))
    greeting = _lookup_template(GREETING_TEXT, behavior.greeting_style, GreetingStyle.PROFESSIONAL)
    length = _lookup_template(
        RESPONSE_LENGTH_TEXT, behavior.response_length, ResponseLength.MODERATE
    )

    lines = [
        f"## {title} Channel Behavior",
        f"**Primary Goal:** {behavior.primary_action}",
        f"**Tone:** {greeting}",
        f"**Response Style:** {length}",
    ]
    if behavior.can_show_visuals:
        lines.append("**Visual Support:** You can display calendars, forms, and images.")
    if behavior.can_send_links:
        lines.append("**Links:** You can send clickable links and buttons.")
    lines.append(f"**Interruptions:** {behavior.interruption_handling}")
    lines.append(f"**Fallback:** {behavior.fallback_behavior}")

    return "\n".join(lines)


def generate_feature_flags_prompt(config: FeatureConfig) -> str:
    """Render the flags as Capabilities and Restrictions bullet lists.

    Not every flag has a restriction phrasing; callback scheduling and
    SMS follow-up never appear.
    """
    capabilities: list[str] = []
    restrictions: list[str] = []

    if config.appointment_booking == FeatureFlag.ON:
        capabilities.append("Schedule appointments directly")
    elif config.appointment_booking == FeatureFlag.OPTIONAL:
        capabilities.append("Schedule appointments when appropriate")
    else:
        restrictions.append("Do NOT attempt to book appointments")

    if config.emergency_escalation == FeatureFlag.ON:
        capabilities.append("Escalate emergencies immediately to dispatch")
    elif config.emergency_escalation == FeatureFlag.OFF:
        restrictions.append("Route emergencies to callback, not immediate dispatch")

    if config.after_hours_handling == FeatureFlag.ON:
        capabilities.append("Handle after-hours calls with full capabilities")
    elif config.after_hours_handling == FeatureFlag.OFF:
        restrictions.append("After hours: capture callback only, no dispatch")

    if config.lead_capture == FeatureFlag.ON:
        capabilities.append("Always capture contact information for follow-up")

    if config.insurance_info_collection == FeatureFlag.ON:
        capabilities.append("Collect insurance information proactively")
    elif config.insurance_info_collection == FeatureFlag.OPTIONAL:
        capabilities.append("Ask about insurance when relevant")

    if config.price_quoting == FeatureFlag.ON:
        capabilities.append("Provide price information when asked")
    elif config.price_quoting == FeatureFlag.OFF:
        restrictions.append("Do NOT quote specific prices")

    if config.location_verification == FeatureFlag.ON:
        capabilities.append("Verify exact location/address before dispatch")

    if config.transfer_to_human == FeatureFlag.ON:
        capabilities.append("Transfer to a human when requested or necessary")

    blocks = []
    if capabilities:
        blocks.append("## Capabilities\n" + _bullets(capabilities))
    if restrictions:
        blocks.append("## Restrictions\n" + _bullets(restrictions))
    return "\n\n".join(blocks)


def generate_feature_flags_object(
    config: FeatureConfig,
    overrides: Mapping[str, FeatureFlag] | None = None,
) -> dict[str, bool]:
    """Flatten merged flags into runtime booleans.

    The ``can_*``/``captures_*`` style keys require ON where the capability
    must be actively used; the ``may_*`` keys accept OPTIONAL as well.
    """
    merged = config.with_overrides(overrides)
    return {
        "can_book_appointments": merged.appointment_booking == FeatureFlag.ON,
        "can_escalate_emergencies": merged.emergency_escalation != FeatureFlag.OFF,
        "handles_after_hours": merged.after_hours_handling != FeatureFlag.OFF,
        "captures_leads": merged.lead_capture == FeatureFlag.ON,
        "schedules_callbacks": merged.callback_scheduling == FeatureFlag.ON,
        "collects_insurance": merged.insurance_info_collection != FeatureFlag.OFF,
        "can_quote_prices": merged.price_quoting == FeatureFlag.ON,
        "verifies_location": merged.location_verification == FeatureFlag.ON,
        "sends_sms_follow_up": merged.sms_follow_up != FeatureFlag.OFF,
        "can_transfer_to_human": merged.transfer_to_human == FeatureFlag.ON,
        "may_quote_prices": merged.price_quoting != FeatureFlag.OFF,
        "may_collect_insurance": merged.insurance_info_collection != FeatureFlag.OFF,
        "may_escalate_emergencies": merged.emergency_escalation != FeatureFlag.OFF,
        "may_handle_after_hours": merged.after_hours_handling != FeatureFlag.OFF,
    }


def generate_workflow_permissions_prompt(permissions: WorkflowPermissions) -> str:
    """Render allowed, forbidden and confirmation-required actions."""
    blocks = []

    if permissions.allowed:
        blocks.append(
            "## Allowed Actions\nYou CAN:\n"
            + _bullets([_title_words(action) for action in permissions.allowed])
        )

    if permissions.forbidden:
        blocks.append(
            "## Forbidden Actions\nYou CANNOT:\n"
            + _bullets([_title_words(action) for action in permissions.forbidden])
        )

    if permissions.requires_confirmation:
        blocks.append(
            "## Requires Confirmation\nConfirm with caller before:\n"
            + _bullets([_title_words(action) for action in permissions.requires_confirmation])
        )

    return "\n\n".join(blocks)
