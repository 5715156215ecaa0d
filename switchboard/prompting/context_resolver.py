"""Resolve customer settings into a prompt context.

Entry point for runtime channels: settings fetched by the caller go in, a
PromptContext (or a finished prompt) comes out.
"""

from datetime import UTC, datetime

from switchboard.observability.logging import get_logger
from switchboard.policy.models import ActionPolicy
from switchboard.prompting.composer import generate_complete_prompt
from switchboard.prompting.models import PromptContext
from switchboard.verticals.models import BusinessHours, Channel, CustomerSettings
from switchboard.verticals.overrides import build_feature_overrides
from switchboard.verticals.resolver import resolve_vertical_id

logger = get_logger(__name__)

DEFAULT_AI_NAME = "Ashley"
DEFAULT_BUSINESS_NAME = "the business"
KNOWLEDGE_MAX_CHARS = 6000
NO_VERSION = "no-version"

_DAY_ORDER = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _format_business_hours(hours: dict[str, BusinessHours]) -> str:
    lines = [
        f"- {day.capitalize()}: {hours[day].open} - {hours[day].close}"
        for day in _DAY_ORDER
        if day in hours
    ]
    return "\n".join(lines) if lines else "Hours not specified"


def build_additional_instructions(
    settings: CustomerSettings,
    *,
    knowledge_max_chars: int = KNOWLEDGE_MAX_CHARS,
    default_ai_name: str = DEFAULT_AI_NAME,
) -> str:
    """Build the business-specific instructions block from settings.

    Args:
        settings: Customer settings
        knowledge_max_chars: Knowledge base text beyond this is cut off
        default_ai_name: Name used when the customer has not set one

    Returns:
        Instruction text; always at least the AI name line
    """
    parts = [f"Your name is {settings.ai_name or default_ai_name}."]

    if settings.website_url:
        parts.append(f"The business website is {settings.website_url}.")

    if settings.voice_instructions:
        parts.append(f"\nCustom Instructions:\n{settings.voice_instructions}")

    if settings.business_hours:
        parts.append(f"\nBusiness Hours:\n{_format_business_hours(settings.business_hours)}")

    if settings.lead_email or settings.lead_sms_number:
        routing = "\nLead Routing:"
        if settings.lead_email:
            routing += f"\n- Email leads to: {settings.lead_email}"
        if settings.lead_sms_number:
            routing += f"\n- SMS notifications to: {settings.lead_sms_number}"
        parts.append(routing)

    if settings.knowledge_content:
        knowledge = settings.knowledge_content
        if len(knowledge) > knowledge_max_chars:
            knowledge = knowledge[:knowledge_max_chars] + "..."
        parts.append(f"\n=== KNOWLEDGE BASE ===\n{knowledge}")

    return "\n".join(parts)


def resolve_prompt_context(
    settings: CustomerSettings,
    channel: Channel,
    *,
    knowledge_max_chars: int = KNOWLEDGE_MAX_CHARS,
    default_ai_name: str = DEFAULT_AI_NAME,
    default_business_name: str = DEFAULT_BUSINESS_NAME,
) -> PromptContext:
    """Resolve settings into the context the composer renders."""
    return PromptContext(
        channel=channel,
        business_name=settings.business_name or default_business_name,
        vertical_id=resolve_vertical_id(settings.business_type),
        custom_overrides=build_feature_overrides(settings),
        additional_instructions=build_additional_instructions(
            settings,
            knowledge_max_chars=knowledge_max_chars,
            default_ai_name=default_ai_name,
        ),
    )


def generate_prompt_from_settings(
    settings: CustomerSettings,
    channel: Channel,
    *,
    knowledge_max_chars: int = KNOWLEDGE_MAX_CHARS,
    default_ai_name: str = DEFAULT_AI_NAME,
    default_business_name: str = DEFAULT_BUSINESS_NAME,
) -> str:
    """Resolve settings and render the system prompt in one step."""
    context = resolve_prompt_context(
        settings,
        channel,
        knowledge_max_chars=knowledge_max_chars,
        default_ai_name=default_ai_name,
        default_business_name=default_business_name,
    )
    return generate_complete_prompt(context)


def create_inline_settings(
    business_name: str,
    business_type: str | None = None,
    website_url: str | None = None,
    ai_name: str | None = None,
    voice_instructions: str | None = None,
    knowledge_content: str | None = None,
) -> CustomerSettings:
    """Create settings for demos and previews that have no stored customer.

    Lead capture is on and appointments are off, matching a freshly
    onboarded customer.
    """
    return CustomerSettings(
        customer_id="inline",
        business_name=business_name,
        business_type=business_type or None,
        website_url=website_url or None,
        ai_name=ai_name or DEFAULT_AI_NAME,
        voice_instructions=voice_instructions or None,
        lead_capture_enabled=True,
        appointments_enabled=False,
        knowledge_content=knowledge_content or None,
    )


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def compute_config_version(settings: CustomerSettings) -> str:
    """Return the latest settings update timestamp as a cache version.

    Naive timestamps are treated as UTC when compared.

    Returns:
        ISO timestamp of the most recent update, or "no-version"
    """
    timestamps = [
        stamp
        for stamp in (
            settings.settings_updated_at,
            settings.calendar_updated_at,
            settings.voice_updated_at,
        )
        if stamp is not None
    ]
    if not timestamps:
        return NO_VERSION
    return max(timestamps, key=_as_aware).isoformat()


def log_config_resolution(label: str, settings: CustomerSettings, policy: ActionPolicy) -> None:
    """Log how settings resolved into a policy, for debugging a session."""
    logger.info(
        "config_resolved",
        label=label,
        customer_id=settings.customer_id,
        business_name=settings.business_name,
        business_type=settings.business_type or "generic",
        vertical_id=policy.vertical_id,
        vertical_name=policy.vertical_name,
        config_version=compute_config_version(settings),
        channel=policy.channel.value,
        booking_enabled=policy.features.booking_enabled,
        escalation_enabled=policy.features.escalation_enabled,
        lead_capture_enabled=policy.features.lead_capture_enabled,
        transfer_enabled=policy.features.transfer_enabled,
        pricing_enabled=policy.features.pricing_enabled,
        compliance_required=policy.requires_compliance_guardrails,
        allowed_tool_count=len(policy.allowed_tools),
        disabled_tools=policy.disabled_tools,
    )
