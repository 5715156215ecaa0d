"""System prompt composition.

Assembles the section generators into the final system prompt. Section
order is fixed; channel, vertical and overrides only change content.
"""

from switchboard.observability.logging import get_logger
from switchboard.observability.metrics import PROMPTS_GENERATED
from switchboard.prompting.models import PromptContext
from switchboard.prompting.sections import (
    generate_brain_rules_prompt,
    generate_channel_behavior_prompt,
    generate_feature_flags_prompt,
    generate_workflow_permissions_prompt,
)
from switchboard.verticals.catalog import GENERIC_LOCAL_BUSINESS
from switchboard.verticals.compliance import get_compliance_modifiers
from switchboard.verticals.models import Channel, ChannelBehavior
from switchboard.verticals.registry import get_vertical_config

logger = get_logger(__name__)


def generate_complete_prompt(context: PromptContext) -> str:
    """Generate the full system prompt for a session.

    Sections, separated by a blank line and skipped when empty:
    header, channel behavior, brain rules, compliance requirements
    (medical/legal verticals only), capabilities/restrictions, workflow
    permissions, business-specific instructions.

    Args:
        context: Channel, business and vertical to render for

    Returns:
        Prompt text; identical input always yields identical output
    """
    if context.vertical_id is None:
        config = GENERIC_LOCAL_BUSINESS
        compliance_modifiers: list[str] = []
    else:
        config = get_vertical_config(context.vertical_id)
        compliance_modifiers = get_compliance_modifiers(context.vertical_id)

    features = config.feature_config.with_overrides(context.custom_overrides)
    behavior = config.channel_overrides.for_channel(context.channel)

    sections = [
        f"# {context.business_name} AI Assistant\n*{config.name} Specialist*",
        generate_channel_behavior_prompt(context.channel, behavior),
        generate_brain_rules_prompt(config.brain_rules),
    ]

    if compliance_modifiers:
        sections.append(
            "## Compliance & Safety Requirements\n"
            + "\n".join(f"- {modifier}" for modifier in compliance_modifiers)
        )

    sections.append(generate_feature_flags_prompt(features))
    sections.append(generate_workflow_permissions_prompt(config.workflow_permissions))

    if context.additional_instructions:
        sections.append(
            f"## Business-Specific Instructions\n{context.additional_instructions}"
        )

    PROMPTS_GENERATED.labels(channel=Channel(context.channel).value).inc()

    return "\n\n".join(section for section in sections if section)


def get_channel_differences(vertical_id: int) -> dict[Channel, ChannelBehavior]:
    """Return a vertical's behavior on every channel, keyed by channel."""
    return get_vertical_config(vertical_id).channel_overrides.as_dict()


def get_all_channel_prompts(vertical_id: int, business_name: str) -> dict[Channel, str]:
    """Render the prompt for every channel of a vertical.

    Useful for previewing how one business looks across channels.
    """
    prompts = {
        channel: generate_complete_prompt(
            PromptContext(channel=channel, business_name=business_name, vertical_id=vertical_id)
        )
        for channel in Channel
    }
    logger.debug("channel_prompts_generated", vertical_id=vertical_id, count=len(prompts))
    return prompts
