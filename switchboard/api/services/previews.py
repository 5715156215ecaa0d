"""Policy and prompt previews for customer settings."""

from switchboard.api.models.responses import PromptResponse
from switchboard.config.models import EngineConfig
from switchboard.observability.logging import get_logger
from switchboard.policy import (
    ActionPolicy,
    build_action_policy,
    generate_enforcement_prompt_section,
)
from switchboard.prompting import (
    compute_config_version,
    generate_complete_prompt,
    log_config_resolution,
    resolve_prompt_context,
)
from switchboard.verticals import (
    build_feature_overrides,
    get_vertical_config,
    resolve_vertical_id,
)
from switchboard.verticals.models import Channel, CustomerSettings

logger = get_logger(__name__)


class PreviewService:
    """Run the resolution pipeline for API previews.

    Applies the engine defaults from configuration so route handlers only
    deal with request parsing and store lookups.
    """

    def __init__(self, engine: EngineConfig) -> None:
        """Initialize the preview service.

        Args:
            engine: Engine defaults (AI name, knowledge limit, etc.)
        """
        self._engine = engine

    def build_policy(
        self,
        settings: CustomerSettings,
        channel: Channel,
        *,
        label: str = "preview",
    ) -> ActionPolicy:
        """Resolve the action policy for settings on a channel.

        Uses the same vertical resolution as build_prompt so a customer's
        policy and prompt always describe one vertical.
        """
        policy = build_action_policy(
            resolve_vertical_id(settings.business_type),
            channel,
            build_feature_overrides(settings),
        )
        log_config_resolution(label, settings, policy)
        return policy

    def build_prompt(
        self,
        settings: CustomerSettings,
        channel: Channel,
        *,
        include_enforcement: bool | None = None,
    ) -> PromptResponse:
        """Generate the system prompt for settings on a channel.

        The enforcement section is computed from the same vertical and
        overrides as the prompt, so both always describe one policy.
        """
        context = resolve_prompt_context(
            settings,
            channel,
            knowledge_max_chars=self._engine.knowledge_max_chars,
            default_ai_name=self._engine.default_ai_name,
            default_business_name=self._engine.default_business_name,
        )
        prompt = generate_complete_prompt(context)
        vertical_id = context.vertical_id if context.vertical_id is not None else 0

        if include_enforcement is None:
            include_enforcement = self._engine.include_enforcement_section

        enforcement_section = None
        if include_enforcement:
            policy = build_action_policy(vertical_id, channel, context.custom_overrides)
            enforcement_section = generate_enforcement_prompt_section(policy)

        logger.debug(
            "prompt_preview_built",
            vertical_id=vertical_id,
            channel=Channel(channel).value,
            prompt_length=len(prompt),
        )

        return PromptResponse(
            channel=channel,
            vertical_id=vertical_id,
            vertical_name=get_vertical_config(vertical_id).name,
            config_version=compute_config_version(settings),
            prompt=prompt,
            enforcement_section=enforcement_section,
        )
