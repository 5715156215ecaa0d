"""Vertical configuration models.

A vertical's configuration is static, loaded once at import and never
mutated, so every model here is frozen.
"""

from collections.abc import Mapping
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from switchboard.observability.logging import get_logger
from switchboard.verticals.models.enums import (
    Channel,
    FeatureFlag,
    GreetingStyle,
    ResponseLength,
    UrgencyLevel,
)

logger = get_logger(__name__)

FeatureKey = Literal[
    "appointment_booking",
    "emergency_escalation",
    "after_hours_handling",
    "lead_capture",
    "callback_scheduling",
    "insurance_info_collection",
    "price_quoting",
    "location_verification",
    "sms_follow_up",
    "transfer_to_human",
]

FEATURE_KEYS: tuple[str, ...] = get_args(FeatureKey)

# Partial feature configuration: only overridden keys are present
FeatureOverrides = dict[FeatureKey, FeatureFlag]


class _StaticModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class BrainRules(_StaticModel):
    """Conversation rules: what to gather, what to avoid, when to escalate."""

    urgency_classification: UrgencyLevel
    always_collect: list[str] = Field(default_factory=list)
    never_do: list[str] = Field(default_factory=list)
    escalation_triggers: list[str] = Field(default_factory=list)
    tone_guidance: str
    compliance_notes: list[str] | None = None


class FeatureConfig(_StaticModel):
    """The ten capability flags of a vertical."""

    appointment_booking: FeatureFlag
    emergency_escalation: FeatureFlag
    after_hours_handling: FeatureFlag
    lead_capture: FeatureFlag
    callback_scheduling: FeatureFlag
    insurance_info_collection: FeatureFlag
    price_quoting: FeatureFlag
    location_verification: FeatureFlag
    sms_follow_up: FeatureFlag
    transfer_to_human: FeatureFlag

    def flag(self, key: str) -> FeatureFlag:
        """Return the flag stored under a feature key."""
        value: FeatureFlag = getattr(self, key)
        return value

    def with_overrides(
        self,
        overrides: Mapping[str, FeatureFlag] | None,
    ) -> "FeatureConfig":
        """Overlay overrides onto this configuration.

        Shallow overlay: every overridden key takes the override value, every
        other key keeps its current value. Keys that are not feature names
        are dropped with a warning.

        Args:
            overrides: Partial flag mapping, or None for no change

        Returns:
            A new FeatureConfig; self is left untouched
        """
        if not overrides:
            return self

        known = {key: value for key, value in overrides.items() if key in FEATURE_KEYS}
        if len(known) != len(overrides):
            logger.warning(
                "unknown_feature_override_keys",
                keys=sorted(key for key in overrides if key not in FEATURE_KEYS),
            )

        return FeatureConfig.model_validate({**self.model_dump(), **known})


class WorkflowPermissions(_StaticModel):
    """Free-text action identifiers grouped by permission."""

    allowed: list[str] = Field(default_factory=list)
    forbidden: list[str] = Field(default_factory=list)
    requires_confirmation: list[str] = Field(default_factory=list)


class ChannelBehavior(_StaticModel):
    """How the agent behaves on one channel."""

    primary_action: str
    greeting_style: GreetingStyle
    response_length: ResponseLength
    can_show_visuals: bool
    can_send_links: bool
    interruption_handling: str
    fallback_behavior: str


class ChannelOverrides(_StaticModel):
    """Per-channel behavior; all four channels are required."""

    phone: ChannelBehavior
    web_chat: ChannelBehavior
    web_voice: ChannelBehavior
    sms: ChannelBehavior

    def for_channel(self, channel: Channel) -> ChannelBehavior:
        """Return the behavior configured for a channel."""
        behavior: ChannelBehavior = getattr(self, Channel(channel).value)
        return behavior

    def as_dict(self) -> dict[Channel, ChannelBehavior]:
        """Return behaviors keyed by channel, in channel declaration order."""
        return {channel: self.for_channel(channel) for channel in Channel}


class VerticalPromptConfig(_StaticModel):
    """Complete behavioral configuration of one vertical."""

    id: int = Field(ge=0)
    name: str
    brain_rules: BrainRules
    feature_config: FeatureConfig
    workflow_permissions: WorkflowPermissions
    channel_overrides: ChannelOverrides
