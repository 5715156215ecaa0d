"""Action policy models.

An ActionPolicy is the resolved, per-session contract handed to the
conversation runtime: which tools to expose, which topics to refuse and
what to say when refusing.
"""

from pydantic import BaseModel, ConfigDict, Field

from switchboard.verticals.models import Channel


class PolicyFeatures(BaseModel):
    """Runtime capability booleans derived from the merged feature flags."""

    model_config = ConfigDict(frozen=True)

    booking_enabled: bool
    escalation_enabled: bool
    after_hours_enabled: bool
    lead_capture_enabled: bool
    pricing_enabled: bool
    transfer_enabled: bool


class ActionPolicy(BaseModel):
    """Resolved behavioral contract for one vertical on one channel."""

    model_config = ConfigDict(frozen=True)

    vertical_id: int
    vertical_name: str
    channel: Channel

    # Tool filtering
    allowed_tools: list[str] = Field(default_factory=list)
    disabled_tools: list[str] = Field(default_factory=list)

    # Content guardrails
    restricted_topics: list[str] = Field(default_factory=list)
    refusal_templates: dict[str, str] = Field(default_factory=dict)

    # Compliance
    is_legal_vertical: bool = False
    is_medical_vertical: bool = False
    requires_compliance_guardrails: bool = False

    features: PolicyFeatures
