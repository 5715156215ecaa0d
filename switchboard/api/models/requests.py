"""Request models for the preview API."""

from pydantic import BaseModel, Field

from switchboard.verticals.models import Channel, CustomerSettings


class VerticalResolveRequest(BaseModel):
    """Request body for POST /v1/verticals/resolve."""

    business_type: str | None = Field(
        default=None,
        description="Free-text business type, e.g. 'Plumbing Company'",
    )


class PolicyRequest(BaseModel):
    """Request body for POST /v1/policies."""

    settings: CustomerSettings = Field(default_factory=CustomerSettings)
    channel: Channel = Channel.PHONE


class PromptRequest(BaseModel):
    """Request body for POST /v1/prompts."""

    settings: CustomerSettings = Field(default_factory=CustomerSettings)
    channel: Channel = Channel.PHONE
    include_enforcement: bool | None = Field(
        default=None,
        description="Return the action-restriction section; None uses the engine default",
    )
