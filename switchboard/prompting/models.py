"""Prompt composition models."""

from pydantic import BaseModel, ConfigDict, Field

from switchboard.verticals.models import Channel, FeatureFlag


class PromptContext(BaseModel):
    """Everything the composer needs to render one system prompt."""

    model_config = ConfigDict(frozen=True)

    channel: Channel
    business_name: str
    vertical_id: int | None = Field(default=None, description="None renders the generic vertical")
    custom_overrides: dict[str, FeatureFlag] | None = Field(
        default=None,
        description="Partial feature flags applied on top of the vertical defaults",
    )
    additional_instructions: str | None = None
