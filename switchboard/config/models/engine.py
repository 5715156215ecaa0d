"""Prompt and policy engine configuration models."""

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """Defaults applied when customer settings leave a field empty.

    These values are handed to the pure resolution functions as explicit
    arguments; the engine itself never reads settings.
    """

    knowledge_max_chars: int = Field(
        default=6000,
        gt=0,
        description="Knowledge base text longer than this is truncated in prompts",
    )
    default_ai_name: str = Field(
        default="Ashley",
        min_length=1,
        description="Assistant name used when the customer has not set one",
    )
    default_business_name: str = Field(
        default="the business",
        min_length=1,
        description="Business name used when the customer has not set one",
    )
    include_enforcement_section: bool = Field(
        default=True,
        description="Append the action-restriction section to generated prompts",
    )
