"""Customer settings consumed by the resolution pipeline.

Settings are fetched by an external collaborator and handed to the engine
as a value object. Every field may be missing; missing values mean "no
override" and the vertical defaults stand.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from switchboard.observability.logging import get_logger
from switchboard.verticals.models.enums import AfterHoursBehavior

logger = get_logger(__name__)


class BusinessHours(BaseModel):
    """Opening hours for a single day, as free-text times."""

    open: str = Field(..., description="Opening time, e.g. '8:00 AM'")
    close: str = Field(..., description="Closing time, e.g. '5:00 PM'")


class CustomerSettings(BaseModel):
    """Per-customer business configuration."""

    model_config = ConfigDict(extra="ignore")

    # Core identity
    customer_id: str | None = None
    business_name: str | None = None
    business_type: str | None = Field(default=None, description="Free text, resolved to a vertical")
    website_url: str | None = None

    # Voice/AI settings
    ai_name: str | None = None
    voice_instructions: str | None = None
    greeting_text: str | None = None

    # Feature toggles
    lead_capture_enabled: bool | None = None
    appointments_enabled: bool | None = None
    after_hours_behavior: AfterHoursBehavior | None = None

    # Business hours
    business_hours: dict[str, BusinessHours] | None = None
    customer_timezone: str | None = None

    # Contact routing
    transfer_number: str | None = None
    lead_email: str | None = None
    lead_sms_number: str | None = None

    # Knowledge base content (pre-fetched)
    knowledge_content: str | None = None

    # Update timestamps, used as cache version
    settings_updated_at: datetime | None = None
    calendar_updated_at: datetime | None = None
    voice_updated_at: datetime | None = None

    @field_validator("after_hours_behavior", mode="before")
    @classmethod
    def default_unknown_after_hours(cls, v: Any) -> Any:
        """Treat unrecognised after-hours values as unset."""
        if v is None or v == "" or isinstance(v, AfterHoursBehavior):
            return v or None
        try:
            return AfterHoursBehavior(v)
        except ValueError:
            logger.warning("unknown_after_hours_behavior", value=str(v))
            return None
