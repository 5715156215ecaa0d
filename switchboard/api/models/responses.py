"""Response models for the preview API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from switchboard.verticals.models import Channel, UrgencyLevel


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    vertical_count: int
    timestamp: datetime


class VerticalSummary(BaseModel):
    """One entry of GET /v1/verticals."""

    id: int
    name: str
    urgency: UrgencyLevel
    is_medical: bool
    is_legal: bool


class VerticalResolveResponse(BaseModel):
    """Response for POST /v1/verticals/resolve."""

    business_type: str | None
    vertical_id: int
    vertical_name: str


class PromptResponse(BaseModel):
    """A generated system prompt plus the data needed to cache it."""

    channel: Channel
    vertical_id: int
    vertical_name: str
    config_version: str
    prompt: str
    enforcement_section: str | None = None
