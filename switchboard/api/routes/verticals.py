"""Vertical catalog endpoints."""

from fastapi import APIRouter

from switchboard.api.models.requests import VerticalResolveRequest
from switchboard.api.models.responses import VerticalResolveResponse, VerticalSummary
from switchboard.observability.logging import get_logger
from switchboard.verticals import (
    classify_vertical,
    get_vertical_config,
    list_vertical_configs,
    resolve_vertical_id,
)
from switchboard.verticals.models import VerticalPromptConfig

logger = get_logger(__name__)

router = APIRouter(prefix="/verticals")


@router.get("", response_model=list[VerticalSummary])
async def list_verticals() -> list[VerticalSummary]:
    """List every registered vertical."""
    summaries = []
    for config in list_vertical_configs():
        compliance = classify_vertical(config.id)
        summaries.append(
            VerticalSummary(
                id=config.id,
                name=config.name,
                urgency=config.brain_rules.urgency_classification,
                is_medical=compliance.medical,
                is_legal=compliance.legal,
            )
        )
    return summaries


@router.post("/resolve", response_model=VerticalResolveResponse)
async def resolve_vertical(request: VerticalResolveRequest) -> VerticalResolveResponse:
    """Resolve a free-text business type to a vertical."""
    vertical_id = resolve_vertical_id(request.business_type)
    logger.debug(
        "vertical_resolved",
        business_type=request.business_type,
        vertical_id=vertical_id,
    )
    return VerticalResolveResponse(
        business_type=request.business_type,
        vertical_id=vertical_id,
        vertical_name=get_vertical_config(vertical_id).name,
    )


@router.get("/{vertical_id}", response_model=VerticalPromptConfig)
async def get_vertical(vertical_id: int) -> VerticalPromptConfig:
    """Get a vertical's full configuration.

    Unknown ids return the generic vertical rather than 404, mirroring
    what the engine does at runtime.
    """
    return get_vertical_config(vertical_id)
