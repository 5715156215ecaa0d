"""Health check and metrics endpoints."""

from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from switchboard import __version__
from switchboard.api.models.responses import HealthResponse
from switchboard.observability.logging import get_logger
from switchboard.verticals import list_vertical_ids

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health status.

    The engine has no external dependencies; it is healthy as long as the
    vertical catalog loaded, which includes the generic fallback.
    """
    logger.debug("health_check_request")

    vertical_ids = list_vertical_ids()
    status: Literal["healthy", "unhealthy"] = "healthy" if 0 in vertical_ids else "unhealthy"

    return HealthResponse(
        status=status,
        version=__version__,
        vertical_count=len(vertical_ids),
        timestamp=datetime.now(UTC),
    )


async def get_metrics() -> Response:
    """Get Prometheus metrics.

    Returns metrics in Prometheus text format for scraping.
    """
    logger.debug("metrics_request")

    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
