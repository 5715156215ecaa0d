"""API route registration.

This module provides helper functions for registering API routers
with the FastAPI application.
"""

from fastapi import APIRouter, FastAPI

from switchboard.config import Settings
from switchboard.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes.

    Returns:
        APIRouter with all v1 routes registered
    """
    router = APIRouter(prefix="/v1")

    from switchboard.api.routes.customers import router as customers_router
    from switchboard.api.routes.policies import router as policies_router
    from switchboard.api.routes.prompts import router as prompts_router
    from switchboard.api.routes.verticals import router as verticals_router

    router.include_router(verticals_router, tags=["Verticals"])
    router.include_router(policies_router, tags=["Policies"])
    router.include_router(prompts_router, tags=["Prompts"])
    router.include_router(customers_router, tags=["Customers"])

    logger.debug(
        "v1_router_created",
        routes=["verticals", "policies", "prompts", "customers"],
    )

    return router


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings deciding whether metrics are exposed
    """
    app.include_router(create_v1_router())

    from switchboard.api.routes.health import get_metrics
    from switchboard.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])

    metrics = settings.observability.metrics
    if metrics.enabled:
        app.add_api_route(metrics.path, get_metrics, methods=["GET"], tags=["Health"])

    logger.info("routes_registered", metrics_enabled=metrics.enabled)
