"""Dependency injection for API routes.

Provides FastAPI dependencies for settings and the customer settings
store. Dependencies can be overridden for testing.
"""

from typing import Annotated

from fastapi import Depends

from switchboard.api.services import PreviewService
from switchboard.config import Settings
from switchboard.config import get_settings as load_settings
from switchboard.customer_data import CustomerSettingsStore, InMemoryCustomerSettingsStore
from switchboard.observability.logging import get_logger

logger = get_logger(__name__)

_customer_settings_store: CustomerSettingsStore | None = None


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Cached Settings object loaded from TOML files and environment
    """
    return load_settings()


async def get_customer_settings_store() -> CustomerSettingsStore:
    """Get the CustomerSettingsStore instance.

    Settings are owned by the CRM; this service only reads them. Until a
    CRM-backed store is wired in, an in-memory store is used.

    Returns:
        CustomerSettingsStore for customer settings lookups
    """
    global _customer_settings_store
    if _customer_settings_store is None:
        _customer_settings_store = InMemoryCustomerSettingsStore()
        logger.info("customer_settings_store_initialized", store_type="inmemory")
    return _customer_settings_store


SettingsDep = Annotated[Settings, Depends(get_settings)]
CustomerSettingsStoreDep = Annotated[
    CustomerSettingsStore, Depends(get_customer_settings_store)
]


async def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing to ensure fresh instances.
    """
    global _customer_settings_store
    _customer_settings_store = None
    load_settings.cache_clear()
    logger.debug("dependencies_reset")


def get_preview_service(settings: SettingsDep) -> PreviewService:
    """Get a PreviewService configured with the engine defaults."""
    return PreviewService(settings.engine)


PreviewServiceDep = Annotated[PreviewService, Depends(get_preview_service)]
