"""CustomerSettingsStore abstract interface."""

from abc import ABC, abstractmethod

from switchboard.verticals.models import CustomerSettings


class CustomerSettingsStore(ABC):
    """Abstract interface for customer settings storage.

    Settings are fetched through the store before the resolution
    pipeline runs; the pipeline itself never performs I/O.
    """

    @abstractmethod
    async def get(self, customer_id: str) -> CustomerSettings | None:
        """Get settings by customer ID."""
        pass

    @abstractmethod
    async def save(self, settings: CustomerSettings) -> str:
        """Save settings, returning the customer ID."""
        pass

    @abstractmethod
    async def delete(self, customer_id: str) -> bool:
        """Delete settings."""
        pass
