"""In-memory implementation of CustomerSettingsStore."""

from switchboard.customer_data.store import CustomerSettingsStore
from switchboard.verticals.models import CustomerSettings


class InMemoryCustomerSettingsStore(CustomerSettingsStore):
    """In-memory implementation of CustomerSettingsStore for testing and development.

    Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._settings: dict[str, CustomerSettings] = {}

    async def get(self, customer_id: str) -> CustomerSettings | None:
        """Get settings by customer ID."""
        return self._settings.get(customer_id)

    async def save(self, settings: CustomerSettings) -> str:
        """Save settings, returning the customer ID.

        Raises:
            ValueError: If the settings carry no customer ID
        """
        if not settings.customer_id:
            raise ValueError("Cannot store settings without a customer_id")
        self._settings[settings.customer_id] = settings
        return settings.customer_id

    async def delete(self, customer_id: str) -> bool:
        """Delete settings."""
        if customer_id in self._settings:
            del self._settings[customer_id]
            return True
        return False
