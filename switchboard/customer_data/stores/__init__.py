"""Customer settings store implementations."""

from switchboard.customer_data.stores.inmemory import InMemoryCustomerSettingsStore

__all__ = ["InMemoryCustomerSettingsStore"]
