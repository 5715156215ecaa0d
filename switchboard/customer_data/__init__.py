"""Customer settings access.

The only I/O boundary of the engine: settings are loaded here and then
handed to the pure resolution pipeline.
"""

from switchboard.customer_data.store import CustomerSettingsStore
from switchboard.customer_data.stores import InMemoryCustomerSettingsStore

__all__ = [
    "CustomerSettingsStore",
    "InMemoryCustomerSettingsStore",
]
