"""Test factories for creating test data."""

from tests.factories.settings import CustomerSettingsFactory

__all__ = [
    "CustomerSettingsFactory",
]
