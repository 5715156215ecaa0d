"""Fixtures for API tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from switchboard.api.app import create_app
from switchboard.api.dependencies import get_customer_settings_store
from switchboard.customer_data import InMemoryCustomerSettingsStore


@pytest.fixture
def api_env(test_config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the app against an empty config directory so model defaults apply."""
    monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("SWITCHBOARD_ENV", "test")
    return test_config_dir


@pytest.fixture
def app(api_env: Path, customer_store: InMemoryCustomerSettingsStore) -> FastAPI:
    """Create the application with an isolated customer store."""
    app = create_app()
    app.dependency_overrides[get_customer_settings_store] = lambda: customer_store
    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a test client."""
    with TestClient(app) as client:
        yield client
