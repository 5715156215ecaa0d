"""Unit tests for the system prompt preview endpoint."""

from fastapi.testclient import TestClient


class TestPreviewPrompt:
    """Tests for POST /v1/prompts."""

    def test_generates_prompt(self, client: TestClient) -> None:
        """Should render the prompt and enforcement section."""
        response = client.post(
            "/v1/prompts",
            json={
                "settings": {"business_name": "Bright Smiles", "business_type": "dental"},
                "channel": "web_chat",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["channel"] == "web_chat"
        assert data["vertical_id"] == 17
        assert data["vertical_name"] == "Dentists"
        assert data["config_version"] == "no-version"
        assert data["prompt"].startswith("# Bright Smiles AI Assistant\n*Dentists Specialist*")
        assert data["enforcement_section"].startswith("## Action Restrictions")
        assert "## Compliance Guardrails" in data["enforcement_section"]

    def test_enforcement_can_be_omitted(self, client: TestClient) -> None:
        """Should skip the enforcement section on request."""
        response = client.post("/v1/prompts", json={"include_enforcement": False})

        assert response.status_code == 200
        assert response.json()["enforcement_section"] is None

    def test_engine_defaults_applied(self, client: TestClient) -> None:
        """Should fill in the configured fallback names."""
        data = client.post("/v1/prompts", json={}).json()

        assert data["prompt"].startswith("# the business AI Assistant")
        assert "Your name is Ashley." in data["prompt"]

    def test_config_version(self, client: TestClient) -> None:
        """Should report the latest settings timestamp."""
        response = client.post(
            "/v1/prompts",
            json={
                "settings": {
                    "settings_updated_at": "2024-01-01T00:00:00Z",
                    "voice_updated_at": "2024-06-01T00:00:00Z",
                }
            },
        )

        assert response.json()["config_version"].startswith("2024-06-01T00:00:00")

    def test_enforcement_matches_overrides(self, client: TestClient) -> None:
        """Should describe the same overrides as the prompt."""
        data = client.post(
            "/v1/prompts",
            json={"settings": {"business_type": "plumbing", "appointments_enabled": False}},
        ).json()

        assert "- Do NOT attempt to book appointments" in data["prompt"]
        assert "**Booking DISABLED**" in data["enforcement_section"]
