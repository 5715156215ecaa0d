"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from switchboard.config import get_settings, reload_settings
from switchboard.config.settings import Settings, set_toml_config


@pytest.fixture
def isolated_config(
    test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point configuration loading at an empty temporary directory."""
    monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("SWITCHBOARD_ENV", "nonexistent")
    return test_config_dir


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "switchboard"
        assert settings.debug is False

    def test_engine_defaults(self) -> None:
        """Engine defaults match the built-in fallbacks."""
        settings = Settings()
        assert settings.engine.knowledge_max_chars == 6000
        assert settings.engine.default_ai_name == "Ashley"
        assert settings.engine.default_business_name == "the business"
        assert settings.engine.include_enforcement_section is True

    def test_observability_defaults(self) -> None:
        """Observability configuration has defaults."""
        settings = Settings()
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.logging.redact_pii is True
        assert settings.observability.metrics.path == "/metrics"

    def test_toml_values_applied(self) -> None:
        """Values from the TOML source override model defaults."""
        set_toml_config({"engine": {"default_ai_name": "Max"}})
        assert Settings().engine.default_ai_name == "Max"

    def test_init_arguments_win(self) -> None:
        """Constructor arguments take precedence over TOML."""
        set_toml_config({"debug": False})
        assert Settings(debug=True).debug is True


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(
        self, isolated_config: Path, mock_toml_files
    ) -> None:
        """get_settings returns a Settings instance."""
        mock_toml_files({"default.toml": "app_name = 'test'"})

        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.app_name == "test"

    def test_settings_cached(self, isolated_config: Path) -> None:
        """get_settings returns cached instance."""
        assert get_settings() is get_settings()

    def test_reload_settings_clears_cache(
        self, isolated_config: Path, mock_toml_files
    ) -> None:
        """reload_settings returns fresh instance."""
        mock_toml_files({"default.toml": "[engine]\ndefault_ai_name = 'Original'"})
        assert get_settings().engine.default_ai_name == "Original"

        mock_toml_files({"default.toml": "[engine]\ndefault_ai_name = 'Updated'"})
        assert reload_settings().engine.default_ai_name == "Updated"

    def test_works_without_config_files(self, isolated_config: Path) -> None:
        """An empty config directory yields model defaults."""
        assert get_settings().engine.knowledge_max_chars == 6000


class TestEnvironmentVariableOverrides:
    """Tests for environment variable configuration overrides."""

    def test_top_level_override(
        self,
        isolated_config: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Top-level values can be overridden with env vars."""
        mock_toml_files({"default.toml": "debug = false"})
        monkeypatch.setenv("SWITCHBOARD_DEBUG", "true")

        assert get_settings().debug is True

    def test_nested_override(
        self,
        isolated_config: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Nested values can be overridden with double underscore."""
        mock_toml_files({"default.toml": "[engine]\nknowledge_max_chars = 6000"})
        monkeypatch.setenv("SWITCHBOARD_ENGINE__KNOWLEDGE_MAX_CHARS", "100")

        assert get_settings().engine.knowledge_max_chars == 100

    def test_deeply_nested_override(
        self,
        isolated_config: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Deeply nested values can be overridden."""
        mock_toml_files({"default.toml": "[observability.metrics]\nenabled = true"})
        monkeypatch.setenv("SWITCHBOARD_OBSERVABILITY__METRICS__ENABLED", "false")

        assert get_settings().observability.metrics.enabled is False
