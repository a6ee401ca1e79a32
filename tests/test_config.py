"""
Tests for configuration module.

Tests settings loading, validation, and environment variable overrides.
"""

from pathlib import Path

import pytest
import yaml

from crawlkit.config import (
    Settings,
    ClientSettings,
    LoggingSettings,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    get_default_config_path,
    load_config,
)
from crawlkit.core.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings model."""

    def test_default_settings_valid(self):
        """Default settings should be valid."""
        settings = Settings()

        assert settings.client.api_key is None
        assert settings.client.base_url == DEFAULT_BASE_URL
        assert settings.client.timeout_ms == DEFAULT_TIMEOUT_MS == 30000
        assert settings.logging.level == "WARNING"

    def test_client_settings_validation(self):
        """Client settings should validate constraints."""
        client = ClientSettings(timeout_ms=5000, base_url="http://localhost:8080")
        assert client.timeout_ms == 5000

        with pytest.raises(ValueError):
            ClientSettings(timeout_ms=0)

        with pytest.raises(ValueError):
            ClientSettings(base_url="api.example.sh")

    def test_logging_file_path_conversion(self):
        """String file paths should become Path objects."""
        settings = LoggingSettings(file_path="logs/crawlkit.log")

        assert isinstance(settings.file_path, Path)

    def test_extra_sections_forbidden(self):
        """Unknown top-level sections should be rejected."""
        with pytest.raises(ValueError):
            Settings(browser={"headless": True})

    def test_resolve_api_key_prefers_explicit(self, monkeypatch):
        """An explicit key should win over the environment."""
        monkeypatch.setenv("CRAWLKIT_API_KEY", "ck_from_env")
        client = ClientSettings(api_key="ck_explicit")

        assert client.resolve_api_key() == "ck_explicit"

    def test_resolve_api_key_from_env(self, monkeypatch):
        """Without an explicit key the named env var should be read."""
        monkeypatch.setenv("MY_KEY_VAR", "ck_from_env")
        client = ClientSettings(api_key_env_var="MY_KEY_VAR")

        assert client.resolve_api_key() == "ck_from_env"

    def test_resolve_api_key_missing(self, monkeypatch):
        """No key anywhere should resolve to None."""
        monkeypatch.delenv("CRAWLKIT_API_KEY", raising=False)

        assert ClientSettings().resolve_api_key() is None


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_defaults(self):
        """Loading without a file should give defaults."""
        settings = load_config()

        assert isinstance(settings, Settings)
        assert settings.client.timeout_ms == DEFAULT_TIMEOUT_MS

    def test_load_from_yaml(self, temp_dir):
        """Values in a YAML file should override defaults."""
        config_path = temp_dir / "crawlkit.yaml"
        config_path.write_text(yaml.dump({
            "client": {"base_url": "https://staging.example.sh", "timeout_ms": 5000},
            "logging": {"level": "DEBUG"},
        }))

        settings = load_config(config_path)

        assert settings.client.base_url == "https://staging.example.sh"
        assert settings.client.timeout_ms == 5000
        assert settings.logging.level == "DEBUG"

    def test_load_from_string_path(self, temp_dir):
        """String paths should be accepted."""
        config_path = temp_dir / "crawlkit.yaml"
        config_path.write_text("client:\n  timeout_ms: 1234\n")

        settings = load_config(str(config_path))

        assert settings.client.timeout_ms == 1234

    def test_empty_yaml_file(self, temp_dir):
        """An empty file should give defaults."""
        config_path = temp_dir / "empty.yaml"
        config_path.write_text("")

        settings = load_config(config_path)

        assert settings.client.base_url == DEFAULT_BASE_URL

    def test_env_override(self, temp_dir, monkeypatch):
        """Environment variables should win over the file."""
        config_path = temp_dir / "crawlkit.yaml"
        config_path.write_text("client:\n  timeout_ms: 5000\n")
        monkeypatch.setenv("CRAWLKIT__CLIENT__TIMEOUT_MS", "60000")
        monkeypatch.setenv("CRAWLKIT__LOGGING__LOG_TO_CONSOLE", "false")

        settings = load_config(config_path)

        assert settings.client.timeout_ms == 60000
        assert settings.logging.log_to_console is False

    def test_missing_file(self, temp_dir):
        """A missing file should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "nope.yaml")

    def test_invalid_yaml(self, temp_dir):
        """Malformed YAML should raise ConfigurationError."""
        config_path = temp_dir / "bad.yaml"
        config_path.write_text("client: [unclosed\n")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_non_mapping_yaml(self, temp_dir):
        """A YAML list should be rejected."""
        config_path = temp_dir / "list.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_invalid_values(self, temp_dir):
        """Out-of-range values should raise ConfigurationError."""
        config_path = temp_dir / "crawlkit.yaml"
        config_path.write_text("client:\n  timeout_ms: -5\n")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_env_malformed_keys_ignored(self, monkeypatch):
        """Variables without exactly a section and a field should be skipped."""
        monkeypatch.setenv("CRAWLKIT__CLIENT", "x")
        monkeypatch.setenv("CRAWLKIT__CLIENT__TIMEOUT_MS__EXTRA", "1")
        monkeypatch.setenv("CRAWLKIT__CLIENT__API_KEY", "ck_env_key")

        settings = load_config()

        assert settings.client.api_key == "ck_env_key"
        assert settings.client.timeout_ms == DEFAULT_TIMEOUT_MS

    def test_env_non_scalar_kept_as_string(self, monkeypatch):
        """Values that parse to a YAML list should stay plain strings."""
        monkeypatch.setenv("CRAWLKIT__CLIENT__USER_AGENT", "[bot]")

        settings = load_config()

        assert settings.client.user_agent == "[bot]"


class TestDefaultConfigPath:
    """Tests for config file discovery."""

    def test_none_when_absent(self, temp_dir, monkeypatch):
        """No config anywhere should give None."""
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("HOME", str(temp_dir))

        assert get_default_config_path() is None

    def test_finds_nested_config(self, temp_dir, monkeypatch):
        """config/crawlkit.yaml in the working directory should be found."""
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("HOME", str(temp_dir))
        (temp_dir / "config").mkdir()
        (temp_dir / "config" / "crawlkit.yaml").write_text("client: {}\n")

        found = get_default_config_path()

        assert found is not None
        assert found.resolve() == (temp_dir / "config" / "crawlkit.yaml").resolve()
