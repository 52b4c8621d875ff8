"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from kutt_client.config import DEFAULT_SERVER, KuttSettings, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("KUTT_API_KEY", "KUTT_SERVER", "KUTT_TIMEOUT", "KUTT_LOG_LEVEL", "KUTT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfig:
    """Test settings."""

    def test_defaults(self):
        """Test default values."""
        settings = load_config()

        assert settings.api_key is None
        assert settings.server == DEFAULT_SERVER
        assert settings.timeout is None
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_environment(self, monkeypatch):
        """Test KUTT_* variables."""
        monkeypatch.setenv("KUTT_API_KEY", "env-key")
        monkeypatch.setenv("kutt_timeout", "7.5")
        monkeypatch.setenv("KUTT_LOG_JSON", "true")

        settings = load_config()

        assert settings.api_key == "env-key"
        assert settings.timeout == 7.5
        assert settings.log_json is True

    def test_dotenv_file(self, tmp_path):
        """Test values from a .env file in the working directory."""
        (tmp_path / ".env").write_text("KUTT_API_KEY=dotenv-key\nKUTT_SERVER=http://localhost:3000\n")

        settings = KuttSettings()

        assert settings.api_key == "dotenv-key"
        assert settings.server == "http://localhost:3000"

    def test_overrides_win(self, monkeypatch):
        """Test explicit values beat the environment."""
        monkeypatch.setenv("KUTT_API_KEY", "env-key")

        settings = load_config(api_key="explicit")

        assert settings.api_key == "explicit"

    def test_timeout_must_be_positive(self):
        """Test timeout bounds."""
        with pytest.raises(ValidationError):
            KuttSettings(timeout=0)
