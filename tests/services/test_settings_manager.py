"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from jp_en_translator.services import CredentialMissing, SettingsManager
from jp_en_translator.services.chat_completion import DEFAULT_ENDPOINT

MANAGED_VARIABLES = ("OPENAI_API_KEY", "OPENAI_API_URL", "JP_EN_TRANSLATOR_LOG_LEVEL")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up managed variables from environment before and after test."""
    old_values = {name: os.environ.pop(name, None) for name in MANAGED_VARIABLES}
    yield
    for name, value in old_values.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with a test .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("OPENAI_API_KEY=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        """API key should be None when .env has empty value."""
        assert settings.get_openai_api_key() is None

    def test_get_api_key_loaded_from_env_file(self, temp_env_dir, clean_env):
        """API key should be read from .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("OPENAI_API_KEY=sk-from-file\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_openai_api_key() == "sk-from-file"

    def test_process_environment_wins_over_env_file(self, temp_env_dir, clean_env):
        env_file = temp_env_dir / ".env"
        env_file.write_text("OPENAI_API_KEY=sk-from-file\n")
        os.environ["OPENAI_API_KEY"] = "sk-from-process"

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_openai_api_key() == "sk-from-process"

    def test_get_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        """API key should strip leading/trailing whitespace."""
        os.environ["OPENAI_API_KEY"] = "  sk-test  "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_openai_api_key() == "sk-test"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        """API key should return None for whitespace-only value."""
        os.environ["OPENAI_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_openai_api_key() is None

    def test_require_api_key_raises_credential_missing(self, settings):
        with pytest.raises(CredentialMissing) as exc_info:
            settings.require_openai_api_key()
        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_require_api_key_returns_key(self, temp_env_dir, clean_env):
        os.environ["OPENAI_API_KEY"] = "sk-test"
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.require_openai_api_key() == "sk-test"

    def test_reload_env_updates_api_key(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("OPENAI_API_KEY=old-key\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_openai_api_key() == "old-key"

        env_file.write_text("OPENAI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_openai_api_key() == "new-key"

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_openai_api_key() is None


class TestSettingsManagerOptions:
    """Tests for endpoint and log level settings."""

    def test_default_endpoint(self, settings):
        assert settings.get_chat_completions_url() == DEFAULT_ENDPOINT

    def test_endpoint_override(self, temp_env_dir, clean_env):
        os.environ["OPENAI_API_URL"] = "http://localhost:1234/v1/chat/completions"
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_chat_completions_url() == "http://localhost:1234/v1/chat/completions"

    def test_default_log_level(self, settings):
        assert settings.get_log_level() == "INFO"

    def test_log_level_is_case_insensitive(self, temp_env_dir, clean_env):
        os.environ["JP_EN_TRANSLATOR_LOG_LEVEL"] = "debug"
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_log_level() == "DEBUG"

    def test_unknown_log_level_falls_back_to_info(self, temp_env_dir, clean_env):
        os.environ["JP_EN_TRANSLATOR_LOG_LEVEL"] = "chatty"
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_log_level() == "INFO"
