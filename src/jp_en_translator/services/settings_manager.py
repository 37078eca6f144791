"""Settings Manager - Handles API key and endpoint configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from jp_en_translator.services.chat_completion import DEFAULT_ENDPOINT
from jp_en_translator.services.exceptions import CredentialMissing

API_KEY_VARIABLE = "OPENAI_API_KEY"
API_URL_VARIABLE = "OPENAI_API_URL"
LOG_LEVEL_VARIABLE = "JP_EN_TRANSLATOR_LOG_LEVEL"

# Sent when no key is configured; the endpoint then rejects calls with 401.
PLACEHOLDER_API_KEY = "YOUR_OPENAI_API_KEY"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Values come from the process environment, seeded from a .env file in
    the project root when one exists.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_openai_api_key(self) -> Optional[str]:
        """Get the OpenAI API key from environment."""
        key = os.getenv(API_KEY_VARIABLE)
        return key.strip() if key and key.strip() else None

    def require_openai_api_key(self) -> str:
        """
        Get the API key or explain what is missing.

        Raises:
            CredentialMissing: If OPENAI_API_KEY is unset or blank.
        """
        key = self.get_openai_api_key()
        if key is None:
            raise CredentialMissing(API_KEY_VARIABLE)
        return key

    def get_chat_completions_url(self) -> str:
        url = os.getenv(API_URL_VARIABLE)
        return url.strip() if url and url.strip() else DEFAULT_ENDPOINT

    def get_log_level(self) -> str:
        """Log level name for logging.basicConfig; unknown names fall back to INFO."""
        level = os.getenv(LOG_LEVEL_VARIABLE, "INFO").strip().upper()
        return level if level in logging.getLevelNamesMapping() else "INFO"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
