"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from chat_terminal.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.storage_path: str = os.path.expanduser(
            self._get_env(
                "CHAT_TERMINAL_STORAGE_PATH",
                os.path.join("~", ".chat_terminal", "storage.json"),
            )
        )
        self.storage_key: str = self._get_env(
            "CHAT_TERMINAL_STORAGE_KEY", "chatgpt-terminal-fs"
        )
        self.terminal_color: bool = self._get_bool_env("TERMINAL_COLOR", True)
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable, raise error if it cannot be parsed."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        normalized = value.strip().lower()
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
        raise ConfigurationError(
            f"Environment variable {key} must be a boolean, got '{value}'"
        )


# Global settings instance
settings = Settings()
