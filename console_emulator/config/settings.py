"""
Configuration settings for the console emulator.
"""

import logging
import os

from dotenv import load_dotenv

from console_emulator.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Console settings loaded from environment variables."""

    def __init__(self):
        self.user: str = self._get_env("CONSOLE_USER", "user").strip()
        if not self.user:
            raise ConfigurationError("CONSOLE_USER cannot be empty")
        self.host: str = self._get_env("CONSOLE_HOST", "android")
        self.buffer_size: int = self._get_positive_int_env("CONSOLE_BUFFER_SIZE", 50)
        self.root_directory: str = self._get_env(
            "CONSOLE_ROOT_DIRECTORY", os.path.abspath(os.sep)
        )
        self.shell: str = self._get_env("CONSOLE_SHELL", "sh")
        self.log_level: str = self._get_log_level_env("CONSOLE_LOG_LEVEL", "INFO")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable that must be >= 1."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value < 1:
            raise ConfigurationError(f"Environment variable {key} must be >= 1, got {value}")
        return value

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name, e.g. INFO or DEBUG."""
        value = self._get_env(key, default).strip().upper()
        if value not in LOG_LEVELS:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
            )
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


# Global settings instance
settings = Settings()
