"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from src.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_FILES_PER_PAGE = 20
DEFAULT_PAGE = 1
PATH_STYLES = ("auto", "windows", "posix")
_APP_DIR = os.path.join("~", ".console_file_manager")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.files_per_page: int = self._get_int_env(
            "FM_FILES_PER_PAGE", DEFAULT_FILES_PER_PAGE
        )
        # amount of entries per page can not be non-positive
        if self.files_per_page <= 0:
            self.files_per_page = DEFAULT_FILES_PER_PAGE

        self.default_page: int = self._get_int_env("FM_DEFAULT_PAGE", DEFAULT_PAGE)
        if self.default_page <= 0:
            self.default_page = DEFAULT_PAGE

        self.state_file: str = os.path.expanduser(
            self._get_env("FM_STATE_FILE", os.path.join(_APP_DIR, "last_state.txt"))
        )
        self.log_file: str = os.path.expanduser(
            self._get_env("FM_LOG_FILE", os.path.join(_APP_DIR, "file_manager.log"))
        )
        self.log_level: str = self._get_env("FM_LOG_LEVEL", "INFO").upper()

        # the border symbol must be a single character
        self.border_symbol: str = (self._get_env("FM_BORDER_SYMBOL", "=") or "=")[0]

        self.path_style: str = self._get_env("FM_PATH_STYLE", "auto").strip().lower()
        if self.path_style not in PATH_STYLES:
            raise ConfigurationError(
                f"FM_PATH_STYLE must be one of {', '.join(PATH_STYLES)}, got '{self.path_style}'"
            )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it is not a number."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got '{value}'"
            )


# Global settings instance
settings = Settings()
