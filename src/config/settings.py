"""
Configuration settings for the utility library.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when they are built, so a bad value fails fast with a clear message instead of
surfacing later as odd log output or a broken page bar.

**What is configurable?**
  - Logging: level and record format used by configure_logging().
  - Paging: default page size and default number of page links shown by
    page_rainbow().

The helpers themselves never read configuration except where a documented
default comes from here. This module uses python-dotenv to load .env files and
dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); missing file is fine
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _int_from_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}")


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for library logging.

    Attributes:
        level: Logging level name (e.g., "DEBUG", "INFO"). Default "WARNING",
               which keeps the library quiet unless something is wrong.
        format: logging.Formatter format string for records.
    """
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.level.upper() not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"HUTU_LOG_LEVEL must be one of {', '.join(_VALID_LOG_LEVELS)}, "
                f"got: {self.level}"
            )
        if not self.format:
            raise ValueError("HUTU_LOG_FORMAT must not be empty")

    @property
    def level_number(self) -> int:
        """Numeric logging level (e.g., logging.DEBUG)."""
        return logging.getLevelName(self.level.upper())

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables**:
          - HUTU_LOG_LEVEL (optional): Defaults to "WARNING".
          - HUTU_LOG_FORMAT (optional): Defaults to DEFAULT_LOG_FORMAT.

        Returns:
            LoggingSettings object with values loaded from environment.

        Raises:
            ValueError: If the level is not a standard logging level name.
        """
        return cls(
            level=os.getenv("HUTU_LOG_LEVEL", "WARNING"),
            format=os.getenv("HUTU_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )


@dataclass(frozen=True)
class PagingSettings:
    """
    Defaults for pagination helpers.

    Attributes:
        page_size: Default number of records per page (default 10).
        display_count: Default number of page links in a page bar (default 5).
    """
    page_size: int = 10
    display_count: int = 5

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.page_size < 1:
            raise ValueError(
                f"HUTU_PAGE_SIZE must be a positive integer, got: {self.page_size}"
            )
        if self.display_count < 1:
            raise ValueError(
                "HUTU_PAGE_DISPLAY_COUNT must be a positive integer, "
                f"got: {self.display_count}"
            )

    @classmethod
    def from_env(cls) -> "PagingSettings":
        """
        Load paging settings from environment variables.

        **Environment variables**:
          - HUTU_PAGE_SIZE (optional): Defaults to 10.
          - HUTU_PAGE_DISPLAY_COUNT (optional): Defaults to 5.

        Raises:
            ValueError: If a value is not a positive integer.
        """
        return cls(
            page_size=_int_from_env("HUTU_PAGE_SIZE", "10"),
            display_count=_int_from_env("HUTU_PAGE_DISPLAY_COUNT", "5"),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the library.

    **Conceptual**: Top-level object aggregating the subsystem settings. It is
    the single entrypoint for configuration; tests can build one directly
    instead of touching the environment.

    **Usage pattern**:
      ```python
      from src.config.settings import get_settings

      settings = get_settings()
      settings.paging.display_count
      ```

    Attributes:
        logging: Logging settings.
        paging: Pagination defaults.
    """
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    paging: PagingSettings = field(default_factory=PagingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Raises:
            ValueError: If any subsystem setting is invalid.
        """
        return cls(
            logging=LoggingSettings.from_env(),
            paging=PagingSettings.from_env(),
        )


# Lazily-built singleton; tests call reset_settings() or inject Settings directly
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds an invalid value.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    Clears the cached settings, forcing them to be reloaded from the
    environment on next access.
    """
    global _default_settings
    _default_settings = None
