"""
Logging setup.

Library modules create their own logger with logging.getLogger(__name__) and
never configure handlers themselves. Applications (or a test session) call
configure_logging() once to apply LoggingSettings.
"""

import logging
from typing import Optional

from src.config.settings import LoggingSettings, get_settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure the root logger from LoggingSettings.

    Args:
        settings: Logging settings to apply. Defaults to the logging section
                  of the global settings singleton.
    """
    if settings is None:
        settings = get_settings().logging

    logging.basicConfig(
        level=settings.level_number,
        format=settings.format,
        datefmt=DATE_FORMAT,
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at level %s", settings.level)
