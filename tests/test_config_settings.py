"""
Tests for src/config/settings.py and src/utils/log.py
"""

import logging

import pytest

from src.config.settings import (
    DEFAULT_LOG_FORMAT,
    LoggingSettings,
    PagingSettings,
    Settings,
    get_settings,
    reset_settings,
)
from src.utils.log import configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "HUTU_LOG_LEVEL",
        "HUTU_LOG_FORMAT",
        "HUTU_PAGE_SIZE",
        "HUTU_PAGE_DISPLAY_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == DEFAULT_LOG_FORMAT
    assert settings.paging.page_size == 10
    assert settings.paging.display_count == 5


def test_from_env_reads_values(clean_env):
    clean_env.setenv("HUTU_LOG_LEVEL", "debug")
    clean_env.setenv("HUTU_PAGE_SIZE", "25")
    clean_env.setenv("HUTU_PAGE_DISPLAY_COUNT", "7")

    settings = Settings.from_env()
    assert settings.logging.level_number == logging.DEBUG
    assert settings.paging.page_size == 25
    assert settings.paging.display_count == 7


def test_invalid_log_level_raises(clean_env):
    clean_env.setenv("HUTU_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="HUTU_LOG_LEVEL"):
        LoggingSettings.from_env()


def test_non_integer_page_size_raises(clean_env):
    clean_env.setenv("HUTU_PAGE_SIZE", "ten")
    with pytest.raises(ValueError, match="HUTU_PAGE_SIZE must be an integer"):
        PagingSettings.from_env()


def test_non_positive_display_count_raises():
    with pytest.raises(ValueError, match="HUTU_PAGE_DISPLAY_COUNT"):
        PagingSettings(display_count=0)


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.paging = PagingSettings(page_size=1)


def test_get_settings_caches_until_reset(clean_env):
    first = get_settings()
    assert get_settings() is first

    clean_env.setenv("HUTU_PAGE_SIZE", "50")
    assert get_settings().paging.page_size == 10

    reset_settings()
    assert get_settings().paging.page_size == 50


@pytest.fixture
def isolated_root_logger():
    """Detach root handlers so configure_logging() cannot close pytest's."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    for handler in original_handlers:
        root.removeHandler(handler)
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in original_handlers:
        root.addHandler(handler)
    root.setLevel(original_level)


def test_configure_logging_applies_level(isolated_root_logger):
    configure_logging(LoggingSettings(level="DEBUG", format="%(levelname)s %(message)s"))
    assert isolated_root_logger.level == logging.DEBUG
    assert len(isolated_root_logger.handlers) == 1


def test_configure_logging_defaults_to_global_settings(clean_env, isolated_root_logger):
    clean_env.setenv("HUTU_LOG_LEVEL", "ERROR")
    configure_logging()
    assert isolated_root_logger.level == logging.ERROR
