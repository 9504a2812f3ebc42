"""Unit tests for the logging setup."""

import logging

from warehouse.config import get_settings
from warehouse.infrastructure.logging.log_config import _parse_level, setup_logging


def test_setup_logging_applies_category_levels():
    settings = get_settings()

    setup_logging()

    assert logging.getLogger("sqlalchemy.engine").level == _parse_level(settings.log_level_sql)
    assert logging.getLogger("warehouse.application.services").level == _parse_level(
        settings.log_level_inventory
    )
    assert logging.getLogger().handlers


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("verbose") == logging.INFO
