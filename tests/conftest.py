"""Pytest fixtures for fmt-utils tests"""
import logging
from datetime import date, datetime

import pytest

from fmt_utils.constants import SIZE_BASE


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'strict': False,
        'output': 'text',
        'verbose': False,
        'debug': False,
        'log_file': None,
    }


@pytest.fixture
def sample_dates():
    """Date-like values paired with their expected output."""
    return [
        ("2024-01-05", "2024-01-05"),
        ("2024-12-31", "2024-12-31"),
        ("2024-02-29T23:59:59", "2024-02-29"),
        ("  2023-07-04  ", "2023-07-04"),
        (date(2020, 3, 9), "2020-03-09"),
        (datetime(1999, 12, 31, 8, 30), "1999-12-31"),
    ]


@pytest.fixture
def sample_sizes():
    """Byte counts paired with their expected output."""
    return [
        (0, "0 B"),
        (1, "1 B"),
        (512, "512 B"),
        (1023, "1023 B"),
        (SIZE_BASE, "1 KB"),
        (1536, "1.5 KB"),
        (1100, "1.07 KB"),
        (SIZE_BASE ** 2, "1 MB"),
        (int(2.25 * SIZE_BASE ** 2), "2.25 MB"),
        (SIZE_BASE ** 3, "1 GB"),
    ]
