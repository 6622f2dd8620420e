"""
Pytest configuration and fixtures for all tests.
"""

import os

import pytest
import structlog

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('PASSWORD_MIN_LENGTH', '8')
os.environ.setdefault('EMAIL_DENYLIST', '["bart@simsom.com"]')

from signup_validator.config import get_settings  # noqa: E402
from signup_validator.validators import Denylist, RecordValidator, password_rule  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings freshly loaded from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures it."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def denylist():
    return Denylist(["bart@simsom.com", "spam@example.com"])


@pytest.fixture
def validator(denylist):
    return RecordValidator(password_predicate=password_rule(8), denylist=denylist)
