"""Global configuration and fixtures for all pytest-based tests"""

import logging.config

import pytest

from collectkit.util.defaults import DEFAULT_LOG_CONFIG


@pytest.fixture(autouse=True)
def reset_log_config():
    """Restores the default logging configuration after commands configured their own"""
    yield
    logging.config.dictConfig(DEFAULT_LOG_CONFIG)
