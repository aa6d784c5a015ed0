# tests/conftest.py
"""
Pytest configuration and fixtures for Patternbook tests.
"""

import gc
import logging

import pytest

from patternbook import MainDispatcher, PlaygroundConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package log level after each test."""
    package_logger = logging.getLogger("patternbook")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
    gc.collect()


@pytest.fixture
def fast_config():
    """Configuration with every delay scaled to zero."""
    return PlaygroundConfig(delay_scale=0.0, dispatch_timeout=5.0, random_seed=7)


@pytest.fixture
def dispatcher():
    """A running main dispatcher, stopped after the test."""
    with MainDispatcher("test") as main:
        yield main


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: Slow tests that take significant time"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
