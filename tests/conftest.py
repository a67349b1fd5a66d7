# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from datetime import datetime
from logging import Logger
from logging import getLogger
from shutil import rmtree
from tempfile import mkdtemp

# Third party imports
import pytest

# Local imports
from reading_import.infrastructure.config import AppConfig
from reading_import.infrastructure.config import ConfigLoader
from reading_import.infrastructure.config import reset_config
from reading_import.infrastructure.persistence import InMemoryCatalog
from reading_import.infrastructure.persistence import InMemorySessionStore
from tests.fixtures.library import FROZEN_NOW
from tests.fixtures.library import sample_catalog_entries


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and the global config"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Clear all logger instances
    Logger.manager.loggerDict.clear()

    reset_config()

    yield

    reset_config()


@pytest.fixture
def temp_test_dir():
    """Provide a temporary directory for tests that need file operations"""
    temp_dir = mkdtemp()
    yield temp_dir
    rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def default_config() -> ConfigLoader:
    """Configuration built from model defaults, ignoring any config.json"""
    return ConfigLoader(app_config=AppConfig())


@pytest.fixture
def frozen_clock():
    """Wall clock that always returns the same instant"""
    return lambda: FROZEN_NOW


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Small library catalog used by matcher and service tests"""
    return InMemoryCatalog(sample_catalog_entries())


@pytest.fixture
def session_store(catalog, frozen_clock) -> InMemorySessionStore:
    """Empty session store over the sample catalog"""
    return InMemorySessionStore(catalog, clock=frozen_clock)


@pytest.fixture
def now() -> datetime:
    """The instant returned by frozen_clock"""
    return FROZEN_NOW
