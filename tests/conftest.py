"""Shared pytest fixtures for all tests."""

import logging
import sqlite3
import pytest
from pathlib import Path

from config import Config, get_migrations_dir
from logger import LOGGER_NAME
from services.base import Services
from tests.helpers import run_migrations

HOUSEHOLD_A = "11111111-1111-4111-8111-111111111111"
HOUSEHOLD_B = "22222222-2222-4222-8222-222222222222"


@pytest.fixture(autouse=True)
def _isolate_app_logger():
    """Restore the hearthbook logger's level and handlers after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    original_level = logger.level
    original_handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database."""
    return Config(
        base_dir=tmp_path / "hearthbook",
        db_data_dir=tmp_path / "hearthbook" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "hearthbook" / "logs",
    )


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a DatabaseManager with schema already set up.

    This fixture provides a DatabaseManager that uses an in-memory database
    with all migrations already applied.
    """
    run_migrations(test_db, get_migrations_dir())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn):
            self.conn = conn

        def connect(self):
            """Return a context manager for the test connection."""
            return _TestConnectionContext(self.conn)

        def get_db_path(self):
            """Return a fake path for the test database."""
            return Path(":memory:")

        def get_migrations_dir(self):
            """Get the migrations directory path."""
            return get_migrations_dir()

    class _TestConnectionContext:
        """Context manager for test database connections."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            # Don't close the connection - let the fixture handle it
            pass

    return TestDatabaseManager(test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database."""
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def household_a():
    return HOUSEHOLD_A


@pytest.fixture
def household_b():
    return HOUSEHOLD_B
