"""Database manager for SQLite connections and path management."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir


class DatabaseManager:
    """Manages database connections and paths.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection with automatic cleanup.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            yield conn
        finally:
            conn.close()

    def get_db_path(self):
        """Get the current database path."""
        return self.config.db_path

    def get_migrations_dir(self):
        """Get the migrations directory path."""
        return get_migrations_dir()


@contextmanager
def immediate_transaction(conn: sqlite3.Connection):
    """Run a block inside a write transaction taken up front.

    BEGIN IMMEDIATE acquires the database write lock before the first read,
    so reads made inside the block cannot be invalidated by another writer
    before the block commits.

    Args:
        conn: Open connection with no transaction in progress.

    Yields:
        The same connection.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        conn.rollback()
        raise
    conn.commit()
