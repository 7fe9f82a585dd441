"""Helper utilities for tests."""

from pathlib import Path
import sqlite3

from models.category import CategoryType, CreateCategoryInput


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())

    conn.commit()


def make_category(services, household_id, name, category_type=CategoryType.EXPENSE, **kwargs):
    """Create a custom category through the service."""
    return services.categories.create(
        CreateCategoryInput(
            household_id=household_id, name=name, type=category_type, **kwargs
        )
    )
