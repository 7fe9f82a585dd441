"""Uniqueness checks for custom categories.

A custom category is unique on (household_id, name, type). The read-based
check here gives callers a clean ConflictError in the common case; the
unique index on the categories table is what actually guarantees it when two
writers race, and its violation is reported as the same error.
"""

import sqlite3
from typing import Optional

from errors import ConflictError
from logger import get_logger
from models.category import CATEGORY_COLUMNS, Category, CategoryType

logger = get_logger()

DUPLICATE_CATEGORY_MESSAGE = "Category with this name and type already exists"

_UNIQUE_VIOLATION = (
    "UNIQUE constraint failed: "
    "categories.household_id, categories.name, categories.type"
)


class CategoryUniquenessEnforcer:
    """Detects custom categories that would collide with a new or renamed one."""

    def __init__(self, db_manager):
        """Initialize the enforcer.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_conflict(
        self,
        household_id: str,
        name: str,
        category_type: CategoryType,
        exclude_id: Optional[str] = None,
    ) -> Optional[Category]:
        """Find an existing category with the same household, name and type.

        Args:
            household_id: Household to search in.
            name: Exact (case-sensitive) name to match.
            category_type: Type to match.
            exclude_id: Category id to ignore, used when renaming.

        Returns:
            The conflicting Category, or None if the combination is free.
        """
        query = f"""
            SELECT {CATEGORY_COLUMNS} FROM categories
            WHERE household_id = ? AND name = ? AND type = ?
        """
        params = [household_id, name, CategoryType(category_type).value]
        if exclude_id is not None:
            query += " AND id != ?"
            params.append(exclude_id)
        query += " LIMIT 1"

        with self.db_manager.connect() as conn:
            row = conn.execute(query, params).fetchone()

        if row:
            return Category.from_row(row)
        return None

    def ensure_unique(
        self,
        household_id: str,
        name: str,
        category_type: CategoryType,
        exclude_id: Optional[str] = None,
    ) -> None:
        """Raise ConflictError if the combination is already taken.

        Raises:
            ConflictError: If another custom category matches.
        """
        existing = self.find_conflict(household_id, name, category_type, exclude_id)
        if existing:
            logger.warning(
                f"Duplicate category '{name}' ({CategoryType(category_type).value}) "
                f"in household {household_id}, conflicts with {existing.id}"
            )
            raise ConflictError(DUPLICATE_CATEGORY_MESSAGE)

    def raise_for_violation(self, error: sqlite3.IntegrityError) -> None:
        """Translate a unique-index violation into ConflictError.

        Any other integrity error is left for the caller to re-raise.

        Raises:
            ConflictError: If ``error`` came from the categories unique index.
        """
        if _UNIQUE_VIOLATION in str(error):
            logger.warning(f"Category unique index rejected write: {error}")
            raise ConflictError(DUPLICATE_CATEGORY_MESSAGE) from error
