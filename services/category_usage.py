"""Usage auditing for custom categories.

Ledger rows point at custom categories only through their encoded
``category_name`` token, with no foreign key. Before a category can be
deleted, each ledger is counted separately for that token.
"""

import sqlite3
from dataclasses import dataclass

from category_names import encode

LEDGER_TABLES = ("transactions", "budgets", "recurring_transactions")


@dataclass
class CategoryUsage:
    """Reference counts for one category across the three ledgers."""

    transactions: int
    budgets: int
    recurring_transactions: int

    @property
    def in_use(self) -> bool:
        return (
            self.transactions > 0
            or self.budgets > 0
            or self.recurring_transactions > 0
        )


class CategoryUsageAuditor:
    """Counts ledger rows that reference a custom category.

    Results are never cached; every call queries the ledgers.
    """

    def __init__(self, db_manager):
        """Initialize the auditor.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def count_references(self, category_id: str, household_id: str) -> CategoryUsage:
        """Count references to a category in each ledger of its household.

        Args:
            category_id: The custom category id.
            household_id: Household whose ledgers are searched.

        Returns:
            CategoryUsage with one count per ledger.
        """
        with self.db_manager.connect() as conn:
            return self.count_references_on(conn, category_id, household_id)

    def count_references_on(
        self, conn: sqlite3.Connection, category_id: str, household_id: str
    ) -> CategoryUsage:
        """Same as count_references, on a caller-provided connection.

        Used when the counts must share a transaction with a following write.
        """
        token = encode(category_id)
        counts = {}
        for table in LEDGER_TABLES:
            cursor = conn.execute(
                f"SELECT COUNT(*) FROM {table} WHERE household_id = ? AND category_name = ?",
                (household_id, token),
            )
            counts[table] = cursor.fetchone()[0]
        return CategoryUsage(**counts)

    def is_in_use(self, category_id: str, household_id: str) -> bool:
        """Check whether any transaction, budget or recurring row references the category."""
        return self.count_references(category_id, household_id).in_use
