"""Ledger service: transactions, budgets and recurring transactions.

Only the parts that touch category references are implemented here. Every
insert resolves its ``category_name`` through CategoryReferenceService.
"""

import sqlite3
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import uuid4

from dateutil.relativedelta import relativedelta

from errors import ConflictError
from logger import get_logger
from models.budget import Budget
from models.category import CategoryType
from models.recurring_transaction import RecurrenceFrequency, RecurringTransaction
from models.transaction import Transaction

logger = get_logger()

# SQL Query Constants
_TRANSACTION_FIELDS = """id, household_id, category_name, amount, transaction_type,
    description, transaction_date"""

_BUDGET_FIELDS = "id, household_id, category_name, monthly_limit, month, budget_type"

DUPLICATE_BUDGET_MESSAGE = "Budget already exists for this category and month"

# SQLite's message for budgets_household_id_category_name_month_key
_BUDGET_UNIQUE_VIOLATION = (
    "UNIQUE constraint failed: budgets.household_id, budgets.category_name, budgets.month"
)

_RECURRING_FIELDS = """id, household_id, category_name, amount, description,
    frequency, start_date, next_due_date"""


class LedgerService:
    """Service for the three ledgers that reference categories by name."""

    def __init__(self, db_manager, references):
        """Initialize the ledger service.

        Args:
            db_manager: Database manager instance for database operations.
            references: CategoryReferenceService used to validate categories.
        """
        self.db_manager = db_manager
        self.references = references

    def add_transaction(
        self,
        household_id: str,
        category_name: str,
        amount: Decimal,
        transaction_date: date,
        description: Optional[str] = None,
        transaction_type: Optional[CategoryType] = None,
    ) -> Transaction:
        """Record a transaction.

        Args:
            household_id: Owning household.
            category_name: Built-in label or custom token.
            amount: Positive amount.
            transaction_date: Date of the transaction.
            description: Optional free text.
            transaction_type: INCOME or EXPENSE; inferred from the category
                when omitted.

        Returns:
            The created Transaction.

        Raises:
            BadRequestError: If the category reference is invalid.
        """
        resolved = self.references.resolve(household_id, category_name)
        if transaction_type:
            resolved_type = CategoryType(transaction_type)
        else:
            resolved_type = resolved.type

        transaction = Transaction(
            id=str(uuid4()),
            household_id=household_id,
            category_name=resolved.category_name,
            amount=Decimal(amount),
            type=resolved_type.value,
            description=description,
            transaction_date=transaction_date,
        )

        with self.db_manager.connect() as conn:
            conn.execute(
                f"""
                INSERT INTO transactions ({_TRANSACTION_FIELDS})
                VALUES (:id, :household_id, :category_name, :amount, :transaction_type,
                        :description, :transaction_date)
                """,
                transaction.to_dict(),
            )
            conn.commit()

        return transaction

    def add_budget(
        self,
        household_id: str,
        category_name: str,
        monthly_limit: Decimal,
        month: date,
        budget_type: CategoryType,
    ) -> Budget:
        """Create a monthly budget for a category.

        Args:
            household_id: Owning household.
            category_name: Built-in label or custom token.
            monthly_limit: Budgeted amount.
            month: Any date in the budgeted month.
            budget_type: INCOME or EXPENSE; must match the category.

        Returns:
            The created Budget, with ``month`` set to the first of the month.

        Raises:
            BadRequestError: If the category is invalid or of the wrong type.
            ConflictError: If a budget for this category and month exists.
        """
        resolved = self.references.require_type(household_id, category_name, budget_type)
        month_start = month + relativedelta(day=1)

        if self.find_budget_id(household_id, resolved.category_name, month_start):
            logger.warning(
                f"Budget for {resolved.category_name} in {month_start:%Y-%m} already exists"
            )
            raise ConflictError(DUPLICATE_BUDGET_MESSAGE)

        budget = Budget(
            id=str(uuid4()),
            household_id=household_id,
            category_name=resolved.category_name,
            monthly_limit=Decimal(monthly_limit),
            month=month_start,
            type=CategoryType(budget_type).value,
        )
        with self.db_manager.connect() as conn:
            try:
                conn.execute(
                    f"INSERT INTO budgets ({_BUDGET_FIELDS}) VALUES (?, ?, ?, ?, ?, ?)",
                    (
                        budget.id,
                        budget.household_id,
                        budget.category_name,
                        str(budget.monthly_limit),
                        budget.month.isoformat(),
                        budget.type,
                    ),
                )
            except sqlite3.IntegrityError as e:
                conn.rollback()
                if _BUDGET_UNIQUE_VIOLATION in str(e):
                    logger.warning(f"Budget unique index rejected write: {e}")
                    raise ConflictError(DUPLICATE_BUDGET_MESSAGE) from e
                raise
            conn.commit()

        return budget

    def find_budget_id(
        self, household_id: str, category_name: str, month_start: date
    ) -> Optional[str]:
        """Return the id of the budget for a category and month, if any."""
        with self.db_manager.connect() as conn:
            row = conn.execute(
                """
                SELECT id FROM budgets
                WHERE household_id = ? AND category_name = ? AND month = ?
                """,
                (household_id, category_name, month_start.isoformat()),
            ).fetchone()
        return row[0] if row else None

    def add_recurring(
        self,
        household_id: str,
        category_name: str,
        amount: Decimal,
        frequency: RecurrenceFrequency,
        start_date: date,
        description: Optional[str] = None,
    ) -> RecurringTransaction:
        """Create a recurring transaction template.

        Raises:
            BadRequestError: If the category reference is invalid.
        """
        resolved = self.references.resolve(household_id, category_name)

        recurring = RecurringTransaction(
            id=str(uuid4()),
            household_id=household_id,
            category_name=resolved.category_name,
            amount=Decimal(amount),
            description=description,
            frequency=RecurrenceFrequency(frequency),
            start_date=start_date,
            next_due_date=start_date,
        )

        with self.db_manager.connect() as conn:
            conn.execute(
                f"""
                INSERT INTO recurring_transactions ({_RECURRING_FIELDS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    recurring.id,
                    recurring.household_id,
                    recurring.category_name,
                    str(recurring.amount),
                    recurring.description,
                    recurring.frequency.value,
                    recurring.start_date.isoformat(),
                    recurring.next_due_date.isoformat(),
                ),
            )
            conn.commit()

        return recurring

    def find_transactions(
        self, household_id: str, category_name: Optional[str] = None
    ) -> List[Transaction]:
        """Get transactions of a household, optionally for one category.

        Returns:
            Transactions ordered by date.
        """
        rows = self._select(
            "transactions", _TRANSACTION_FIELDS, household_id, category_name,
            order_by="transaction_date, id",
        )
        return [
            Transaction(
                id=row[0],
                household_id=row[1],
                category_name=row[2],
                amount=Decimal(row[3]),
                type=row[4],
                description=row[5],
                transaction_date=date.fromisoformat(row[6]),
            )
            for row in rows
        ]

    def find_budgets(
        self, household_id: str, category_name: Optional[str] = None
    ) -> List[Budget]:
        rows = self._select(
            "budgets", _BUDGET_FIELDS, household_id, category_name,
            order_by="month, category_name",
        )
        return [
            Budget(
                id=row[0],
                household_id=row[1],
                category_name=row[2],
                monthly_limit=Decimal(row[3]),
                month=date.fromisoformat(row[4]),
                type=row[5],
            )
            for row in rows
        ]

    def find_recurring(
        self, household_id: str, category_name: Optional[str] = None
    ) -> List[RecurringTransaction]:
        rows = self._select(
            "recurring_transactions", _RECURRING_FIELDS, household_id, category_name,
            order_by="next_due_date, id",
        )
        return [
            RecurringTransaction(
                id=row[0],
                household_id=row[1],
                category_name=row[2],
                amount=Decimal(row[3]),
                description=row[4],
                frequency=RecurrenceFrequency(row[5]),
                start_date=date.fromisoformat(row[6]),
                next_due_date=date.fromisoformat(row[7]),
            )
            for row in rows
        ]

    def delete_transaction(self, transaction_id: str, household_id: str) -> bool:
        """Delete a transaction. Returns False if it was not found."""
        return self._delete("transactions", transaction_id, household_id)

    def delete_budget(self, budget_id: str, household_id: str) -> bool:
        """Delete a budget. Returns False if it was not found."""
        return self._delete("budgets", budget_id, household_id)

    def delete_recurring(self, recurring_id: str, household_id: str) -> bool:
        """Delete a recurring transaction. Returns False if it was not found."""
        return self._delete("recurring_transactions", recurring_id, household_id)

    def _select(self, table, fields, household_id, category_name, order_by):
        query = f"SELECT {fields} FROM {table} WHERE household_id = ?"
        params = [household_id]
        if category_name is not None:
            query += " AND category_name = ?"
            params.append(category_name)
        query += f" ORDER BY {order_by}"

        with self.db_manager.connect() as conn:
            return conn.execute(query, params).fetchall()

    def _delete(self, table: str, row_id: str, household_id: str) -> bool:
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"DELETE FROM {table} WHERE id = ? AND household_id = ?",
                (row_id, household_id),
            )
            conn.commit()
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted {table} row {row_id} from household {household_id}")
        return deleted
