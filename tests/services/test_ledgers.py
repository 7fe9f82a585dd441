import sqlite3
from datetime import date
from decimal import Decimal

import pytest

from category_names import encode
from errors import BadRequestError, ConflictError
from models.category import CategoryType
from models.recurring_transaction import RecurrenceFrequency
from tests.helpers import make_category


class TestLedgerServiceTransactions:
    """Tests for LedgerService transaction paths."""

    def test_add_transaction_with_builtin(self, services, household_a):
        """Test recording a transaction against a built-in category."""
        transaction = services.ledgers.add_transaction(
            household_a, "GROCERIES", Decimal("42.10"), date(2026, 3, 4), "Market"
        )

        assert transaction.category_name == "GROCERIES"
        assert transaction.type == "EXPENSE"

        found = services.ledgers.find_transactions(household_a)
        assert len(found) == 1
        assert found[0].amount == Decimal("42.10")
        assert found[0].description == "Market"
        assert found[0].transaction_date == date(2026, 3, 4)

    def test_add_transaction_infers_custom_type(self, services, household_a):
        """Test that the type comes from the custom category."""
        category = make_category(services, household_a, "Tutoring", CategoryType.INCOME)

        transaction = services.ledgers.add_transaction(
            household_a, encode(category.id), Decimal("80"), date(2026, 3, 4)
        )

        assert transaction.type == "INCOME"
        assert transaction.category_name == encode(category.id)

    def test_add_transaction_explicit_type(self, services, household_a):
        """Test that an explicit type wins over the category's."""
        transaction = services.ledgers.add_transaction(
            household_a, "FOOD", Decimal("5"), date(2026, 3, 4),
            transaction_type=CategoryType.INCOME,
        )

        assert transaction.type == "INCOME"

    def test_add_transaction_rejects_foreign_category(self, services, household_a, household_b):
        """Test that a custom category of another household is rejected."""
        category = make_category(services, household_b, "Pets")

        with pytest.raises(BadRequestError):
            services.ledgers.add_transaction(
                household_a, encode(category.id), Decimal("5"), date(2026, 3, 4)
            )

        assert services.ledgers.find_transactions(household_a) == []

    def test_find_transactions_by_category(self, services, household_a):
        """Test filtering transactions by category_name."""
        services.ledgers.add_transaction(household_a, "FOOD", Decimal("1"), date(2026, 1, 1))
        services.ledgers.add_transaction(household_a, "FUEL", Decimal("2"), date(2026, 1, 2))

        found = services.ledgers.find_transactions(household_a, "FUEL")

        assert [t.amount for t in found] == [Decimal("2")]

    def test_delete_transaction_scoped(self, services, household_a, household_b):
        """Test that deletes only match the owning household."""
        transaction = services.ledgers.add_transaction(
            household_a, "FOOD", Decimal("1"), date(2026, 1, 1)
        )

        assert services.ledgers.delete_transaction(transaction.id, household_b) is False
        assert services.ledgers.delete_transaction(transaction.id, household_a) is True
        assert services.ledgers.find_transactions(household_a) == []


class TestLedgerServiceBudgets:
    """Tests for LedgerService budget paths."""

    def test_add_budget_normalizes_month(self, services, household_a):
        """Test that the month is stored as its first day."""
        budget = services.ledgers.add_budget(
            household_a, "HOUSING", Decimal("1500"), date(2026, 5, 17), CategoryType.EXPENSE
        )

        assert budget.month == date(2026, 5, 1)
        found = services.ledgers.find_budgets(household_a)
        assert found[0].month == date(2026, 5, 1)
        assert found[0].monthly_limit == Decimal("1500")

    def test_add_budget_type_mismatch(self, services, household_a):
        """Test that the budget type must match the category."""
        category = make_category(services, household_a, "Pets", CategoryType.EXPENSE)

        with pytest.raises(BadRequestError, match="does not match budget type"):
            services.ledgers.add_budget(
                household_a, encode(category.id), Decimal("10"), date(2026, 5, 1),
                CategoryType.INCOME,
            )

    def test_add_budget_duplicate_month(self, services, household_a):
        """Test one budget per category and month."""
        services.ledgers.add_budget(
            household_a, "FOOD", Decimal("300"), date(2026, 5, 2), CategoryType.EXPENSE
        )

        with pytest.raises(ConflictError, match="Budget already exists"):
            services.ledgers.add_budget(
                household_a, "FOOD", Decimal("400"), date(2026, 5, 28), CategoryType.EXPENSE
            )

    def test_racing_budget_insert_maps_index_violation_to_conflict(
        self, services, household_a, monkeypatch
    ):
        """Test a budget insert whose existence check was passed by a concurrent writer."""
        services.ledgers.add_budget(
            household_a, "FOOD", Decimal("300"), date(2026, 5, 2), CategoryType.EXPENSE
        )
        monkeypatch.setattr(services.ledgers, "find_budget_id", lambda *args, **kwargs: None)

        with pytest.raises(ConflictError, match="Budget already exists") as exc_info:
            services.ledgers.add_budget(
                household_a, "FOOD", Decimal("400"), date(2026, 5, 28), CategoryType.EXPENSE
            )

        assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
        (budget,) = services.ledgers.find_budgets(household_a)
        assert budget.monthly_limit == Decimal("300")

    def test_delete_budget(self, services, household_a):
        """Test deleting a budget."""
        budget = services.ledgers.add_budget(
            household_a, "FOOD", Decimal("300"), date(2026, 5, 2), CategoryType.EXPENSE
        )

        assert services.ledgers.delete_budget(budget.id, household_a) is True
        assert services.ledgers.find_budgets(household_a) == []


class TestLedgerServiceRecurring:
    """Tests for LedgerService recurring transaction paths."""

    def test_add_recurring(self, services, household_a):
        """Test creating a recurring transaction."""
        category = make_category(services, household_a, "Streaming")

        recurring = services.ledgers.add_recurring(
            household_a, encode(category.id), Decimal("15.99"), "MONTHLY",
            date(2026, 1, 10), "Video service",
        )

        assert recurring.frequency == RecurrenceFrequency.MONTHLY
        assert recurring.next_due_date == date(2026, 1, 10)

        found = services.ledgers.find_recurring(household_a, encode(category.id))
        assert len(found) == 1
        assert found[0].description == "Video service"
        assert found[0].amount == Decimal("15.99")

    def test_add_recurring_rejects_unknown_category(self, services, household_a):
        """Test that invalid references never reach the ledger."""
        with pytest.raises(BadRequestError):
            services.ledgers.add_recurring(
                household_a, "NOT_A_CATEGORY", Decimal("1"),
                RecurrenceFrequency.DAILY, date(2026, 1, 1),
            )

        assert services.ledgers.find_recurring(household_a) == []
