from models.builtin_category import (
    BuiltinCategory,
    builtins_for_type,
    find_builtin,
)
from models.category import CategoryType


class TestBuiltinCategory:
    """Tests for the built-in category catalog."""

    def test_income_builtins(self):
        """Test the income catalog and its order."""
        income = builtins_for_type(CategoryType.INCOME)

        assert income[0] == BuiltinCategory.SALARY
        assert all(b.type == CategoryType.INCOME for b in income)
        assert len(income) == 6

    def test_expense_builtins_exclude_internal_movements(self):
        """Test that TRANSFER and ALLOCATION are not listed per type."""
        expense = builtins_for_type(CategoryType.EXPENSE)

        assert all(b.type == CategoryType.EXPENSE for b in expense)
        assert BuiltinCategory.TRANSFER not in expense
        assert BuiltinCategory.ALLOCATION not in expense
        assert len(expense) == 15

    def test_every_builtin_has_display_name_and_color(self):
        """Test catalog metadata is complete."""
        for builtin in BuiltinCategory:
            assert builtin.display_name
            assert builtin.color.startswith("#")
            assert len(builtin.color) == 7

    def test_find_builtin(self):
        """Test label lookup."""
        assert find_builtin("FUEL") == BuiltinCategory.FUEL
        assert find_builtin("fuel") is None
        assert find_builtin(None) is None
