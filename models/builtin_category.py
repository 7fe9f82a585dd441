"""Fixed catalog of built-in categories.

Built-in categories are not stored as rows; ledgers reference them by label.
"""

from enum import Enum
from typing import List, Optional

from models.category import CategoryType

DEFAULT_CUSTOM_COLOR = "#64748B"


class BuiltinCategory(str, Enum):
    # Income
    SALARY = "SALARY"
    FREELANCE = "FREELANCE"
    INVESTMENTS = "INVESTMENTS"
    SALES = "SALES"
    RENTAL_INCOME = "RENTAL_INCOME"
    OTHER_INCOME = "OTHER_INCOME"

    # Expense
    FOOD = "FOOD"
    TRANSPORTATION = "TRANSPORTATION"
    HOUSING = "HOUSING"
    HEALTHCARE = "HEALTHCARE"
    EDUCATION = "EDUCATION"
    ENTERTAINMENT = "ENTERTAINMENT"
    CLOTHING = "CLOTHING"
    UTILITIES = "UTILITIES"
    SUBSCRIPTIONS = "SUBSCRIPTIONS"
    ONLINE_SHOPPING = "ONLINE_SHOPPING"
    GROCERIES = "GROCERIES"
    RESTAURANT = "RESTAURANT"
    FUEL = "FUEL"
    PHARMACY = "PHARMACY"
    OTHER_EXPENSES = "OTHER_EXPENSES"

    # Internal movements, never listed per type
    TRANSFER = "TRANSFER"
    ALLOCATION = "ALLOCATION"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def color(self) -> str:
        return _COLORS.get(self, DEFAULT_CUSTOM_COLOR)

    @property
    def type(self) -> CategoryType:
        if self in _INCOME:
            return CategoryType.INCOME
        return CategoryType.EXPENSE


_INCOME = (
    BuiltinCategory.SALARY,
    BuiltinCategory.FREELANCE,
    BuiltinCategory.INVESTMENTS,
    BuiltinCategory.SALES,
    BuiltinCategory.RENTAL_INCOME,
    BuiltinCategory.OTHER_INCOME,
)

_EXPENSE = (
    BuiltinCategory.FOOD,
    BuiltinCategory.TRANSPORTATION,
    BuiltinCategory.HOUSING,
    BuiltinCategory.HEALTHCARE,
    BuiltinCategory.EDUCATION,
    BuiltinCategory.ENTERTAINMENT,
    BuiltinCategory.CLOTHING,
    BuiltinCategory.UTILITIES,
    BuiltinCategory.SUBSCRIPTIONS,
    BuiltinCategory.ONLINE_SHOPPING,
    BuiltinCategory.GROCERIES,
    BuiltinCategory.RESTAURANT,
    BuiltinCategory.FUEL,
    BuiltinCategory.PHARMACY,
    BuiltinCategory.OTHER_EXPENSES,
)

_DISPLAY_NAMES = {
    BuiltinCategory.SALARY: "Salary",
    BuiltinCategory.FREELANCE: "Freelance",
    BuiltinCategory.INVESTMENTS: "Investments",
    BuiltinCategory.SALES: "Sales",
    BuiltinCategory.RENTAL_INCOME: "Rental Income",
    BuiltinCategory.OTHER_INCOME: "Other Income",
    BuiltinCategory.FOOD: "Food",
    BuiltinCategory.TRANSPORTATION: "Transportation",
    BuiltinCategory.HOUSING: "Housing",
    BuiltinCategory.HEALTHCARE: "Healthcare",
    BuiltinCategory.EDUCATION: "Education",
    BuiltinCategory.ENTERTAINMENT: "Entertainment",
    BuiltinCategory.CLOTHING: "Clothing",
    BuiltinCategory.UTILITIES: "Utilities",
    BuiltinCategory.SUBSCRIPTIONS: "Subscriptions",
    BuiltinCategory.ONLINE_SHOPPING: "Online Shopping",
    BuiltinCategory.GROCERIES: "Groceries",
    BuiltinCategory.RESTAURANT: "Restaurant",
    BuiltinCategory.FUEL: "Fuel",
    BuiltinCategory.PHARMACY: "Pharmacy",
    BuiltinCategory.OTHER_EXPENSES: "Other Expenses",
    BuiltinCategory.TRANSFER: "Transfer",
    BuiltinCategory.ALLOCATION: "Allocation",
}

_COLORS = {
    BuiltinCategory.SALARY: "#22C55E",
    BuiltinCategory.FREELANCE: "#10B981",
    BuiltinCategory.INVESTMENTS: "#14B8A6",
    BuiltinCategory.SALES: "#06B6D4",
    BuiltinCategory.RENTAL_INCOME: "#3B82F6",
    BuiltinCategory.OTHER_INCOME: "#6366F1",
    BuiltinCategory.FOOD: "#F59E0B",
    BuiltinCategory.TRANSPORTATION: "#F97316",
    BuiltinCategory.HOUSING: "#EF4444",
    BuiltinCategory.UTILITIES: "#EAB308",
    BuiltinCategory.HEALTHCARE: "#84CC16",
    BuiltinCategory.ENTERTAINMENT: "#8B5CF6",
    BuiltinCategory.ONLINE_SHOPPING: "#EC4899",
    BuiltinCategory.EDUCATION: "#6366F1",
    BuiltinCategory.CLOTHING: "#F43F5E",
    BuiltinCategory.SUBSCRIPTIONS: "#A855F7",
    BuiltinCategory.GROCERIES: "#F59E0B",
    BuiltinCategory.RESTAURANT: "#F97316",
    BuiltinCategory.FUEL: "#F59E0B",
    BuiltinCategory.PHARMACY: "#84CC16",
    BuiltinCategory.OTHER_EXPENSES: "#64748B",
    BuiltinCategory.TRANSFER: "#6366F1",
    BuiltinCategory.ALLOCATION: "#8B5CF6",
}


def builtins_for_type(category_type: CategoryType) -> List[BuiltinCategory]:
    """Get the selectable built-in categories of one type, in catalog order."""
    if category_type == CategoryType.INCOME:
        return list(_INCOME)
    return list(_EXPENSE)


def find_builtin(label) -> Optional[BuiltinCategory]:
    """Look up a built-in category by its ledger label.

    Returns:
        The BuiltinCategory, or None if the label is not a built-in.
    """
    try:
        return BuiltinCategory(label)
    except ValueError:
        return None
