"""Budget model: a monthly spending or income target for one category."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Budget:
    """Represents a monthly budget line.

    Attributes:
        id: UUID string.
        household_id: Owning household.
        category_name: Built-in label or custom token.
        monthly_limit: Target amount for the month.
        month: First day of the budgeted month.
        type: 'INCOME' or 'EXPENSE', must match the category's type.
    """

    id: str
    household_id: str
    category_name: str
    monthly_limit: Decimal
    month: date
    type: str
