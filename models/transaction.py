from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class Transaction:
    id: str  # uuid
    household_id: str
    category_name: str  # built-in label or CUSTOM:<uuid>
    amount: Decimal  # always positive
    type: str  # 'INCOME' or 'EXPENSE'
    description: Optional[str]
    transaction_date: date

    def to_dict(self) -> dict:
        """Convert transaction to dictionary for database storage."""
        return {
            "id": self.id,
            "household_id": self.household_id,
            "category_name": self.category_name,
            "amount": str(self.amount),
            "transaction_type": self.type,
            "description": self.description,
            "transaction_date": self.transaction_date.isoformat(),
        }
