from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class RecurrenceFrequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


@dataclass
class RecurringTransaction:
    id: str
    household_id: str
    category_name: str
    amount: Decimal
    description: Optional[str]
    frequency: RecurrenceFrequency
    start_date: date
    next_due_date: date
