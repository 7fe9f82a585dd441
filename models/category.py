"""Category model and the inputs accepted by the category service."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class CategoryType(str, Enum):
    """Semantic type shared by custom and built-in categories."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class _Unset:
    """Marker for fields omitted from a partial update."""

    def __repr__(self):
        return "UNSET"


UNSET = _Unset()

CATEGORY_COLUMNS = (
    "id, household_id, name, type, icon, color, created_at, updated_at"
)


@dataclass
class Category:
    """Represents a household-defined (custom) category.

    Attributes:
        id: UUID string, stable for the category's lifetime.
        household_id: Owning household. Immutable.
        name: Display name, unique per household and type.
        type: INCOME or EXPENSE. Immutable.
        icon: Optional icon token.
        color: Optional ``#RRGGBB`` color.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: str
    household_id: str
    name: str
    type: CategoryType
    icon: Optional[str] = None
    color: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: tuple) -> "Category":
        """Build a Category from a row selected with CATEGORY_COLUMNS."""
        return cls(
            id=row[0],
            household_id=row[1],
            name=row[2],
            type=CategoryType(row[3]),
            icon=row[4],
            color=row[5],
            created_at=datetime.fromisoformat(row[6]) if row[6] else None,
            updated_at=datetime.fromisoformat(row[7]) if row[7] else None,
        )

    def to_dict(self) -> dict:
        """Convert category to dictionary for database storage."""
        return {
            "id": self.id,
            "household_id": self.household_id,
            "name": self.name,
            "type": self.type.value,
            "icon": self.icon,
            "color": self.color,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass
class CreateCategoryInput:
    household_id: Optional[str]
    name: str
    type: CategoryType
    icon: Optional[str] = None
    color: Optional[str] = None


@dataclass
class UpdateCategoryInput:
    """Partial update. Fields left as UNSET keep their stored value.

    ``icon`` and ``color`` may be set to None to clear them. ``name`` cannot
    be cleared; None is treated the same as UNSET.
    """

    name: Optional[str] = UNSET
    icon: Optional[str] = UNSET
    color: Optional[str] = UNSET


@dataclass
class ListCategoriesQuery:
    household_id: str
    type: Optional[CategoryType] = None


@dataclass
class CatalogEntry:
    """A category as presented to callers, built-in or custom."""

    id: str
    name: str
    type: CategoryType
    color: str
    icon: Optional[str]
    is_system: bool
    household_id: Optional[str] = None
