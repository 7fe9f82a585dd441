"""Resolution of ledger ``category_name`` values.

All ledger write paths resolve their category through this service so that a
row can only ever store a built-in label or the token of a custom category
owned by the same household.
"""

from dataclasses import dataclass
from typing import Optional

from category_names import decode, encode
from errors import BadRequestError, NotFoundError
from models.builtin_category import DEFAULT_CUSTOM_COLOR, find_builtin
from models.category import CategoryType


@dataclass
class ResolvedCategory:
    category_name: str  # value to store in the ledger row
    type: CategoryType
    display_name: str
    color: str
    is_system: bool
    category_id: Optional[str] = None  # set for custom categories


class CategoryReferenceService:
    """Validates and describes ledger category references."""

    def __init__(self, categories):
        """Initialize the reference service.

        Args:
            categories: CategoryService used to look up custom categories.
        """
        self.categories = categories

    def resolve(self, household_id: str, category_name: str) -> ResolvedCategory:
        """Resolve a ledger category reference for a household.

        Args:
            household_id: Household the ledger row will belong to.
            category_name: Built-in label or ``CUSTOM:<uuid>`` token.

        Returns:
            ResolvedCategory describing the referenced category.

        Raises:
            BadRequestError: If the value is not a built-in label, or is a
                custom token for a category outside the household.
        """
        builtin = find_builtin(category_name)
        if builtin:
            return ResolvedCategory(
                category_name=builtin.value,
                type=builtin.type,
                display_name=builtin.display_name,
                color=builtin.color,
                is_system=True,
            )

        category_id = decode(category_name)
        if category_id is None:
            raise BadRequestError(f"Invalid category: {category_name}")

        try:
            category = self.categories.get(category_id, household_id)
        except NotFoundError as e:
            raise BadRequestError(
                "Custom category not found or does not belong to this household"
            ) from e

        return ResolvedCategory(
            category_name=encode(category.id),
            type=category.type,
            display_name=category.name,
            color=category.color or DEFAULT_CUSTOM_COLOR,
            is_system=False,
            category_id=category.id,
        )

    def require_type(
        self, household_id: str, category_name: str, category_type: CategoryType
    ) -> ResolvedCategory:
        """Resolve a reference and check it has the expected type.

        Raises:
            BadRequestError: If the reference is invalid or of another type.
        """
        category_type = CategoryType(category_type)
        resolved = self.resolve(household_id, category_name)
        if resolved.type != category_type:
            raise BadRequestError(
                f"Category {category_name} does not match budget type ({category_type.value})"
            )
        return resolved

    def display_name(self, category_name: str) -> str:
        """Human-readable label for a ledger value, for messages.

        Unknown values and deleted custom categories fall back to the raw
        ledger value.
        """
        builtin = find_builtin(category_name)
        if builtin:
            return builtin.display_name

        category_id = decode(category_name)
        if category_id:
            category = self.categories.find_by_id_unscoped(category_id)
            if category:
                return category.name
        return category_name
