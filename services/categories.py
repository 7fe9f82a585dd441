"""Category service: lifecycle of household custom categories."""

import sqlite3
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from db.manager import immediate_transaction
from errors import BadRequestError, CategoryInUseError, NotFoundError
from logger import get_logger
from models.builtin_category import (
    DEFAULT_CUSTOM_COLOR,
    BuiltinCategory,
    builtins_for_type,
    find_builtin,
)
from models.category import (
    CATEGORY_COLUMNS,
    UNSET,
    CatalogEntry,
    Category,
    CategoryType,
    CreateCategoryInput,
    ListCategoriesQuery,
    UpdateCategoryInput,
)

logger = get_logger()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CategoryService:
    """Service for managing custom categories.

    Every operation except find_by_id_unscoped is scoped to a household. A
    category owned by another household is reported exactly like a missing
    one.
    """

    def __init__(self, db_manager, uniqueness, usage):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
            uniqueness: CategoryUniquenessEnforcer used on create and rename.
            usage: CategoryUsageAuditor consulted before delete.
        """
        self.db_manager = db_manager
        self.uniqueness = uniqueness
        self.usage = usage

    def create(self, data: CreateCategoryInput) -> Category:
        """Create a new custom category.

        Args:
            data: Validated create input. ``household_id`` must be resolved.

        Returns:
            The created Category.

        Raises:
            BadRequestError: If no household id was provided.
            ConflictError: If the household already has a category with this
                name and type.
        """
        if not data.household_id:
            raise BadRequestError("householdId is required")

        category_type = CategoryType(data.type)
        self.uniqueness.ensure_unique(data.household_id, data.name, category_type)

        now = _utc_now()
        category = Category(
            id=str(uuid4()),
            household_id=data.household_id,
            name=data.name,
            type=category_type,
            icon=data.icon,
            color=data.color,
            created_at=now,
            updated_at=now,
        )
        row = category.to_dict()

        with self.db_manager.connect() as conn:
            try:
                conn.execute(
                    f"INSERT INTO categories ({CATEGORY_COLUMNS}) "
                    "VALUES (:id, :household_id, :name, :type, :icon, :color, "
                    ":created_at, :updated_at)",
                    row,
                )
            except sqlite3.IntegrityError as e:
                conn.rollback()
                self.uniqueness.raise_for_violation(e)
                raise
            conn.commit()

        logger.info(
            f"Created category {category.id} '{category.name}' "
            f"({category.type.value}) in household {category.household_id}"
        )
        return category

    def get(self, category_id: str, household_id: str) -> Category:
        """Get a category by ID within a household.

        Raises:
            NotFoundError: If the category does not exist or belongs to a
                different household.
        """
        with self.db_manager.connect() as conn:
            row = conn.execute(
                f"SELECT {CATEGORY_COLUMNS} FROM categories WHERE id = ? AND household_id = ?",
                (category_id, household_id),
            ).fetchone()

        if not row:
            logger.info(f"Category {category_id} not found in household {household_id}")
            raise NotFoundError("Category")
        return Category.from_row(row)

    def find_by_id_unscoped(self, category_id: str) -> Optional[Category]:
        """Find a category by ID regardless of household.

        Only for resolving which household owns a category ahead of an
        authorization check. Use get() for everything else.

        Returns:
            Category if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            row = conn.execute(
                f"SELECT {CATEGORY_COLUMNS} FROM categories WHERE id = ?",
                (category_id,),
            ).fetchone()

        if row:
            return Category.from_row(row)
        return None

    def list(self, query: ListCategoriesQuery) -> List[Category]:
        """List custom categories of a household.

        Args:
            query: Household and optional type filter.

        Returns:
            Categories ordered by type (INCOME before EXPENSE), then name.
        """
        sql = f"SELECT {CATEGORY_COLUMNS} FROM categories WHERE household_id = ?"
        params = [query.household_id]
        if query.type:
            sql += " AND type = ?"
            params.append(CategoryType(query.type).value)
        sql += " ORDER BY CASE type WHEN 'INCOME' THEN 0 ELSE 1 END, name"

        with self.db_manager.connect() as conn:
            rows = conn.execute(sql, params).fetchall()

        return [Category.from_row(row) for row in rows]

    def update(
        self, category_id: str, household_id: str, data: UpdateCategoryInput
    ) -> Category:
        """Apply a partial update to a category.

        Fields left UNSET are untouched. ``icon`` and ``color`` set to None
        are cleared. Type and household cannot be changed.

        Returns:
            The updated Category.

        Raises:
            NotFoundError: If the category is not in the household.
            ConflictError: If the new name is taken for this type.
        """
        category = self.get(category_id, household_id)

        changes = {}
        if data.name is not UNSET and data.name is not None and data.name != category.name:
            self.uniqueness.ensure_unique(
                household_id, data.name, category.type, exclude_id=category_id
            )
            changes["name"] = data.name
        if data.icon is not UNSET:
            changes["icon"] = data.icon
        if data.color is not UNSET:
            changes["color"] = data.color
        changes["updated_at"] = _utc_now().isoformat()

        assignments = ", ".join(f"{column} = ?" for column in changes)
        with self.db_manager.connect() as conn:
            try:
                conn.execute(
                    f"UPDATE categories SET {assignments} WHERE id = ? AND household_id = ?",
                    (*changes.values(), category_id, household_id),
                )
            except sqlite3.IntegrityError as e:
                conn.rollback()
                self.uniqueness.raise_for_violation(e)
                raise
            conn.commit()

        logger.info(
            f"Updated category {category_id} in household {household_id}: "
            f"{', '.join(c for c in changes if c != 'updated_at') or 'no fields'}"
        )
        return self.get(category_id, household_id)

    def delete(self, category_id: str, household_id: str) -> None:
        """Delete a category that no ledger row references.

        The reference counts and the delete run in one write transaction.

        Raises:
            NotFoundError: If the category is not in the household.
            CategoryInUseError: If a transaction, budget or recurring
                transaction still references it.
        """
        category = self.get(category_id, household_id)

        with self.db_manager.connect() as conn:
            with immediate_transaction(conn):
                usage = self.usage.count_references_on(conn, category_id, household_id)
                if usage.in_use:
                    logger.warning(
                        f"Refusing to delete category {category_id} '{category.name}': "
                        f"{usage.transactions} transaction(s), {usage.budgets} budget(s), "
                        f"{usage.recurring_transactions} recurring transaction(s)"
                    )
                    raise CategoryInUseError("Category is in use")

                conn.execute(
                    "DELETE FROM categories WHERE id = ? AND household_id = ?",
                    (category_id, household_id),
                )

        logger.info(f"Deleted category {category_id} from household {household_id}")

    def catalog(
        self, household_id: str, category_type: Optional[CategoryType] = None
    ) -> List[CatalogEntry]:
        """List built-in categories followed by the household's custom ones.

        Args:
            household_id: Household whose custom categories are included.
            category_type: Optional type filter applied to both sets.

        Returns:
            CatalogEntry list; built-ins first, in catalog order.
        """
        if category_type:
            builtins = builtins_for_type(CategoryType(category_type))
        else:
            builtins = builtins_for_type(CategoryType.INCOME) + builtins_for_type(
                CategoryType.EXPENSE
            )

        entries = [_builtin_entry(builtin) for builtin in builtins]
        custom = self.list(ListCategoriesQuery(household_id=household_id, type=category_type))
        entries.extend(_custom_entry(category) for category in custom)
        return entries

    def describe(self, category_id: str) -> CatalogEntry:
        """Describe a category given a built-in label or a custom id.

        Custom ids are looked up unscoped; the caller is responsible for
        checking membership of the returned household.

        Raises:
            NotFoundError: If the id is neither a built-in nor a stored category.
        """
        builtin = find_builtin(category_id)
        if builtin:
            return _builtin_entry(builtin)

        category = self.find_by_id_unscoped(category_id)
        if not category:
            logger.info(f"Category {category_id} not found")
            raise NotFoundError("Category")
        return _custom_entry(category)


def _builtin_entry(builtin: BuiltinCategory) -> CatalogEntry:
    return CatalogEntry(
        id=builtin.value,
        name=builtin.display_name,
        type=builtin.type,
        color=builtin.color,
        icon=None,
        is_system=True,
    )


def _custom_entry(category: Category) -> CatalogEntry:
    return CatalogEntry(
        id=category.id,
        name=category.name,
        type=category.type,
        color=category.color or DEFAULT_CUSTOM_COLOR,
        icon=category.icon,
        is_system=False,
        household_id=category.household_id,
    )
