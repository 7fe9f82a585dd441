#!/usr/bin/env python3

from logger import get_logger
from models.category import (
    UNSET,
    CategoryType,
    CreateCategoryInput,
    ListCategoriesQuery,
    UpdateCategoryInput,
)

logger = get_logger()

# Passing this for --icon/--color clears the stored value
CLEAR_VALUE = "none"


def _log_category(category):
    logger.info(f"ID: {category.id}")
    logger.info(f"Name: {category.name}")
    logger.info(f"Type: {category.type.value}")
    if category.icon:
        logger.info(f"Icon: {category.icon}")
    if category.color:
        logger.info(f"Color: {category.color}")


def _optional_field(value):
    if value is None:
        return UNSET
    if value.lower() == CLEAR_VALUE:
        return None
    return value


def cmd_list(args, services):
    """List custom categories of a household."""
    categories = services.categories.list(
        ListCategoriesQuery(household_id=args.household, type=args.type)
    )

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        _log_category(category)
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_catalog(args, services):
    """List built-in and custom categories together."""
    for entry in services.categories.catalog(args.household, args.type):
        kind = "system" if entry.is_system else "custom"
        logger.info(f"{entry.type.value:<8} {kind:<7} {entry.color} {entry.name} ({entry.id})")


def cmd_create(args, services):
    """Create a new custom category."""
    category = services.categories.create(
        CreateCategoryInput(
            household_id=args.household,
            name=args.name.strip(),
            type=args.type,
            icon=args.icon,
            color=args.color,
        )
    )
    logger.info(f"\n✓ Category created successfully with ID: {category.id}")
    _log_category(category)


def cmd_update(args, services):
    """Rename a category or change its icon/color."""
    category = services.categories.update(
        args.category_id,
        args.household,
        UpdateCategoryInput(
            name=args.name.strip() if args.name else UNSET,
            icon=_optional_field(args.icon),
            color=_optional_field(args.color),
        ),
    )
    logger.info("✓ Category updated.")
    _log_category(category)


def cmd_delete(args, services):
    """Delete a category by ID."""
    category = services.categories.get(args.category_id, args.household)

    if not args.yes:
        logger.info("\nCategory to delete:")
        _log_category(category)
        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    services.categories.delete(category.id, args.household)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, update and delete custom categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )
    type_choices = [t.value for t in CategoryType]

    # categories list
    list_parser = categories_subparsers.add_parser(
        "list", help="List custom categories"
    )
    list_parser.add_argument("--household", required=True, help="Household ID")
    list_parser.add_argument("--type", choices=type_choices, help="Filter by type")
    list_parser.set_defaults(func=cmd_list)

    # categories catalog
    catalog_parser = categories_subparsers.add_parser(
        "catalog", help="List built-in and custom categories"
    )
    catalog_parser.add_argument("--household", required=True, help="Household ID")
    catalog_parser.add_argument("--type", choices=type_choices, help="Filter by type")
    catalog_parser.set_defaults(func=cmd_catalog)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a custom category"
    )
    create_parser.add_argument("--household", required=True, help="Household ID")
    create_parser.add_argument("--name", required=True, help="Category name")
    create_parser.add_argument("--type", required=True, choices=type_choices)
    create_parser.add_argument("--icon", help="Icon token")
    create_parser.add_argument("--color", help="Hex color, e.g. #22C55E")
    create_parser.set_defaults(func=cmd_create)

    # categories update
    update_parser = categories_subparsers.add_parser(
        "update", help="Update a custom category"
    )
    update_parser.add_argument("category_id", help="ID of the category to update")
    update_parser.add_argument("--household", required=True, help="Household ID")
    update_parser.add_argument("--name", help="New name")
    update_parser.add_argument("--icon", help=f"New icon, or '{CLEAR_VALUE}' to clear")
    update_parser.add_argument("--color", help=f"New color, or '{CLEAR_VALUE}' to clear")
    update_parser.set_defaults(func=cmd_update)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument("category_id", help="ID of the category to delete")
    delete_parser.add_argument("--household", required=True, help="Household ID")
    delete_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
