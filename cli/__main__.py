#!/usr/bin/env python3
"""
Hearthbook CLI - command-line access to household categories.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Manage custom categories
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli categories list --household <id>
    python -m cli categories create --household <id> --name Pets --type EXPENSE
    python -m cli categories delete <category-id> --household <id>
"""

import sys
import argparse
from cli import categories, migrate
from config import load_config
from errors import AppError
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Hearthbook - Household finance categories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    migrate.setup_parser(subparsers)
    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        setup_logging(config)

        if args.command == "migrate":
            # Migrate commands need db_manager for raw database operations
            args.func(args, DatabaseManager(config))
        else:
            args.func(args, Services(config))
    except AppError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
