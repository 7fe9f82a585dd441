"""Tests for the command-line entry point against a file database."""

import logging

import pytest

import cli.__main__ as cli_main
from config import get_migrations_dir
from db.manager import DatabaseManager
from logger import LOGGER_NAME
from models.category import ListCategoriesQuery
from services.base import Services

HOUSEHOLD = "33333333-3333-4333-8333-333333333333"


@pytest.fixture
def cli_config(test_config, monkeypatch):
    monkeypatch.setattr(cli_main, "load_config", lambda: test_config)
    yield test_config
    logging.getLogger(LOGGER_NAME).handlers.clear()


def run_cli(*argv):
    cli_main.main(list(argv))


class TestCli:
    """Tests for python -m cli."""

    def test_migrate_apply_creates_schema(self, cli_config):
        """Test that migrate apply creates the database and is idempotent."""
        run_cli("migrate", "apply")
        run_cli("migrate", "apply")

        with DatabaseManager(cli_config).connect() as conn:
            applied = {
                row[0]
                for row in conn.execute("SELECT migration_file FROM schema_migrations")
            }
        assert applied == {p.name for p in get_migrations_dir().glob("*.sql")}

    def test_create_update_list_delete(self, cli_config, caplog):
        """Test a full category lifecycle through the CLI."""
        run_cli("migrate", "apply")
        run_cli(
            "categories", "create", "--household", HOUSEHOLD,
            "--name", "Pets", "--type", "EXPENSE", "--color", "#112233",
        )

        services = Services(cli_config)
        (category,) = services.categories.list(ListCategoriesQuery(HOUSEHOLD))
        assert category.color == "#112233"

        run_cli(
            "categories", "update", category.id, "--household", HOUSEHOLD,
            "--icon", "paw", "--color", "none",
        )
        updated = services.categories.get(category.id, HOUSEHOLD)
        assert updated.icon == "paw"
        assert updated.color is None
        assert updated.name == "Pets"

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            run_cli("categories", "list", "--household", HOUSEHOLD)
        assert "Name: Pets" in caplog.text

        run_cli("categories", "delete", category.id, "--household", HOUSEHOLD, "--yes")
        assert services.categories.list(ListCategoriesQuery(HOUSEHOLD)) == []

    def test_duplicate_create_exits_with_error(self, cli_config, capsys):
        """Test that application errors print a message and exit 1."""
        run_cli("migrate", "apply")
        args = ("categories", "create", "--household", HOUSEHOLD, "--name", "Pets", "--type", "EXPENSE")
        run_cli(*args)

        with pytest.raises(SystemExit) as exc_info:
            run_cli(*args)

        assert exc_info.value.code == 1
        assert "Error: Category with this name and type already exists" in capsys.readouterr().out

    def test_catalog_includes_builtins(self, cli_config, caplog):
        """Test the catalog command output."""
        run_cli("migrate", "apply")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            run_cli("categories", "catalog", "--household", HOUSEHOLD, "--type", "INCOME")

        assert "Salary (SALARY)" in caplog.text
        assert "Groceries" not in caplog.text
