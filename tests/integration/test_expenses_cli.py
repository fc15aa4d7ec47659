#!/usr/bin/env python3
"""
Integration tests for the expenses CLI

Tests end-to-end command execution through click against a temporary
ledger file.
"""

import pytest
from click.testing import CliRunner

from expenses.cli.main import main


@pytest.mark.integration
class TestExpensesCLI:
    """Test CLI commands with real file round trips."""

    @pytest.fixture(autouse=True)
    def _runner(self, ledger_path):
        self.runner = CliRunner()
        self.ledger_path = ledger_path

    def invoke(self, *args: str):
        return self.runner.invoke(main, ["--file", str(self.ledger_path), *args])

    def test_help_lists_all_commands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ["add", "update", "delete", "list", "summary", "report", "info", "version", "config"]:
            assert command in result.output

    def test_add_prints_new_id(self):
        result = self.invoke("add", "-k", "dog surgery", "-a", "3000", "-d", "2024-05-01")

        assert result.exit_code == 0
        assert "Successfully added new expense with ID 1" in result.output
        assert self.ledger_path.read_text() == "id;date;amount;description\n1;2024-05-01;3000.00;dog surgery\n"

    def test_full_scenario(self):
        """Test add, add, delete, list, summary."""
        assert self.invoke("add", "--description", "dog surgery", "--amount", "3000").exit_code == 0
        assert "ID 2" in self.invoke("add", "--description", "phone", "--amount", "323").output

        deleted = self.invoke("delete", "--id", "1")
        assert deleted.exit_code == 0
        assert "Successfully deleted expense with ID 1" in deleted.output

        listed = self.invoke("list")
        assert listed.exit_code == 0
        assert "phone" in listed.output
        assert "dog surgery" not in listed.output
        assert "323.00" in listed.output

        summary = self.invoke("summary")
        assert summary.exit_code == 0
        assert summary.output.strip() == "Total expenses: 323"

    def test_list_empty(self):
        result = self.invoke("list")
        assert result.exit_code == 0
        assert "Nothing to list." in result.output

    def test_list_table_layout(self):
        self.invoke("add", "-k", "tea", "-a", "2.5", "-d", "2024-05-01")

        lines = self.invoke("list").output.splitlines()
        assert lines[0] == "ID  | Date       | Amount     | Description"
        assert lines[1] == "1   | 2024-05-01 | 2.50       | tea"

    def test_month_filters(self):
        self.invoke("add", "-k", "books", "-a", "10", "-d", "2023-05-01")
        self.invoke("add", "-k", "groceries", "-a", "20", "-d", "2024-05-01")
        self.invoke("add", "-k", "coffee", "-a", "5", "-d", "2024-06-01")

        listed = self.invoke("list", "--month", "5")
        assert "books" in listed.output
        assert "groceries" in listed.output
        assert "coffee" not in listed.output

        summary = self.invoke("summary", "-m", "5")
        assert summary.output.strip() == "Total expenses for May: 30"

    def test_summary_empty_is_bare_zero(self):
        result = self.invoke("summary")
        assert result.output.strip() == "Total expenses: 0"

    @pytest.mark.parametrize("command", ["list", "summary"])
    def test_out_of_range_month_is_usage_error(self, command):
        result = self.invoke(command, "--month", "13")
        assert result.exit_code == 2
        assert "13" in result.output

    def test_update_changes_fields(self):
        self.invoke("add", "-k", "phone", "-a", "323", "-d", "2024-05-03")

        result = self.invoke("update", "-i", "1", "-a", "299.99")

        assert result.exit_code == 0
        assert "Successfully updated expense with ID 1" in result.output
        assert "1;2024-05-03;299.99;phone" in self.ledger_path.read_text()

    def test_update_missing_id_fails(self):
        self.invoke("add", "-k", "phone", "-a", "323", "-d", "2024-05-03")
        before = self.ledger_path.read_bytes()

        result = self.invoke("update", "-i", "9", "-k", "ghost")

        assert result.exit_code == 1
        assert "No expense found with ID 9" in result.output
        assert self.ledger_path.read_bytes() == before

    def test_delete_missing_id_fails(self):
        result = self.invoke("delete", "-i", "3")
        assert result.exit_code == 1
        assert "No expense found with ID 3" in result.output

    def test_invalid_amount_fails(self):
        result = self.invoke("add", "-k", "bad", "-a", "twelve")
        assert result.exit_code == 1
        assert "Invalid amount" in result.output
        assert not self.ledger_path.exists()

    def test_decimal_comma_amount_fails(self):
        result = self.invoke("add", "-k", "lunch", "-a", "12,50")
        assert result.exit_code == 1
        assert "decimal separator" in result.output
        assert not self.ledger_path.exists()

    def test_unencodable_description_fails(self):
        result = self.invoke("add", "-k", "caf\udce9", "-a", "1")
        assert result.exit_code == 1
        assert "Invalid description" in result.output
        assert not self.ledger_path.exists()

    def test_invalid_date_fails(self):
        result = self.invoke("add", "-k", "bad", "-a", "1", "-d", "2024-02-30")
        assert result.exit_code == 1
        assert "Invalid date" in result.output

    def test_corrupt_file_fails(self):
        self.ledger_path.write_text("1;2024-05-01;3000.00;ok\nnot;a;valid;row\n")

        result = self.invoke("list")

        assert result.exit_code == 1
        assert "Corrupt ledger file" in result.output

    def test_report(self):
        self.invoke("add", "-k", "books", "-a", "10", "-d", "2023-05-01")
        self.invoke("add", "-k", "groceries", "-a", "20", "-d", "2024-05-01")
        self.invoke("add", "-k", "more groceries", "-a", "5", "-d", "2024-05-20")

        lines = self.invoke("report").output.splitlines()
        assert lines[0].startswith("2023-05")
        assert "$10.00" in lines[0]
        assert "(1 expense)" in lines[0]
        assert "$25.00" in lines[1]
        assert "(2 expenses)" in lines[1]

    def test_report_empty(self):
        assert "Nothing to report." in self.invoke("report").output

    def test_info(self):
        assert "No ledger file" in self.invoke("info").output

        self.invoke("add", "-k", "tea", "-a", "1")
        output = self.invoke("info").output
        assert "1 expenses" in output
        assert "Last modified:" in output


@pytest.mark.integration
class TestCLIUtilities:
    """Test version/config and global options."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Expense Ledger v" in result.output
        assert "Author:" in result.output

    def test_config(self):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Ledger File:" in result.output

    def test_config_lists_every_setting(self, monkeypatch, tmp_path):
        """Test every configuration field is rendered with its value."""
        monkeypatch.setenv("EXPENSES_FILE", "custom.csv")

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert f"Data Directory: {tmp_path / 'data'}" in result.output
        assert f"Ledger File: {tmp_path / 'data' / 'custom.csv'}" in result.output
        assert "Debug Mode: False" in result.output
        assert "Log Level: INFO" in result.output

    def test_verbose_shows_ledger_file(self, ledger_path):
        result = self.runner.invoke(main, ["--verbose", "--file", str(ledger_path), "summary"])

        assert result.exit_code == 0
        assert f"Ledger file: {ledger_path}" in result.output

    def test_invalid_command(self):
        result = self.runner.invoke(main, ["invalid-command"])
        assert result.exit_code != 0
        assert "No such command" in result.output

    def test_default_ledger_file_comes_from_config(self, tmp_path):
        result = self.runner.invoke(main, ["add", "-k", "tea", "-a", "1"])

        assert result.exit_code == 0
        assert (tmp_path / "data" / "expenses.csv").exists()
