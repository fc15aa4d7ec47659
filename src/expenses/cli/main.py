#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Ledger

Parses commands, calls the matching Ledger operation and prints the result.
Any ledger failure is reported on stderr with a non-zero exit code.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from ..core.config import get_config
from ..core.exceptions import LedgerError
from ..ledger import Expense, Ledger, LedgerFileStore

logger = logging.getLogger(__name__)

MONTH = click.IntRange(1, 12)

CONFIG_LABELS = {
    "environment": "Environment",
    "data_dir": "Data Directory",
    "ledger_file": "Ledger File",
    "debug": "Debug Mode",
    "log_level": "Log Level",
}


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option(
    "--file",
    "ledger_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Ledger file to use instead of the configured one",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context, config_env: str | None, ledger_file: Path | None, verbose: bool, debug: bool
) -> None:
    """
    Expense Ledger - Personal expense tracking

    Record, amend, remove and summarize expenses kept in a
    semicolon-delimited text file.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["EXPENSES_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expenses").setLevel(logging.DEBUG)

    config = get_config()
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["ledger_file"] = ledger_file or config.ledger_file

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Ledger file: {ctx.obj['ledger_file']}")

    if debug:
        click.echo("Debug logging enabled")


@contextmanager
def _ledger_errors() -> Iterator[None]:
    """Turn ledger failures into click errors (message on stderr, exit code 1)."""
    try:
        yield
    except LedgerError as e:
        logger.debug("Command failed: %s", e, exc_info=True)
        raise click.ClickException(str(e)) from e


def _open_ledger(ctx: click.Context) -> Ledger:
    return Ledger.open(LedgerFileStore(ctx.obj["ledger_file"]))


def format_table(expenses: list[Expense]) -> str:
    """Render expenses as an aligned table, or a notice when there are none."""
    if not expenses:
        return "Nothing to list."

    lines = [f"{'ID':<3} | {'Date':<10} | {'Amount':<10} | Description"]
    for expense in expenses:
        lines.append(
            f"{expense.id:<3} | {expense.date.to_iso_string():<10} | "
            f"{expense.amount.to_plain_str():<10} | {expense.description}"
        )
    return "\n".join(lines)


@main.command()
@click.option("--description", "-k", required=True, help="What the money was spent on")
@click.option("--amount", "-a", required=True, help="Amount spent, e.g. 12.34")
@click.option("--date", "-d", "date_str", help="Expense date (YYYY-MM-DD, default: today)")
@click.pass_context
def add(ctx: click.Context, description: str, amount: str, date_str: str | None) -> None:
    """
    Record a new expense.

    Examples:
      expenses add -k "dog surgery" -a 3000
      expenses add --description phone --amount 323 --date 2024-05-03
    """
    with _ledger_errors():
        expense = _open_ledger(ctx).add(description, amount, date=date_str)
    click.echo(f"Successfully added new expense with ID {expense.id}")


@main.command()
@click.option("--id", "-i", "expense_id", type=int, required=True, help="ID of the expense to change")
@click.option("--description", "-k", help="New description")
@click.option("--amount", "-a", help="New amount")
@click.option("--date", "-d", "date_str", help="New date (YYYY-MM-DD)")
@click.pass_context
def update(
    ctx: click.Context,
    expense_id: int,
    description: str | None,
    amount: str | None,
    date_str: str | None,
) -> None:
    """
    Change fields of an existing expense; omitted fields stay as they are.

    Example:
      expenses update -i 2 --amount 299.99
    """
    with _ledger_errors():
        _open_ledger(ctx).update(expense_id, description=description, amount=amount, date=date_str)
    click.echo(f"Successfully updated expense with ID {expense_id}")


@main.command()
@click.option("--id", "-i", "expense_id", type=int, required=True, help="ID of the expense to remove")
@click.pass_context
def delete(ctx: click.Context, expense_id: int) -> None:
    """Remove an expense."""
    with _ledger_errors():
        _open_ledger(ctx).delete(expense_id)
    click.echo(f"Successfully deleted expense with ID {expense_id}")


@main.command(name="list")
@click.option("--month", "-m", type=MONTH, help="Only show expenses from this month (1-12)")
@click.pass_context
def list_command(ctx: click.Context, month: int | None) -> None:
    """
    List expenses in the order they were added.

    The month filter matches the month number only, so expenses from
    every year in that month are shown.
    """
    with _ledger_errors():
        expenses = _open_ledger(ctx).list_expenses(month)
    click.echo(format_table(expenses))


@main.command()
@click.option("--month", "-m", type=MONTH, help="Only total expenses from this month (1-12)")
@click.pass_context
def summary(ctx: click.Context, month: int | None) -> None:
    """Show the total amount spent, optionally for one month."""
    with _ledger_errors():
        result = _open_ledger(ctx).summary(month)
    click.echo(str(result))


@main.command()
@click.pass_context
def report(ctx: click.Context) -> None:
    """Show totals for every calendar month with expenses."""
    with _ledger_errors():
        totals = _open_ledger(ctx).monthly_totals()

    if not totals:
        click.echo("Nothing to report.")
        return

    for row in totals:
        noun = "expense" if row.count == 1 else "expenses"
        click.echo(f"{row.label}  {str(row.total):>12}  ({row.count} {noun})")


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the ledger file location and its state."""
    store = LedgerFileStore(ctx.obj["ledger_file"])
    with _ledger_errors():
        click.echo(store.summary_text())
        if store.exists():
            click.echo(f"Last modified: {store.last_modified():%Y-%m-%d %H:%M:%S}")
            click.echo(f"Size: {store.size_bytes()} bytes")


@main.command()
def version() -> None:
    """Show version information."""
    from expenses import __author__, __version__

    click.echo(f"Expense Ledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    for key, value in config_obj.to_dict().items():
        label = CONFIG_LABELS.get(key, key.replace("_", " ").title())
        click.echo(f"  {label}: {value}")


if __name__ == "__main__":
    main()
