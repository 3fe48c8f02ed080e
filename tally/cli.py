"""CLI entry point for tally."""

import sys
import tomllib

import typer
from rich.console import Console

from tally.commands.admin import backup_command, init_command
from tally.commands.categories import add_category_command, delete_category_command, list_categories_command
from tally.commands.statement import statement_command
from tally.commands.transactions import add_command, delete_command, edit_command, list_command
from tally.config import load_config
from tally.logging_setup import configure_logging

app = typer.Typer(
    name="tally",
    help="tally - Personal accounting for income, expenses and statements",
    add_completion=False,
)

categories_app = typer.Typer(help="Manage your category list.")
app.add_typer(categories_app, name="categories")


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Logging level (e.g. DEBUG, INFO)"),
) -> None:
    """tally - Personal accounting for income, expenses and statements."""
    try:
        config = load_config()
    except tomllib.TOMLDecodeError as e:
        Console(stderr=True).print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    configure_logging(log_level or config.get("log_level"))


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing storage and config"),
) -> None:
    """Initialize tally storage and configuration."""
    init_command(force)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: next to storage)"),
) -> None:
    """Backup your storage and configuration files."""
    backup_command(output_dir)


@app.command()
def add(
    type: str = typer.Option("expense", "--type", "-t", help="'expense' (money out) or 'income' (money in)"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date (default: today)"),
    amount: float = typer.Option(None, "--amount", "-a", help="Amount, greater than 0"),
    category: str = typer.Option(None, "--category", "-c", help="Category"),
    payee: str = typer.Option(None, "--person", "-p", help="Who paid or received the money"),
    reason: str = typer.Option(None, "--reason", "-r", help="Reason for the transaction"),
    description: str = typer.Option("", "--description", help="Optional longer note"),
) -> None:
    """Record a new transaction."""
    add_command(type, date, amount, category, payee, reason, description)


@app.command()
def edit(
    txn_id: str = typer.Argument(..., help="Transaction ID (or a unique prefix)"),
    type: str = typer.Option(None, "--type", "-t", help="'expense' or 'income'"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date"),
    amount: float = typer.Option(None, "--amount", "-a", help="Amount, greater than 0"),
    category: str = typer.Option(None, "--category", "-c", help="Category"),
    payee: str = typer.Option(None, "--person", "-p", help="Who paid or received the money"),
    reason: str = typer.Option(None, "--reason", "-r", help="Reason for the transaction"),
    description: str = typer.Option(None, "--description", help="Longer note"),
) -> None:
    """Change fields of an existing transaction."""
    edit_command(txn_id, type, date, amount, category, payee, reason, description)


@app.command()
def delete(
    txn_id: str = typer.Argument(..., help="Transaction ID (or a unique prefix)"),
) -> None:
    """Delete a transaction."""
    delete_command(txn_id)


@app.command(name="list")
def list_transactions(
    type: str = typer.Option(None, "--type", "-t", help="Only 'expense' or 'income'"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
    payee: str = typer.Option(None, "--person", "-p", help="Only this person"),
    start_date: str = typer.Option(None, "--from", help="First date to include"),
    end_date: str = typer.Option(None, "--to", help="Last date to include"),
) -> None:
    """List your transactions."""
    list_command(type, category, payee, start_date, end_date)


@app.command()
def statement(
    start_date: str = typer.Option(None, "--start", "-s", help="Start date (inclusive)"),
    end_date: str = typer.Option(None, "--end", "-e", help="End date (inclusive, default: today)"),
    month: str = typer.Option(None, "--month", help="Whole month (YYYY-MM), instead of --start/--end"),
    type: str = typer.Option(None, "--type", "-t", help="Only 'expense' or 'income'"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
    payee: str = typer.Option(None, "--person", "-p", help="Only this person"),
    csv: str = typer.Option(None, "--csv", help="Also export the statement to this CSV file"),
) -> None:
    """Generate a statement with income, expense and balance totals."""
    statement_command(start_date, end_date, month, type, category, payee, csv)


@categories_app.command(name="list")
def categories_list() -> None:
    """Show your categories."""
    list_categories_command()


@categories_app.command(name="add")
def categories_add(name: str) -> None:
    """Add a category."""
    add_category_command(name)


@categories_app.command(name="delete")
def categories_delete(name: str) -> None:
    """Delete a category (transactions keep their category text)."""
    delete_category_command(name)


if __name__ == "__main__":
    app()
