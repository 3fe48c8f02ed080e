"""Statement command: filtered transactions over a date range with totals."""

import sys
from pathlib import Path

import pandas as pd
from rich.console import Console

from tally.commands.transactions import normalize_date_option, render_transactions_table
from tally.config import get_currency, get_storage_path, load_config
from tally.dates import format_display_date, month_range, today
from tally.domain.filters import TransactionFilter, distinct_payees
from tally.domain.models import IsoDate, Month
from tally.domain.statement import Statement, create_statement, describe_filter, statement_period
from tally.domain.transactions import to_record
from tally.store import JsonFileStore, StorageError, TransactionRepository

console = Console()

CSV_COLUMNS = ["date", "type", "amount", "payee", "reason", "category", "description", "id"]


def compute_statement_period(
    start_date: str | None, end_date: str | None, month: str | None
) -> tuple[IsoDate, IsoDate, str]:
    """Compute the inclusive date range and display label for a statement.

    Args:
        start_date: Start date given by the user.
        end_date: End date given by the user; defaults to today.
        month: Optional month (YYYY-MM) that overrides start and end.

    Returns:
        Tuple of (start_date, end_date, period_display).

    Raises:
        ValueError: If no start date or month was given, or the month is invalid.
    """
    if month:
        start, end, label = month_range(Month(month))
        return start, end, label

    if not start_date:
        raise ValueError("Start date is required")

    end = IsoDate(end_date) if end_date else today()
    start = IsoDate(start_date)
    return start, end, f"{format_display_date(start)} - {format_display_date(end)}"


def statement_to_frame(statement: Statement) -> pd.DataFrame:
    """Tabulate a statement's transactions for export."""
    records = [to_record(txn) for txn in statement.transactions]
    return pd.DataFrame(records, columns=CSV_COLUMNS)


def export_statement_csv(statement: Statement, output: Path) -> None:
    """Write a statement's transactions to a CSV file."""
    output.parent.mkdir(parents=True, exist_ok=True)
    statement_to_frame(statement).to_csv(output, index=False)


def render_statement(statement: Statement, period: str, currency: str, in_range_count: int) -> None:
    """Print a statement with totals and the active filters.

    in_range_count is the number of transactions in the date range before the
    type, category and person filters were applied.
    """
    console.print(f"[bold cyan]Financial Statement[/bold cyan]  [dim]{period}[/dim]\n")

    if not statement.transactions:
        console.print("[yellow]No transactions found for the selected period[/yellow]")
        return

    first_last = statement_period(statement.transactions)
    if first_last:
        first, last = first_last
        console.print(f"[dim]From {format_display_date(first)} to {format_display_date(last)}[/dim]")

    totals = statement.totals
    balance_colour = "green" if totals.balance >= 0 else "red"
    console.print(f"  [bold green]Money In:[/bold green]  {currency}{totals.income:,.2f}")
    console.print(f"  [bold red]Money Out:[/bold red] {currency}{totals.expense:,.2f}")
    console.print(f"  [bold]Balance:[/bold]   [{balance_colour}]{currency}{totals.balance:,.2f}[/{balance_colour}]\n")

    console.print(f"[bold]Filters:[/bold] {describe_filter(statement.filter)}")
    title = f"Showing {len(statement.transactions)} of {in_range_count} transactions"
    console.print(render_transactions_table(statement.transactions, title, currency))


def statement_command(
    start_date: str | None = None,
    end_date: str | None = None,
    month: str | None = None,
    type: str | None = None,
    category: str | None = None,
    payee: str | None = None,
    csv: str | None = None,
) -> None:
    """Generate a statement for a date range."""
    try:
        start, end, period = compute_statement_period(
            normalize_date_option(start_date), normalize_date_option(end_date), month
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    config = load_config()
    currency = get_currency(config)
    store = JsonFileStore(get_storage_path(config))

    try:
        in_range = TransactionRepository(store).list_by_date_range(start, end)
        criteria = TransactionFilter(type=type.lower() if type else None, category=category, payee=payee)
        statement = create_statement(in_range, start, end, criteria)

        render_statement(statement, period, currency, len(in_range))

        if not payee:
            people = distinct_payees(in_range)
            if people:
                console.print(f"\n[dim]People in this period: {', '.join(people)}[/dim]")

        if csv:
            output = Path(csv).expanduser()
            export_statement_csv(statement, output)
            console.print(f"\n[green]✓[/green] Statement exported to: {output}")

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)
