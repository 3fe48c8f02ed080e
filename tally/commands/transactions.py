"""Transaction management commands (add, edit, delete, list)."""

import sys

from rich.console import Console
from rich.table import Table

from tally.config import get_currency, get_storage_path, load_config
from tally.dates import format_display_date, parse_date, today
from tally.domain.filters import TransactionFilter, filter_transactions
from tally.domain.statement import describe_filter
from tally.domain.transactions import (
    Transaction,
    create_transaction,
    format_money_display,
    replace_fields,
    type_label,
    validate_transaction,
    validate_transaction_fields,
)
from tally.store import CategoryRepository, JsonFileStore, StorageError, TransactionRepository

console = Console()


def print_errors(errors: list[str]) -> None:
    """Print validation errors."""
    for error in errors:
        console.print(f"[red]{error}[/red]")


def normalize_date_option(value: str | None) -> str | None:
    """Parse an optional date option, exiting on invalid input."""
    if not value:
        return value
    try:
        return parse_date(value)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)


def render_transactions_table(transactions: list[Transaction], title: str, currency: str) -> Table:
    """Build a table of transactions.

    Args:
        transactions: Transactions to show, in display order.
        title: Table title.
        currency: Currency symbol.

    Returns:
        Rich table ready to print.
    """
    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Amount", justify="right")
    table.add_column("Person", style="white")
    table.add_column("Reason", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="dim")
    table.add_column("ID", style="dim")

    for txn in transactions:
        colour = "red" if txn.type == "expense" else "green"
        table.add_row(
            format_display_date(txn.date),
            f"[{colour}]{type_label(txn.type)}[/{colour}]",
            f"[{colour}]{format_money_display(txn, currency)}[/{colour}]",
            txn.payee,
            txn.reason,
            txn.category,
            txn.description or "[dim]-[/dim]",
            txn.id[:8],
        )

    return table


def resolve_transaction_id(repo: TransactionRepository, txn_id: str) -> str:
    """Expand a unique id prefix (as shown by 'tally list') to a full id.

    Returns the input unchanged when it is a full id or matches nothing.
    """
    ids = [txn.id for txn in repo.list_all()]
    if txn_id in ids:
        return txn_id
    matches = [i for i in ids if i.startswith(txn_id)]
    if len(matches) == 1:
        return matches[0]
    return txn_id


def add_command(
    type: str,
    date: str | None,
    amount: float | None,
    category: str | None,
    payee: str | None,
    reason: str | None,
    description: str = "",
) -> None:
    """Add a transaction.

    Args:
        type: "expense" or "income".
        date: Transaction date; defaults to today.
        amount: Positive amount.
        category: Category label.
        payee: Person paid or paid by.
        reason: Reason for the transaction.
        description: Optional note.
    """
    normalized_date = normalize_date_option(date) or today()
    type = type.lower()

    errors = validate_transaction_fields(normalized_date, amount, type, category, payee, reason)
    if errors:
        print_errors(errors)
        sys.exit(1)

    config = load_config()
    currency = get_currency(config)
    store = JsonFileStore(get_storage_path(config))

    try:
        transaction = create_transaction(
            date=normalized_date,
            amount=float(amount or 0),
            type=type,  # type: ignore[arg-type]
            category=(category or "").strip(),
            payee=(payee or "").strip(),
            reason=(reason or "").strip(),
            description=(description or "").strip(),
        )
        TransactionRepository(store).add(transaction)

        console.print("[green]✓[/green] Transaction added:")
        console.print(f"  Date: {format_display_date(transaction.date)}")
        console.print(f"  Type: {type_label(transaction.type)}")
        console.print(f"  Amount: {format_money_display(transaction, currency, include_sign=False)}")
        console.print(f"  Person: {transaction.payee}")
        console.print(f"  Reason: {transaction.reason}")
        console.print(f"  Category: {transaction.category}")
        console.print(f"  [dim]ID: {transaction.id}[/dim]")

        if transaction.category not in CategoryRepository(store).list_all():
            console.print(
                f"[yellow]Category '{transaction.category}' is not in your category list[/yellow] "
                "[dim](use 'tally categories add' to add it)[/dim]"
            )

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)


def edit_command(
    txn_id: str,
    type: str | None = None,
    date: str | None = None,
    amount: float | None = None,
    category: str | None = None,
    payee: str | None = None,
    reason: str | None = None,
    description: str | None = None,
) -> None:
    """Edit fields of an existing transaction. Fields not given are kept."""
    normalized_date = normalize_date_option(date)
    config = load_config()
    store = JsonFileStore(get_storage_path(config))

    try:
        repo = TransactionRepository(store)
        full_id = resolve_transaction_id(repo, txn_id)
        existing = repo.get(full_id)

        if existing is None:
            console.print(f"[yellow]Transaction {txn_id} not found[/yellow]")
            return

        updated = replace_fields(
            existing,
            type=type.lower() if type else None,
            date=normalized_date,
            amount=amount,
            category=category,
            payee=payee,
            reason=reason,
            description=description,
        )

        errors = validate_transaction(updated)
        if errors:
            print_errors(errors)
            sys.exit(1)

        repo.update(updated)
        console.print(f"[green]✓[/green] Updated transaction {updated.id}")

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)


def delete_command(txn_id: str) -> None:
    """Delete a transaction by id (or unique id prefix)."""
    store = JsonFileStore(get_storage_path())

    try:
        repo = TransactionRepository(store)
        full_id = resolve_transaction_id(repo, txn_id)

        if repo.delete(full_id):
            console.print(f"[green]✓[/green] Deleted transaction {full_id}")
        else:
            console.print(f"[yellow]Transaction {txn_id} not found[/yellow]")

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)


def list_command(
    type: str | None = None,
    category: str | None = None,
    payee: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> None:
    """List transactions, optionally filtered."""
    criteria = TransactionFilter(
        type=type.lower() if type else None,
        category=category,
        payee=payee,
        start_date=normalize_date_option(start_date),
        end_date=normalize_date_option(end_date),
    )
    config = load_config()
    store = JsonFileStore(get_storage_path(config))

    try:
        transactions = filter_transactions(TransactionRepository(store).list_all(), criteria)

        if not transactions:
            console.print("[yellow]No transactions found[/yellow]")
            return

        title = f"Transaction History ({len(transactions)})"
        if not criteria.is_empty():
            console.print(f"[bold]Filters:[/bold] {describe_filter(criteria)}")
        console.print(render_transactions_table(transactions, title, get_currency(config)))

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)
