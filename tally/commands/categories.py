"""Category management commands."""

import sys

from rich.columns import Columns
from rich.console import Console

from tally.config import get_storage_path
from tally.domain.filters import distinct_categories
from tally.domain.transactions import validate_category_name
from tally.store import CategoryRepository, JsonFileStore, StorageError, TransactionRepository

console = Console()


def list_categories_command() -> None:
    """Show the category list, plus categories still used by transactions but no longer listed."""
    store = JsonFileStore(get_storage_path())

    try:
        categories = CategoryRepository(store).list_all()
        used = distinct_categories(TransactionRepository(store).list_all())

        if categories:
            console.print("[cyan]Existing Categories:[/cyan]")
            items = [f"{idx}. {cat}" for idx, cat in enumerate(categories, 1)]
            console.print(Columns(items, equal=True, expand=False, column_first=True))
        else:
            console.print("[dim]No categories yet[/dim]")

        unlisted = [cat for cat in used if cat not in categories]
        if unlisted:
            console.print(f"\n[yellow]Used by transactions but not listed:[/yellow] {', '.join(unlisted)}")

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)


def add_category_command(name: str) -> None:
    """Add a category to the list."""
    name = name.strip()
    store = JsonFileStore(get_storage_path())

    try:
        repo = CategoryRepository(store)
        error = validate_category_name(name, repo.list_all())
        if error:
            console.print(f"[red]{error}[/red]")
            sys.exit(1)

        repo.add(name)
        console.print(f"[green]✓[/green] Created category: {name}")

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)


def delete_category_command(name: str) -> None:
    """Remove a category from the list. Transactions using it are left unchanged."""
    store = JsonFileStore(get_storage_path())

    try:
        if CategoryRepository(store).delete(name):
            console.print(f"[green]✓[/green] Deleted category: {name}")
        else:
            console.print(f"[yellow]Category not found: {name}[/yellow]")

    except (StorageError, OSError) as e:
        console.print(f"[red]Storage error: {e}[/red]", style="bold")
        sys.exit(1)
