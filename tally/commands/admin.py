"""Admin commands for init and backup."""

import shutil
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console

from tally.config import create_default_config, get_config_path, get_storage_path
from tally.store import init_storage, storage_exists

console = Console()


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup storage and configuration files."""
    storage_path = get_storage_path()
    config_path = get_config_path()

    if not storage_exists(storage_path):
        console.print("[red]Storage not found. Run 'tally init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = storage_path.parent / "backups"

    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    storage_backup = backup_dir / f"storage_{timestamp}.json"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        shutil.copy2(storage_path, storage_backup)
        console.print(f"[green]✓[/green] Storage backed up to: {storage_backup}")

        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")
        else:
            console.print("[dim]No config file to back up[/dim]")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def init_command(force: bool = False) -> None:
    """Initialize tally storage and configuration."""
    config_path = get_config_path()
    config_exists = config_path.exists()

    try:
        # Config first so that a configured storage_path is honoured
        if config_exists and not force:
            console.print(f"[dim]Using existing config: {config_path}[/dim]")
        else:
            console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
            create_default_config(config_path)
            console.print("[green]✓[/green] Config file created (permissions: 600)")

        storage_path = get_storage_path()
        if storage_exists(storage_path) and not force:
            console.print("[red]Initialization failed:[/red]", style="bold")
            console.print(f"  Storage already exists: {storage_path}")
            console.print("\n[yellow]Use 'tally init --force' to overwrite[/yellow]")
            sys.exit(1)

        console.print(f"[cyan]Initializing storage at {storage_path}...[/cyan]")
        init_storage(storage_path)
        console.print("[green]✓[/green] Storage initialized")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print(f"[dim]Storage: {storage_path}[/dim]")
        console.print(f"[dim]Config: {config_path}[/dim]")

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
