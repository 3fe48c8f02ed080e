"""Storage layout: keys, defaults and file locations."""

import os
from pathlib import Path

from tally.domain.models import CategoryName

TRANSACTIONS_KEY = "accounting_transactions"
CATEGORIES_KEY = "accounting_categories"

# Seeded the first time categories are read and nothing is stored yet
DEFAULT_CATEGORIES: tuple[CategoryName, ...] = tuple(
    CategoryName(name)
    for name in (
        "Food",
        "Transportation",
        "Utilities",
        "Rent",
        "Entertainment",
        "Shopping",
        "Healthcare",
        "Education",
        "Salary",
        "Gifts",
        "Other",
    )
)


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_default_storage_path() -> Path:
    """Get the default storage file path (XDG compliant)."""
    return get_xdg_data_home() / "tally" / "storage.json"


def storage_exists(storage_path: Path | None = None) -> bool:
    """Check if the storage file exists.

    Args:
        storage_path: Path to check. If None, uses default location.

    Returns:
        True if the storage file exists, False otherwise.
    """
    if storage_path is None:
        storage_path = get_default_storage_path()
    return storage_path.exists()


def init_storage(storage_path: Path | None = None) -> None:
    """Create an empty storage file.

    Categories are not written here; they are seeded lazily on first read.

    Args:
        storage_path: Path to the storage file. If None, uses default location.

    Raises:
        OSError: If the file cannot be written.
    """
    if storage_path is None:
        storage_path = get_default_storage_path()

    storage_path.parent.mkdir(parents=True, exist_ok=True)
    storage_path.write_text("{}\n", encoding="utf-8")
