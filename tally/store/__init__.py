"""Store layer - provides persistence for the application.

This module re-exports the public storage classes and helpers for easy importing.
"""

from tally.store.categories import CategoryRepository
from tally.store.schema import (
    CATEGORIES_KEY,
    DEFAULT_CATEGORIES,
    TRANSACTIONS_KEY,
    get_default_storage_path,
    init_storage,
    storage_exists,
)
from tally.store.storage import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    StorageError,
    read_collection,
    write_collection,
)
from tally.store.transactions import TransactionRepository

__all__ = [
    # Schema
    "CATEGORIES_KEY",
    "DEFAULT_CATEGORIES",
    "TRANSACTIONS_KEY",
    "get_default_storage_path",
    "init_storage",
    "storage_exists",
    # Storage
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "StorageError",
    "read_collection",
    "write_collection",
    # Repositories
    "CategoryRepository",
    "TransactionRepository",
]
