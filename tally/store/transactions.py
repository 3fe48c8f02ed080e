"""Transaction repository over a key-value store.

Every operation reads the whole collection and, for writes, stores the whole
collection again. Updates and deletes of an unknown id are silent no-ops.
"""

from tally.domain.filters import in_date_range
from tally.domain.transactions import Transaction, from_record, to_record
from tally.logging_setup import get_logger
from tally.store.schema import TRANSACTIONS_KEY
from tally.store.storage import KeyValueStore, StorageError, read_collection, write_collection

logger = get_logger(__name__)


class TransactionRepository:
    """CRUD and range queries over the stored transaction list."""

    def __init__(self, store: KeyValueStore | None) -> None:
        self.store = store

    def _load(self) -> list[Transaction]:
        records = read_collection(self.store, TRANSACTIONS_KEY, [])
        try:
            return [from_record(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Stored transaction record is malformed: {e!r}") from e

    def _save(self, transactions: list[Transaction]) -> None:
        write_collection(self.store, TRANSACTIONS_KEY, [to_record(txn) for txn in transactions])

    def list_all(self) -> list[Transaction]:
        """All transactions in stored insertion order."""
        return self._load()

    def get(self, txn_id: str) -> Transaction | None:
        """Look up a transaction by id.

        Returns:
            The transaction, or None if no transaction has that id.
        """
        return next((txn for txn in self._load() if txn.id == txn_id), None)

    def add(self, transaction: Transaction) -> None:
        """Append a transaction to the end of the collection."""
        transactions = self._load()
        transactions.append(transaction)
        self._save(transactions)
        logger.debug("Added transaction %s", transaction.id)

    def update(self, transaction: Transaction) -> bool:
        """Replace the stored transaction with the same id.

        Args:
            transaction: Transaction carrying the new field values.

        Returns:
            True if a transaction was replaced, False if the id was unknown.
        """
        transactions = self._load()
        for i, existing in enumerate(transactions):
            if existing.id == transaction.id:
                transactions[i] = transaction
                self._save(transactions)
                logger.debug("Updated transaction %s", transaction.id)
                return True

        logger.debug("Update skipped, no transaction %s", transaction.id)
        return False

    def delete(self, txn_id: str) -> bool:
        """Remove the transaction with the given id.

        Returns:
            True if a transaction was removed, False if the id was unknown.
        """
        transactions = self._load()
        remaining = [txn for txn in transactions if txn.id != txn_id]
        if len(remaining) == len(transactions):
            logger.debug("Delete skipped, no transaction %s", txn_id)
            return False

        self._save(remaining)
        logger.debug("Deleted transaction %s", txn_id)
        return True

    def list_by_date_range(self, start_date: str, end_date: str) -> list[Transaction]:
        """Transactions dated within [start_date, end_date], both inclusive.

        Args:
            start_date: First day to include (YYYY-MM-DD).
            end_date: Last day to include (YYYY-MM-DD).

        Returns:
            Matching transactions in stored order.
        """
        return [txn for txn in self._load() if in_date_range(txn.date, start_date, end_date)]
