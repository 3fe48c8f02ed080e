"""Pure functions for selecting transactions.

All filters are stable: the input order is preserved in the output.
"""

from dataclasses import dataclass, fields
from typing import Iterable

from tally.dates import to_date
from tally.domain.models import CategoryName, Payee
from tally.domain.transactions import Transaction


@dataclass(frozen=True)
class TransactionFilter:
    """Optional constraints on a transaction list.

    A field left as None (or empty string) places no constraint on that
    dimension. Populated fields are combined with AND.
    """

    type: str | None = None
    category: str | None = None
    payee: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


def in_date_range(value: str, start_date: str | None, end_date: str | None) -> bool:
    """Check whether a date falls within inclusive calendar-day bounds.

    Args:
        value: Date to check (YYYY-MM-DD).
        start_date: Inclusive lower bound, or None for unbounded.
        end_date: Inclusive upper bound, or None for unbounded.

    Returns:
        True if start_date <= value <= end_date. A value that is not a
        valid date never falls inside a bounded range.
    """
    if not start_date and not end_date:
        return True

    try:
        day = to_date(value)
    except ValueError:
        return False

    if start_date and day < to_date(start_date):
        return False
    if end_date and day > to_date(end_date):
        return False
    return True


def matches_filter(transaction: Transaction, criteria: TransactionFilter) -> bool:
    """Check whether a transaction satisfies every populated filter field."""
    if criteria.type and transaction.type != criteria.type:
        return False
    if criteria.category and transaction.category != criteria.category:
        return False
    if criteria.payee and transaction.payee != criteria.payee:
        return False
    return in_date_range(transaction.date, criteria.start_date, criteria.end_date)


def filter_transactions(transactions: Iterable[Transaction], criteria: TransactionFilter) -> list[Transaction]:
    """Select the transactions matching a filter.

    Args:
        transactions: Transactions to filter.
        criteria: Filter specification.

    Returns:
        Matching transactions in their original order.
    """
    return [txn for txn in transactions if matches_filter(txn, criteria)]


def _distinct(values: Iterable[str]) -> list[str]:
    # dict preserves insertion order, giving first-seen order
    return list(dict.fromkeys(values))


def distinct_payees(transactions: Iterable[Transaction]) -> list[Payee]:
    """Distinct payees in first-seen order."""
    return [Payee(p) for p in _distinct(txn.payee for txn in transactions)]


def distinct_categories(transactions: Iterable[Transaction]) -> list[CategoryName]:
    """Distinct categories in first-seen order."""
    return [CategoryName(c) for c in _distinct(txn.category for txn in transactions)]
