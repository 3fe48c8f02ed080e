"""Pure functions for statement calculations and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no storage, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Totals are recomputed from the transactions every time; nothing is cached.
"""

from dataclasses import dataclass
from typing import Iterable

from tally.domain.filters import TransactionFilter, filter_transactions
from tally.domain.models import IsoDate
from tally.domain.transactions import Transaction, signed_amount


@dataclass(frozen=True)
class Totals:
    """Immutable income/expense totals."""

    income: float
    expense: float
    balance: float


@dataclass(frozen=True)
class Statement:
    """Immutable statement: filtered transactions over a date range with totals."""

    start_date: IsoDate
    end_date: IsoDate
    filter: TransactionFilter
    transactions: list[Transaction]
    totals: Totals


def total_income(transactions: Iterable[Transaction]) -> float:
    """Sum of amounts over income transactions."""
    return sum(txn.amount for txn in transactions if txn.type == "income")


def total_expense(transactions: Iterable[Transaction]) -> float:
    """Sum of amounts over expense transactions."""
    return sum(txn.amount for txn in transactions if txn.type == "expense")


def calculate_totals(transactions: Iterable[Transaction]) -> Totals:
    """Calculate income, expense and balance for a set of transactions.

    Args:
        transactions: Transactions to aggregate (usually already filtered).

    Returns:
        Totals where balance = income - expense.
    """
    txns = list(transactions)
    income = total_income(txns)
    expense = total_expense(txns)
    return Totals(income=income, expense=expense, balance=sum(signed_amount(txn) for txn in txns))


def create_statement(
    transactions: Iterable[Transaction],
    start_date: IsoDate,
    end_date: IsoDate,
    criteria: TransactionFilter | None = None,
) -> Statement:
    """Create a statement for a date range.

    The date range always applies; any dates on the filter itself are
    replaced by the statement range.

    Args:
        transactions: Full transaction list.
        start_date: Inclusive start date.
        end_date: Inclusive end date.
        criteria: Optional type/category/payee filter.

    Returns:
        Statement with the selected transactions and their totals.
    """
    criteria = criteria or TransactionFilter()
    ranged = TransactionFilter(
        type=criteria.type,
        category=criteria.category,
        payee=criteria.payee,
        start_date=start_date,
        end_date=end_date,
    )
    selected = filter_transactions(transactions, ranged)

    return Statement(
        start_date=start_date,
        end_date=end_date,
        filter=ranged,
        transactions=selected,
        totals=calculate_totals(selected),
    )


def statement_period(transactions: list[Transaction]) -> tuple[IsoDate, IsoDate] | None:
    """First and last dates of a statement's transactions, in list order.

    Returns:
        Tuple of (first_date, last_date), or None if there are no transactions.
    """
    if not transactions:
        return None
    return transactions[0].date, transactions[-1].date


def describe_filter(criteria: TransactionFilter) -> str:
    """Summarize the type/category/payee constraints of a filter.

    Returns:
        Summary such as "Type: expense | All Categories | All People".
    """
    parts = [
        f"Type: {criteria.type}" if criteria.type else "All Types",
        f"Category: {criteria.category}" if criteria.category else "All Categories",
        f"Person: {criteria.payee}" if criteria.payee else "All People",
    ]
    return " | ".join(parts)
