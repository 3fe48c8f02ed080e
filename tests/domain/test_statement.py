"""Tests for tally.domain.statement pure functions."""

from tally.domain.filters import TransactionFilter
from tally.domain.models import IsoDate
from tally.domain.statement import (
    Totals,
    calculate_totals,
    create_statement,
    describe_filter,
    statement_period,
)
from tally.domain.transactions import Transaction, create_transaction


def txn(date: str, type: str, amount: float, category: str = "Other", payee: str = "Someone") -> Transaction:
    return create_transaction(
        date=date, amount=amount, type=type, category=category, payee=payee, reason="test"  # type: ignore[arg-type]
    )


class TestCalculateTotals:
    """Tests for calculate_totals."""

    def test_income_expense_balance(self) -> None:
        """Should sum income and expense separately."""
        transactions = [
            txn("2025-01-01", "income", 100),
            txn("2025-01-02", "income", 50),
            txn("2025-01-03", "expense", 30),
        ]

        assert calculate_totals(transactions) == Totals(income=150, expense=30, balance=120)

    def test_negative_balance(self) -> None:
        """Should allow balance below zero."""
        totals = calculate_totals([txn("2025-01-01", "expense", 40), txn("2025-01-02", "income", 10)])

        assert totals.balance == -30

    def test_empty(self) -> None:
        """Should be zero for no transactions."""
        assert calculate_totals([]) == Totals(income=0, expense=0, balance=0)

    def test_accepts_generator(self) -> None:
        """Should consume any iterable once."""
        totals = calculate_totals(t for t in [txn("2025-01-01", "income", 5)])

        assert totals == Totals(income=5, expense=0, balance=5)


class TestCreateStatement:
    """Tests for create_statement."""

    def test_applies_range_and_filter(self) -> None:
        """Should select by range and filter, then total the selection."""
        transactions = [
            txn("2024-12-31", "expense", 999, "Food"),
            txn("2025-01-01", "expense", 20, "Food"),
            txn("2025-01-10", "expense", 5, "Rent"),
            txn("2025-01-31", "expense", 30, "Food"),
            txn("2025-02-01", "expense", 999, "Food"),
        ]

        statement = create_statement(
            transactions, IsoDate("2025-01-01"), IsoDate("2025-01-31"), TransactionFilter(category="Food")
        )

        assert [t.amount for t in statement.transactions] == [20, 30]
        assert statement.totals == Totals(income=0, expense=50, balance=-50)
        assert statement.filter.start_date == "2025-01-01"
        assert statement.filter.end_date == "2025-01-31"

    def test_statement_range_overrides_filter_dates(self) -> None:
        """Should use the statement range instead of filter dates."""
        transactions = [txn("2025-01-15", "income", 10)]
        criteria = TransactionFilter(start_date="2030-01-01")

        statement = create_statement(transactions, IsoDate("2025-01-01"), IsoDate("2025-01-31"), criteria)

        assert statement.transactions == transactions


class TestStatementHelpers:
    """Tests for statement_period and describe_filter."""

    def test_period_uses_first_and_last(self) -> None:
        """Should report the dates of the first and last transactions."""
        transactions = [txn("2025-01-05", "income", 1), txn("2025-01-02", "income", 1)]

        assert statement_period(transactions) == ("2025-01-05", "2025-01-02")

    def test_period_empty(self) -> None:
        """Should return None for no transactions."""
        assert statement_period([]) is None

    def test_describe_empty_filter(self) -> None:
        """Should describe an empty filter as all values."""
        assert describe_filter(TransactionFilter()) == "All Types | All Categories | All People"

    def test_describe_populated_filter(self) -> None:
        """Should name each populated field."""
        criteria = TransactionFilter(type="expense", category="Food", payee="Bob")

        assert describe_filter(criteria) == "Type: expense | Category: Food | Person: Bob"
