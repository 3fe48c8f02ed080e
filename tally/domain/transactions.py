"""Pure functions for transaction records and validation.

This module contains the functional core for transaction operations:
- No I/O operations (no storage, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Amounts are always positive; the direction is carried by the transaction type.
"""

import math
import uuid
from dataclasses import dataclass, replace
from typing import Any, TypedDict

from tally.domain.models import (
    TRANSACTION_TYPES,
    CategoryName,
    IsoDate,
    Payee,
    TransactionId,
    TransactionType,
)


class TransactionRecord(TypedDict):
    """Stored JSON layout of a transaction."""

    id: str
    date: str
    amount: float
    description: str
    category: str
    payee: str
    type: str
    reason: str


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction data."""

    id: TransactionId
    date: IsoDate
    amount: float
    type: TransactionType
    category: CategoryName
    payee: Payee
    reason: str
    description: str = ""


def new_transaction_id() -> TransactionId:
    """Generate a fresh transaction id."""
    return TransactionId(str(uuid.uuid4()))


def create_transaction(
    date: str,
    amount: float,
    type: TransactionType,
    category: str,
    payee: str,
    reason: str,
    description: str = "",
) -> Transaction:
    """Create a new transaction with a freshly assigned id.

    Args:
        date: Transaction date (YYYY-MM-DD).
        amount: Positive amount.
        type: "expense" or "income".
        category: Category label.
        payee: Counterparty.
        reason: Short reason for the transaction.
        description: Optional longer note.

    Returns:
        New Transaction.
    """
    return Transaction(
        id=new_transaction_id(),
        date=IsoDate(date),
        amount=float(amount),
        type=type,
        category=CategoryName(category),
        payee=Payee(payee),
        reason=reason,
        description=description,
    )


def replace_fields(transaction: Transaction, **changes: Any) -> Transaction:
    """Return a copy of a transaction with the given fields replaced.

    The id is never replaced.

    Args:
        transaction: Original transaction.
        **changes: Field values to replace. None values are ignored.

    Returns:
        Updated Transaction with the same id.

    Raises:
        ValueError: If an attempt is made to change the id.
    """
    if "id" in changes:
        raise ValueError("Transaction id cannot be changed")
    updates = {key: value for key, value in changes.items() if value is not None}
    if "amount" in updates:
        updates["amount"] = float(updates["amount"])
    return replace(transaction, **updates)


def to_record(transaction: Transaction) -> TransactionRecord:
    """Convert a transaction to its stored JSON layout."""
    return TransactionRecord(
        id=transaction.id,
        date=transaction.date,
        amount=transaction.amount,
        description=transaction.description,
        category=transaction.category,
        payee=transaction.payee,
        type=transaction.type,
        reason=transaction.reason,
    )


def from_record(record: dict[str, Any]) -> Transaction:
    """Build a transaction from its stored JSON layout.

    Args:
        record: Stored transaction object.

    Returns:
        Transaction.

    Raises:
        KeyError: If a required key is missing.
        TypeError: If the record is not a JSON object.
        ValueError: If the amount is not a finite number or the type is unknown.
    """
    amount = float(record["amount"])
    if not math.isfinite(amount):
        raise ValueError(f"Amount is not a finite number: {record['amount']!r}")
    if record["type"] not in TRANSACTION_TYPES:
        raise ValueError(f"Unknown transaction type: {record['type']!r}")

    return Transaction(
        id=TransactionId(str(record["id"])),
        date=IsoDate(record["date"]),
        amount=amount,
        type=record["type"],
        category=CategoryName(record.get("category", "")),
        payee=Payee(record.get("payee", "")),
        reason=record.get("reason", ""),
        description=record.get("description") or "",
    )


def signed_amount(transaction: Transaction) -> float:
    """Amount with sign applied: positive for income, negative for expense."""
    if transaction.type == "income":
        return transaction.amount
    return -transaction.amount


def validate_transaction_fields(
    date: str | None,
    amount: float | None,
    type: str | None,
    category: str | None,
    payee: str | None,
    reason: str | None,
) -> list[str]:
    """Validate user-supplied transaction fields.

    Description is optional and therefore not checked.

    Args:
        date: Transaction date (YYYY-MM-DD).
        amount: Amount entered.
        type: Transaction type.
        category: Category label.
        payee: Counterparty.
        reason: Reason for the transaction.

    Returns:
        List of error messages. Empty if the fields are valid.
    """
    errors = []

    if type not in TRANSACTION_TYPES:
        errors.append("Type must be 'expense' or 'income'")
    if not date or not date.strip():
        errors.append("Date is required")
    if amount is None:
        errors.append("Amount is required")
    elif not math.isfinite(amount) or amount <= 0:
        errors.append("Amount must be greater than 0")
    if not category or not category.strip():
        errors.append("Category is required")
    if not payee or not payee.strip():
        errors.append("Person name is required")
    if not reason or not reason.strip():
        errors.append("Reason is required")

    return errors


def validate_transaction(transaction: Transaction) -> list[str]:
    """Validate an already built transaction."""
    return validate_transaction_fields(
        transaction.date,
        transaction.amount,
        transaction.type,
        transaction.category,
        transaction.payee,
        transaction.reason,
    )


def validate_category_name(name: str, existing: list[CategoryName]) -> str | None:
    """Validate a category name before adding it.

    Args:
        name: Proposed category name (already trimmed).
        existing: Current category list.

    Returns:
        Error message, or None if the name can be added.
    """
    if not name:
        return "Category name cannot be empty"
    if name in existing:
        return "Category already exists"
    return None


def format_money_display(transaction: Transaction, currency: str = "$", include_sign: bool = True) -> str:
    """Format a transaction amount for display.

    Args:
        transaction: Transaction to format.
        currency: Currency symbol.
        include_sign: Whether to include + or - sign.

    Returns:
        Formatted string (e.g., "- $123.45" or "$123.45").
    """
    formatted = f"{currency}{transaction.amount:,.2f}"

    if not include_sign:
        return formatted
    if transaction.type == "expense":
        return f"- {formatted}"
    return f"+ {formatted}"


def type_label(type: TransactionType) -> str:
    """Human-readable label for a transaction type."""
    return "Money Out" if type == "expense" else "Money In"
