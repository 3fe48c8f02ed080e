"""Tests for tally.domain.transactions pure functions."""

import pytest

from tally.domain.transactions import (
    Transaction,
    create_transaction,
    format_money_display,
    from_record,
    replace_fields,
    signed_amount,
    to_record,
    validate_category_name,
    validate_transaction,
    validate_transaction_fields,
)


def make_transaction(**overrides) -> Transaction:
    fields = {
        "date": "2025-01-15",
        "amount": 12.5,
        "type": "expense",
        "category": "Food",
        "payee": "Corner Shop",
        "reason": "Groceries",
        "description": "",
    }
    fields.update(overrides)
    return create_transaction(**fields)


class TestCreateTransaction:
    """Tests for create_transaction."""

    def test_assigns_unique_ids(self) -> None:
        """Should give every new transaction a different id."""
        first = make_transaction()
        second = make_transaction()

        assert first.id
        assert first.id != second.id

    def test_keeps_fields(self) -> None:
        """Should keep all supplied fields."""
        txn = make_transaction(description="Weekly shop")

        assert txn.date == "2025-01-15"
        assert txn.amount == 12.5
        assert txn.type == "expense"
        assert txn.category == "Food"
        assert txn.payee == "Corner Shop"
        assert txn.reason == "Groceries"
        assert txn.description == "Weekly shop"

    def test_amount_coerced_to_float(self) -> None:
        """Should store integer amounts as floats."""
        txn = make_transaction(amount=10)

        assert isinstance(txn.amount, float)


class TestReplaceFields:
    """Tests for replace_fields."""

    def test_replaces_all_given_fields_and_keeps_id(self) -> None:
        """Should replace every non-id field."""
        txn = make_transaction()
        updated = replace_fields(
            txn,
            date="2025-02-01",
            amount=99,
            type="income",
            category="Salary",
            payee="Employer",
            reason="Pay",
            description="February",
        )

        assert updated.id == txn.id
        assert updated.date == "2025-02-01"
        assert updated.amount == 99.0
        assert updated.type == "income"
        assert updated.category == "Salary"
        assert updated.payee == "Employer"
        assert updated.reason == "Pay"
        assert updated.description == "February"

    def test_none_values_keep_existing(self) -> None:
        """Should ignore None values."""
        txn = make_transaction()
        updated = replace_fields(txn, amount=None, reason="Snacks")

        assert updated.amount == txn.amount
        assert updated.reason == "Snacks"

    def test_id_cannot_change(self) -> None:
        """Should refuse to change the id."""
        with pytest.raises(ValueError):
            replace_fields(make_transaction(), id="other")


class TestRecords:
    """Tests for to_record and from_record."""

    def test_record_layout(self) -> None:
        """Should produce the stored JSON keys."""
        record = to_record(make_transaction())

        assert set(record) == {"id", "date", "amount", "description", "category", "payee", "type", "reason"}

    def test_missing_description_defaults_to_empty(self) -> None:
        """Should tolerate records without a description."""
        record = {
            "id": "abc",
            "date": "2025-01-15",
            "amount": "20",
            "category": "Rent",
            "payee": "Landlord",
            "type": "expense",
            "reason": "January rent",
        }

        txn = from_record(record)

        assert txn.description == ""
        assert txn.amount == 20.0

    def test_from_record_rejects_missing_id(self) -> None:
        """Should raise KeyError when required keys are absent."""
        with pytest.raises(KeyError):
            from_record({"date": "2025-01-15", "amount": 1, "type": "income"})

    def test_from_record_rejects_non_finite_amount(self) -> None:
        """Should refuse a stored NaN amount."""
        with pytest.raises(ValueError):
            from_record({"id": "x", "date": "2025-01-15", "amount": float("nan"), "type": "income"})

    def test_from_record_rejects_unknown_type(self) -> None:
        """Should refuse types other than expense and income."""
        with pytest.raises(ValueError):
            from_record({"id": "x", "date": "2025-01-15", "amount": 1, "type": "transfer"})


class TestValidateTransactionFields:
    """Tests for validate_transaction_fields."""

    def test_valid_fields(self) -> None:
        """Should return no errors for complete input."""
        errors = validate_transaction_fields("2025-01-15", 10.0, "income", "Salary", "Employer", "Pay")

        assert errors == []

    def test_zero_amount_rejected(self) -> None:
        """Should reject a zero amount."""
        errors = validate_transaction_fields("2025-01-15", 0, "expense", "Food", "Shop", "Lunch")

        assert errors == ["Amount must be greater than 0"]

    def test_negative_amount_rejected(self) -> None:
        """Should reject negative amounts."""
        errors = validate_transaction_fields("2025-01-15", -5, "expense", "Food", "Shop", "Lunch")

        assert "Amount must be greater than 0" in errors

    def test_non_finite_amount_rejected(self) -> None:
        """Should reject NaN and infinite amounts."""
        for amount in (float("nan"), float("inf"), float("-inf")):
            errors = validate_transaction_fields("2025-01-15", amount, "expense", "Food", "Shop", "Lunch")

            assert errors == ["Amount must be greater than 0"]

    def test_missing_amount(self) -> None:
        """Should require an amount."""
        errors = validate_transaction_fields("2025-01-15", None, "expense", "Food", "Shop", "Lunch")

        assert "Amount is required" in errors

    def test_blank_required_fields(self) -> None:
        """Should report each missing required field."""
        errors = validate_transaction_fields("", 5, "expense", " ", None, "")

        assert "Date is required" in errors
        assert "Category is required" in errors
        assert "Person name is required" in errors
        assert "Reason is required" in errors

    def test_unknown_type(self) -> None:
        """Should reject types outside expense/income."""
        errors = validate_transaction_fields("2025-01-15", 5, "transfer", "Food", "Shop", "Lunch")

        assert errors == ["Type must be 'expense' or 'income'"]

    def test_validate_built_transaction(self) -> None:
        """Should validate an existing transaction the same way."""
        assert validate_transaction(make_transaction()) == []
        assert validate_transaction(make_transaction(amount=0)) == ["Amount must be greater than 0"]


class TestValidateCategoryName:
    """Tests for validate_category_name."""

    def test_empty_name(self) -> None:
        """Should reject empty names."""
        assert validate_category_name("", []) == "Category name cannot be empty"

    def test_duplicate_is_case_sensitive(self) -> None:
        """Should only reject exact duplicates."""
        assert validate_category_name("Food", ["Food"]) == "Category already exists"
        assert validate_category_name("food", ["Food"]) is None


class TestAmounts:
    """Tests for signed_amount and format_money_display."""

    def test_signed_amount(self) -> None:
        """Should be negative for expenses and positive for income."""
        assert signed_amount(make_transaction(amount=30)) == -30
        assert signed_amount(make_transaction(amount=30, type="income")) == 30

    def test_format_money_display(self) -> None:
        """Should show direction and thousands separators."""
        assert format_money_display(make_transaction(amount=1234.5)) == "- $1,234.50"
        assert format_money_display(make_transaction(amount=5, type="income"), "£") == "+ £5.00"
        assert format_money_display(make_transaction(amount=5), include_sign=False) == "$5.00"
