import math

import pytest

from expense_tracker.logic import (
    ValidationError,
    coerce_amount,
    parse_amount,
    validate_new_transaction,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("0", 0),
        ("-10.5", -10.5),
        (" 12 ", 12),
        ("", 0),
        (None, 0),
        (3, 3),
        (2.5, 2.5),
        (True, 1),
    ],
)
def test_parse_amount_ok(raw, expected):
    result = parse_amount(raw)
    assert result.ok
    assert result.value == expected


@pytest.mark.parametrize("raw", ["abc", "1_000", "nan", "inf", [], {}, float("inf")])
def test_parse_amount_bad(raw):
    result = parse_amount(raw)
    assert not result.ok
    assert result.error == "amount must be a number"
    assert math.isnan(result.value)


def test_coerce_amount_returns_nan_on_failure():
    assert math.isnan(coerce_amount("12abc"))
    assert coerce_amount("7") == 7


def test_validate_new_transaction_defaults_optional_fields():
    fields = validate_new_transaction(
        {"date": "2025-01-01", "category": "Food", "amount": "-4.25"}
    )
    assert fields == {
        "date": "2025-01-01",
        "category": "Food",
        "payee": "",
        "amount": -4.25,
        "notes": "",
    }


@pytest.mark.parametrize("amount", [0, None])
def test_validate_new_transaction_present_falsy_amount_is_zero(amount):
    fields = validate_new_transaction(
        {"date": "2025-01-01", "category": "Food", "amount": amount}
    )
    assert fields["amount"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2025-01-01", "category": "Food"},
        {"category": "Food", "amount": 1},
        {"date": "2025-01-01", "category": "", "amount": 1},
        {"date": "2025-01-01", "category": "   ", "amount": 1},
        {"date": " \t ", "category": "Food", "amount": 1},
        [],
        None,
        "date=2025-01-01",
    ],
)
def test_validate_new_transaction_missing_fields(payload):
    with pytest.raises(ValidationError, match="date, category, and amount are required"):
        validate_new_transaction(payload)


def test_validate_new_transaction_non_numeric_amount():
    with pytest.raises(ValidationError, match="amount must be a number"):
        validate_new_transaction(
            {"date": "2025-01-01", "category": "Food", "amount": "abc"}
        )
