"""Tests for entry input validation."""

from decimal import Decimal

import pytest

from fintrack.domain.errors import ValidationError
from fintrack.domain.models import EntryKind
from fintrack.domain.services.validation import (
    categories_for,
    coerce_category,
    validate_entry_input,
)


def test_validate_entry_input_builds_normalized_draft() -> None:
    draft = validate_entry_input(
        EntryKind.ASSET,
        name="  Savings  ",
        category="savings_account",
        value="1234.567",
        currency="EUR",
        comments="   ",
    )

    assert draft.name == "Savings"
    assert draft.category == "savings_account"
    assert draft.value == Decimal("1234.57")
    assert draft.currency == "EUR"
    assert draft.comments is None


def test_validate_entry_input_collects_every_error() -> None:
    """All invalid fields are reported together."""
    with pytest.raises(ValidationError) as excinfo:
        validate_entry_input(
            EntryKind.DEBT,
            name="",
            category="vehicle",
            value="abc",
            currency="GBP",
        )

    assert excinfo.value.errors == {
        "name": "Debt name is required",
        "category": "Please select a category",
        "value": "Value must be a number",
        "currency": "Please select a currency",
    }
    assert "name: Debt name is required" in str(excinfo.value)


@pytest.mark.parametrize(
    "value", ["0", "-5", 0, Decimal("-0.01"), "0.004", "-1e30"]
)
def test_validate_entry_input_requires_positive_value(value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_entry_input(
            EntryKind.ASSET,
            name="Cash",
            category="cash",
            value=value,
            currency="USD",
        )

    assert excinfo.value.errors == {"value": "Value must be greater than 0"}


@pytest.mark.parametrize(
    "value", ["1e30", "1000000000000", "999999999999.995"]
)
def test_validate_entry_input_rejects_values_beyond_column_precision(
    value,
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_entry_input(
            EntryKind.ASSET,
            name="Cash",
            category="cash",
            value=value,
            currency="USD",
        )

    assert excinfo.value.errors == {
        "value": "Value must be less than 1,000,000,000,000"
    }


def test_validate_entry_input_keeps_largest_storable_value() -> None:
    draft = validate_entry_input(
        EntryKind.ASSET,
        name="Cash",
        category="cash",
        value="999999999999.994",
        currency="USD",
    )

    assert draft.value == Decimal("999999999999.99")


def test_validate_entry_input_rounds_small_value_up_to_a_cent() -> None:
    draft = validate_entry_input(
        EntryKind.ASSET,
        name="Cash",
        category="cash",
        value="0.005",
        currency="USD",
    )

    assert draft.value == Decimal("0.01")


@pytest.mark.parametrize("value", [None, "", True, "NaN", "12,5"])
def test_validate_entry_input_rejects_non_numbers(value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_entry_input(
            EntryKind.ASSET,
            name="Cash",
            category="cash",
            value=value,
            currency="USD",
        )

    assert "value" in excinfo.value.errors


def test_validate_entry_input_limits_name_length() -> None:
    validate_entry_input(
        EntryKind.ASSET,
        name="x" * 100,
        category="cash",
        value=1,
        currency="USD",
    )

    with pytest.raises(ValidationError) as excinfo:
        validate_entry_input(
            EntryKind.ASSET,
            name="x" * 101,
            category="cash",
            value=1,
            currency="USD",
        )

    assert excinfo.value.errors["name"] == (
        "Asset name must be less than 100 characters"
    )


def test_validate_entry_input_accepts_custom_currencies() -> None:
    draft = validate_entry_input(
        EntryKind.DEBT,
        name="Card",
        category="credit_card",
        value=Decimal("12.5"),
        currency="GBP",
        currencies=["GBP"],
    )

    assert draft.value == Decimal("12.50")


def test_categories_for_each_kind() -> None:
    assert "real_estate" in categories_for(EntryKind.ASSET)
    assert "mortgage" in categories_for(EntryKind.DEBT)
    assert "mortgage" not in categories_for(EntryKind.ASSET)
    assert categories_for(EntryKind.ASSET)[-1] == "other"
    assert categories_for(EntryKind.DEBT)[-1] == "other"


def test_coerce_category_falls_back_to_other() -> None:
    assert coerce_category("vehicle", EntryKind.ASSET) == "vehicle"
    assert coerce_category("vehicle", EntryKind.DEBT) == "other"
    assert coerce_category(None, EntryKind.ASSET) == "other"
    assert coerce_category("", EntryKind.DEBT) == "other"
