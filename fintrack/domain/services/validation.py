"""Validation of entry form input."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from fintrack.domain.constants import (
    ASSET_CATEGORIES,
    AVAILABLE_CURRENCIES,
    DEBT_CATEGORIES,
    ENTRY_NAME_MAX_LENGTH,
    ENTRY_VALUE_LIMIT,
    FALLBACK_CATEGORY,
)
from fintrack.domain.errors import ValidationError
from fintrack.domain.models import EntryDraft, EntryKind
from fintrack.utils.decimal_utils import round_money

_VALUE_TOO_LARGE = f"Value must be less than {ENTRY_VALUE_LIMIT:,}"


def categories_for(kind: EntryKind) -> tuple[str, ...]:
    """Return the allowed categories for an entry kind."""
    if kind is EntryKind.ASSET:
        return ASSET_CATEGORIES
    return DEBT_CATEGORIES


def coerce_category(category: str | None, kind: EntryKind) -> str:
    """Return ``category`` if allowed for ``kind``, else the fallback."""
    if not category or category not in categories_for(kind):
        return FALLBACK_CATEGORY
    return category


def validate_entry_input(
    kind: EntryKind,
    *,
    name: str | None,
    category: str | None,
    value,
    currency: str | None,
    comments: str | None = None,
    currencies: Iterable[str] | None = None,
) -> EntryDraft:
    """Validate raw form fields and build an entry draft.

    Args:
        kind: Whether the entry is an asset or a debt.
        name: Entry name, required, at most 100 characters.
        category: Category code from the kind's category set.
        value: Amount; must parse as a number that rounds to more
            than zero cents and stays below one trillion.
        currency: Currency code from the supported set.
        comments: Optional notes; blank becomes None.
        currencies: Optional override of the supported currency codes.

    Returns:
        EntryDraft: Normalized fields with the value rounded to cents.

    Raises:
        ValidationError: If any field is invalid.
    """
    errors: dict[str, str] = {}
    allowed_currencies = tuple(
        currencies or (item.code for item in AVAILABLE_CURRENCIES)
    )

    cleaned_name = (name or "").strip()
    if not cleaned_name:
        errors["name"] = f"{kind.label} name is required"
    elif len(cleaned_name) > ENTRY_NAME_MAX_LENGTH:
        errors["name"] = (
            f"{kind.label} name must be less than "
            f"{ENTRY_NAME_MAX_LENGTH} characters"
        )

    if category not in categories_for(kind):
        errors["category"] = "Please select a category"

    amount = _parse_amount(value)
    if amount is None:
        errors["value"] = "Value must be a number"
    elif amount <= 0:
        errors["value"] = "Value must be greater than 0"
    elif amount >= ENTRY_VALUE_LIMIT:
        errors["value"] = _VALUE_TOO_LARGE
    else:
        amount = round_money(amount)
        if amount <= 0:
            errors["value"] = "Value must be greater than 0"
        elif amount >= ENTRY_VALUE_LIMIT:
            errors["value"] = _VALUE_TOO_LARGE

    if currency not in allowed_currencies:
        errors["currency"] = "Please select a currency"

    if errors:
        raise ValidationError(errors)

    cleaned_comments = (comments or "").strip() or None
    return EntryDraft(
        name=cleaned_name,
        category=category,
        value=amount,
        currency=currency,
        comments=cleaned_comments,
    )


def _parse_amount(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


__all__ = ["categories_for", "coerce_category", "validate_entry_input"]
