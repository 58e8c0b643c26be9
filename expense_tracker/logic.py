import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

REQUIRED_MESSAGE = "date, category, and amount are required"
NOT_A_NUMBER_MESSAGE = "amount must be a number"


class ValidationError(ValueError):
    pass


@dataclass(frozen=True)
class AmountResult:
    value: float
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _invalid() -> AmountResult:
    return AmountResult(math.nan, NOT_A_NUMBER_MESSAGE)


def parse_amount(raw: Any) -> AmountResult:
    if raw is None:
        return AmountResult(0.0)
    if isinstance(raw, bool):
        return AmountResult(float(raw))
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return AmountResult(0.0)
        if "_" in raw:
            return _invalid()
    elif not isinstance(raw, (int, float)):
        return _invalid()
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        return _invalid()
    if not math.isfinite(value):
        return _invalid()
    return AmountResult(value)


def coerce_amount(raw: Any) -> float:
    """Lenient form of ``parse_amount``: NaN instead of an error."""
    return parse_amount(raw).value


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return not value


def validate_new_transaction(payload: Any) -> dict:
    """Check a create request body and return its fields.

    ``date`` and ``category`` must be non-blank: a value made only of
    whitespace is rejected even though it is a non-empty string. ``amount``
    only counts as missing when the key is absent, so ``0`` and ``null`` are
    accepted. ``payee`` and ``notes`` default to empty strings.
    """
    if not isinstance(payload, Mapping):
        payload = {}
    date = payload.get("date")
    category = payload.get("category")
    if _is_blank(date) or _is_blank(category) or "amount" not in payload:
        raise ValidationError(REQUIRED_MESSAGE)

    amount = parse_amount(payload["amount"])
    if not amount.ok:
        raise ValidationError(amount.error)

    return {
        "date": date,
        "category": category,
        "payee": payload.get("payee") or "",
        "amount": amount.value,
        "notes": payload.get("notes") or "",
    }
