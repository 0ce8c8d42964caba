"""
Amount validation for payment requests.

Amounts arrive in minor units (cents) but may carry a fractional part from
client-side arithmetic. They are rounded half-up to an integer and checked
against the gateway's minimum chargeable amount before anything is sent.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from domain.common.exceptions import InvalidAmountException


MIN_AMOUNT_MINOR = 50

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class ValidatedAmount:
    minor_units: int
    currency: str


def round_minor_units(amount: Number) -> int:
    """Round a minor-unit amount half-up to the nearest integer."""
    return int(Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP))


def validate_amount(
    amount: Optional[Number],
    currency: str,
    *,
    min_amount_minor: int = MIN_AMOUNT_MINOR,
) -> ValidatedAmount:
    """Return the rounded amount, or raise InvalidAmountException.

    Absent, non-finite and below-minimum amounts are rejected; the minimum is
    checked against the rounded value.
    """
    currency = (currency or "").lower()
    if amount is None or isinstance(amount, bool):
        raise InvalidAmountException(min_amount_minor=min_amount_minor, currency=currency, amount=amount)
    if isinstance(amount, float) and not math.isfinite(amount):
        raise InvalidAmountException(min_amount_minor=min_amount_minor, currency=currency, amount=str(amount))

    try:
        minor_units = round_minor_units(amount)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountException(
            min_amount_minor=min_amount_minor, currency=currency, amount=str(amount)
        ) from exc

    if minor_units < min_amount_minor:
        raise InvalidAmountException(min_amount_minor=min_amount_minor, currency=currency, amount=amount)
    return ValidatedAmount(minor_units=minor_units, currency=currency)
