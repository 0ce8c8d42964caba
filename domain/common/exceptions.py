"""Business exceptions shared by the domain, application and infrastructure layers.

The core layer only maps these to HTTP responses; nothing here imports core.
"""
from __future__ import annotations

from typing import Optional

from shared.codes import BusinessCode
from shared.codes.payment_codes import PaymentCode


class BusinessException(Exception):
    """Base class for every expected, client-reportable failure."""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)


class InvalidAmountException(BusinessException):
    def __init__(self, *, min_amount_minor: int, currency: str, amount: object = None):
        minimum = f"{min_amount_minor / 100:.2f} {currency.upper()}"
        super().__init__(
            code=PaymentCode.INVALID_AMOUNT,
            message=f"The minimum amount is {minimum}",
            error_type="InvalidAmount",
            details={"amount": amount, "min_amount_minor": min_amount_minor, "currency": currency},
            field="amount",
        )


class OrderDataMissingException(BusinessException):
    def __init__(self):
        super().__init__(
            code=BusinessCode.PARAM_MISSING,
            message="Order data is missing",
            error_type="OrderDataMissing",
            field="orderData",
        )

