"""
Exceptions for payment providers mapped to unified BusinessException variants.
"""
from __future__ import annotations

from typing import Optional

from domain.common.exceptions import BusinessException
from shared.codes.payment_codes import PaymentCode


class PaymentGatewayError(BusinessException):
    """The gateway failed or rejected a request; carries its message for diagnosis."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        provider_code: str | None = None,
        details: Optional[dict] = None,
        code: int = PaymentCode.PROVIDER_ERROR,
    ):
        full_details = {"provider": provider, "provider_code": provider_code, "provider_message": message}
        if details:
            full_details.update(details)
        super().__init__(
            code=code,
            message="Failed to create the payment",
            error_type="GatewayError",
            details=full_details,
        )
        self.provider_message = message


class WebhookAuthenticationError(BusinessException):
    def __init__(self, message: str, *, provider: str, details: Optional[dict] = None):
        full_details = {"provider": provider, "reason": message}
        if details:
            full_details.update(details)
        super().__init__(
            code=PaymentCode.SIGNATURE_ERROR,
            message=f"Webhook Error: {message}",
            error_type="AuthenticationFailed",
            details=full_details,
        )


class WebhookPayloadError(BusinessException):
    """Signature verified, but the body is not a usable event."""

    def __init__(self, message: str, *, provider: str):
        super().__init__(
            code=PaymentCode.WEBHOOK_PAYLOAD_INVALID,
            message=f"Webhook payload invalid: {message}",
            error_type="WebhookPayloadInvalid",
            details={"provider": provider, "reason": message},
        )
