"""
Payment gateway port (application/ports) exposing a replaceable protocol.

Application depends on this Protocol; infrastructure implements adapters.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from application.dtos.payments import PaymentIntent
from domain.payment.events import WebhookEvent


@runtime_checkable
class PaymentGateway(Protocol):
    """Gateway protocol for third-party payment providers.

    `create_intent` performs network IO and must not block the event loop.
    `authenticate_webhook` verifies the signature over the raw body before
    parsing it.
    """

    provider: str

    async def create_intent(self, amount_minor: int, currency: str, metadata: dict[str, str]) -> PaymentIntent: ...

    def authenticate_webhook(self, raw_body: bytes, signature_header: str | None) -> WebhookEvent: ...
