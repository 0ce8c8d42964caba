"""
Stripe PaymentIntents adapter using the official stripe-python SDK.

Notes on SDK usage:
- The module-level resources are synchronous; calls are offloaded to a worker
  thread and the API key is passed per request instead of being set globally.
- Webhooks call `stripe.WebhookSignature.verify_header` on the raw body and
  parse the JSON separately, rather than `stripe.Webhook.construct_event`, so a
  verified body that is not a usable event raises WebhookPayloadError instead of
  being reported as a signature failure.
"""
from __future__ import annotations

import json
from typing import Optional

import stripe

from application.dtos.payments import PaymentIntent
from core.logging_config import get_logger
from domain.payment.events import WebhookEvent
from infrastructure.external.payments.base import BasePaymentClient
from infrastructure.external.payments.exceptions import (
    PaymentGatewayError,
    WebhookAuthenticationError,
    WebhookPayloadError,
)


logger = get_logger(__name__)


class StripeClient(BasePaymentClient):
    provider = "stripe"

    def __init__(
        self,
        *,
        secret_key: Optional[str],
        webhook_secret: Optional[str],
        tolerance_seconds: int = 300,
        timeout_seconds: Optional[float] = None,
    ):
        super().__init__(timeout_seconds=timeout_seconds)
        self._secret_key = secret_key
        self._webhook_secret = webhook_secret
        self._tolerance_seconds = tolerance_seconds

    @property
    def configured(self) -> bool:
        return bool(self._secret_key)

    @property
    def webhook_configured(self) -> bool:
        return bool(self._webhook_secret)

    async def create_intent(self, amount_minor: int, currency: str, metadata: dict[str, str]) -> PaymentIntent:  # type: ignore[override]
        if not self._secret_key:
            raise PaymentGatewayError("Stripe secret key is not configured", provider=self.provider)

        try:
            pi = await self._call_sdk(
                stripe.PaymentIntent.create,
                api_key=self._secret_key,
                amount=amount_minor,
                currency=currency,
                automatic_payment_methods={"enabled": True},
                metadata=metadata,
            )
        except PaymentGatewayError:
            raise
        except Exception as exc:
            raise PaymentGatewayError(
                getattr(exc, "user_message", None) or str(exc),
                provider=self.provider,
                provider_code=getattr(exc, "code", None),
                details={"http_status": getattr(exc, "http_status", None)},
            ) from exc

        self._log("stripe_payment_intent_created", payment_intent_id=pi["id"], amount=amount_minor, currency=currency)
        return PaymentIntent(
            id=str(pi["id"]),
            client_secret=str(pi["client_secret"]),
            # StripeObject supports subscript access but is not a dict
            amount=int(pi["amount"]),
            currency=str(pi["currency"]),
            metadata=dict(metadata),
            provider=self.provider,
        )

    def authenticate_webhook(self, raw_body: bytes, signature_header: str | None) -> WebhookEvent:  # type: ignore[override]
        if not self._webhook_secret:
            logger.error("webhook_secret_not_configured", provider=self.provider)
            raise WebhookAuthenticationError("webhook signing secret is not configured", provider=self.provider)
        if not signature_header:
            raise WebhookAuthenticationError("missing Stripe-Signature header", provider=self.provider)

        try:
            payload = raw_body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WebhookAuthenticationError("payload is not valid UTF-8", provider=self.provider) from exc

        try:
            stripe.WebhookSignature.verify_header(
                payload,
                signature_header,
                self._webhook_secret,
                self._tolerance_seconds,
            )
        except stripe.SignatureVerificationError as exc:
            logger.warning("webhook_signature_invalid", provider=self.provider, error=str(exc))
            raise WebhookAuthenticationError(str(exc), provider=self.provider) from exc

        # Verified: from here on failures are payload problems, not authentication ones.
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise WebhookPayloadError("body is not valid JSON", provider=self.provider) from exc
        if not isinstance(data, dict) or not isinstance(data.get("type"), str):
            raise WebhookPayloadError("event type is missing", provider=self.provider)

        envelope = data.get("data") or {}
        data_object = envelope.get("object") or {} if isinstance(envelope, dict) else None
        if not isinstance(data_object, dict):
            raise WebhookPayloadError("event data object is malformed", provider=self.provider)
        return self._to_event(data["type"], data_object, event_id=data.get("id"))
