"""
Application service orchestrating payment use-cases.

This class depends only on the application PaymentGateway port, the domain
amount rules and the event dispatcher. The gateway implementation is injected
from the composition root, keeping dependencies one-way.
"""
from __future__ import annotations

from typing import Optional

from application.dtos.payments import CreatePaymentIntent, PaymentIntentCreated, WebhookAck
from application.ports.payment_gateway import PaymentGateway
from application.services.payment_event_dispatcher import PaymentEventDispatcher
from core.logging_config import get_logger
from domain.payment.amount import MIN_AMOUNT_MINOR, validate_amount


logger = get_logger(__name__)

INTEGRATION_SOURCE_KEY = "integration_source"


class PaymentService:
    def __init__(
        self,
        gateway: PaymentGateway,
        *,
        dispatcher: Optional[PaymentEventDispatcher] = None,
        min_amount_minor: int = MIN_AMOUNT_MINOR,
        integration_source: str = "storefront-website",
    ) -> None:
        self.gateway = gateway
        self.dispatcher = dispatcher or PaymentEventDispatcher()
        self.min_amount_minor = min_amount_minor
        self.integration_source = integration_source

    async def create_payment_intent(self, req: CreatePaymentIntent) -> PaymentIntentCreated:
        validated = validate_amount(req.amount, req.currency, min_amount_minor=self.min_amount_minor)
        metadata = {**req.metadata, INTEGRATION_SOURCE_KEY: self.integration_source}

        logger.info(
            "payment_intent_create_request",
            provider=self.gateway.provider,
            amount=validated.minor_units,
            currency=validated.currency,
        )
        intent = await self.gateway.create_intent(validated.minor_units, validated.currency, metadata)
        logger.info("payment_intent_created", provider=intent.provider, payment_intent_id=intent.id)
        return PaymentIntentCreated(client_secret=intent.client_secret, payment_intent_id=intent.id)

    async def handle_webhook(self, raw_body: bytes, signature_header: str | None) -> WebhookAck:
        """Authenticate the raw callback, then dispatch it.

        Authentication failures raise before the dispatcher is reached.
        """
        event = self.gateway.authenticate_webhook(raw_body, signature_header)
        logger.info(
            "payment_webhook_authenticated",
            provider=event.provider,
            event_type=event.raw_type,
            event_id=event.event_id,
        )
        await self.dispatcher.dispatch(event)
        return WebhookAck(received=True)
