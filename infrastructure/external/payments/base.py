"""
Base payment client implementing shared concerns: SDK offloading, timeouts,
event mapping and logging.

Concrete providers should subclass and implement provider-specific logic.
"""
from __future__ import annotations

from functools import partial
from typing import Any, Callable, Optional

import anyio

from core.logging_config import get_logger
from application.dtos.payments import PaymentIntent
from application.ports.payment_gateway import PaymentGateway
from domain.payment.events import WebhookEvent
from infrastructure.external.payments.exceptions import PaymentGatewayError
from shared.codes.payment_codes import PROVIDER_EVENT_TO_INTERNAL, PaymentCode


logger = get_logger(__name__)


class BasePaymentClient(PaymentGateway):
    provider: str = "base"

    def __init__(self, *, timeout_seconds: Optional[float] = None) -> None:
        self._timeout_seconds = timeout_seconds or 20.0

    async def _call_sdk(self, fn: Callable[..., Any], /, **kwargs: Any) -> Any:
        """Run a blocking SDK call in a worker thread under the configured timeout.

        On timeout the thread is abandoned; its result is never observed.
        """
        try:
            with anyio.fail_after(self._timeout_seconds):
                return await anyio.to_thread.run_sync(partial(fn, **kwargs), abandon_on_cancel=True)
        except TimeoutError as exc:
            raise PaymentGatewayError(
                f"{self.provider} did not answer within {self._timeout_seconds:g}s",
                provider=self.provider,
                code=PaymentCode.TIMEOUT,
            ) from exc

    # Default implementations raise to force override where needed
    async def create_intent(self, amount_minor: int, currency: str, metadata: dict[str, str]) -> PaymentIntent:  # type: ignore[override]
        raise NotImplementedError

    def authenticate_webhook(self, raw_body: bytes, signature_header: str | None) -> WebhookEvent:  # type: ignore[override]
        raise NotImplementedError

    # Helpers
    def _to_event(self, raw_type: str, data_object: dict, event_id: Optional[str] = None) -> WebhookEvent:
        return WebhookEvent.from_gateway(
            raw_type,
            data_object,
            mapping=PROVIDER_EVENT_TO_INTERNAL.get(self.provider, {}),
            event_id=event_id,
            provider=self.provider,
        )

    def _log(self, event: str, **kwargs) -> None:
        logger.info(
            event,
            provider=self.provider,
            **kwargs,
        )
