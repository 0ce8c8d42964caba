"""
Dispatch of authenticated payment webhook events.

Each event is handled once and independently: succeeded and failed payments run
their registered hooks, any other type is logged as unhandled and still
acknowledged so the gateway stops redelivering it. Hooks are the extension
points for persistence, customer notification and alerting.
"""
from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, Iterable, Optional

from core.logging_config import get_logger
from domain.payment.events import WebhookEvent, WebhookEventType


logger = get_logger(__name__)

EventHook = Callable[[WebhookEvent], Awaitable[None]]


class DispatchResult(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    UNHANDLED = "unhandled"


class PaymentEventDispatcher:
    def __init__(
        self,
        *,
        on_succeeded: Optional[Iterable[EventHook]] = None,
        on_failed: Optional[Iterable[EventHook]] = None,
    ) -> None:
        self._succeeded_hooks: list[EventHook] = list(on_succeeded or ())
        self._failed_hooks: list[EventHook] = list(on_failed or ())

    def on_succeeded(self, hook: EventHook) -> EventHook:
        """Register a hook for successful payments; usable as a decorator."""
        self._succeeded_hooks.append(hook)
        return hook

    def on_failed(self, hook: EventHook) -> EventHook:
        """Register a hook for failed payments; usable as a decorator."""
        self._failed_hooks.append(hook)
        return hook

    async def dispatch(self, event: WebhookEvent) -> DispatchResult:
        if event.type is WebhookEventType.PAYMENT_SUCCEEDED:
            logger.info("payment_succeeded", payment_intent_id=event.object_id, event_id=event.event_id)
            await self._run(self._succeeded_hooks, event)
            return DispatchResult.SUCCEEDED

        if event.type is WebhookEventType.PAYMENT_FAILED:
            error = event.object_payload.get("last_payment_error") or {}
            logger.warning(
                "payment_failed",
                payment_intent_id=event.object_id,
                event_id=event.event_id,
                reason=error.get("message") if isinstance(error, dict) else None,
            )
            await self._run(self._failed_hooks, event)
            return DispatchResult.FAILED

        logger.info("webhook_event_unhandled", event_type=event.raw_type, event_id=event.event_id)
        return DispatchResult.UNHANDLED

    @staticmethod
    async def _run(hooks: list[EventHook], event: WebhookEvent) -> None:
        # Hook failures propagate so the gateway redelivers the event.
        for hook in hooks:
            await hook(event)
