"""
Concurrent delivery of the customer and operator messages.

Both sends always run to completion; a failed or timed-out send is logged and
reported as False rather than raised.
"""
from __future__ import annotations

import asyncio

from application.dtos.orders import NotificationMessage, NotificationOutcome
from application.ports.notification_channel import NotificationChannel
from core.logging_config import get_logger


logger = get_logger(__name__)


class NotificationDispatcher:
    def __init__(self, channel: NotificationChannel, *, timeout_seconds: float = 10.0) -> None:
        self.channel = channel
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, customer: NotificationMessage, admin: NotificationMessage) -> NotificationOutcome:
        customer_sent, admin_sent = await asyncio.gather(
            self._attempt("customer", customer),
            self._attempt("admin", admin),
        )
        return NotificationOutcome(customer_sent=customer_sent, admin_sent=admin_sent)

    async def _attempt(self, role: str, message: NotificationMessage) -> bool:
        try:
            await asyncio.wait_for(self.channel.send(message), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(
                "notification_send_failed",
                role=role,
                channel=self.channel.name,
                recipient=message.recipient,
                error=f"timed out after {self.timeout_seconds}s",
            )
            return False
        except Exception as exc:
            logger.error(
                "notification_send_failed",
                role=role,
                channel=self.channel.name,
                recipient=message.recipient,
                error=str(exc),
                exc_info=True,
            )
            return False
        logger.info("notification_sent", role=role, channel=self.channel.name, recipient=message.recipient)
        return True
