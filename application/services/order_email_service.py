"""Order confirmation use-case: compose both messages, then send them."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from application.dtos.orders import Order, OrderEmailsResult
from application.services.notification_composer import NotificationComposer
from application.services.notification_dispatcher import NotificationDispatcher
from core.logging_config import get_logger


logger = get_logger(__name__)


class OrderEmailService:
    def __init__(self, composer: NotificationComposer, dispatcher: NotificationDispatcher) -> None:
        self.composer = composer
        self.dispatcher = dispatcher

    async def send_order_emails(self, order: Order, *, now: Optional[datetime] = None) -> OrderEmailsResult:
        logger.info("order_emails_requested", order_number=order.order_number, items=len(order.items))
        composed = self.composer.compose(order, generated_at=now)
        outcome = await self.dispatcher.dispatch(composed.customer_message, composed.admin_message)
        logger.info(
            "order_emails_dispatched",
            order_number=order.order_number,
            customer_sent=outcome.customer_sent,
            admin_sent=outcome.admin_sent,
        )
        return OrderEmailsResult(
            success=True,
            customer_email_sent=outcome.customer_sent,
            admin_email_sent=outcome.admin_sent,
        )
