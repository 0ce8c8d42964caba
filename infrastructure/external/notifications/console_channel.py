"""Channel that writes messages to the application log instead of sending them."""
from __future__ import annotations

from collections import deque

from application.dtos.orders import NotificationMessage
from core.logging_config import get_logger

logger = get_logger(__name__)


class ConsoleChannel:
    name = "console"

    def __init__(self) -> None:
        # most recent messages, for local inspection
        self.sent: deque[NotificationMessage] = deque(maxlen=100)

    async def send(self, message: NotificationMessage) -> None:
        self.sent.append(message)
        logger.info(
            "notification_logged",
            sender=message.sender,
            recipient=message.recipient,
            subject=message.subject,
            body=message.body,
        )

    async def verify(self) -> bool:
        return True
