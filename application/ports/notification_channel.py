"""
Notification channel port.

A channel delivers one composed message; it raises on failure and returns
nothing on success. Timeouts are applied by the caller.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from application.dtos.orders import NotificationMessage


@runtime_checkable
class NotificationChannel(Protocol):
    name: str

    async def send(self, message: NotificationMessage) -> None: ...

    async def verify(self) -> bool: ...
