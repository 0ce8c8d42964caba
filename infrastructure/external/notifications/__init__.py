"""Notification channel entry point."""
from __future__ import annotations

from functools import lru_cache

from application.ports.notification_channel import NotificationChannel
from core.logging_config import get_logger
from core.settings import notification_settings

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def get_notification_channel() -> NotificationChannel:
    """Build the process-wide channel selected by `NOTIFICATION__BACKEND`."""
    backend = notification_settings.backend
    if backend == "console":
        from .console_channel import ConsoleChannel
        return ConsoleChannel()
    if backend == "smtp":
        from .smtp_channel import SmtpChannel
        s = notification_settings.smtp
        return SmtpChannel(
            host=s.host,
            port=s.port,
            username=s.username,
            password=s.password,
            start_tls=s.start_tls,
            use_tls=s.use_tls,
            timeout=s.timeout,
        )
    raise ValueError(f"Unsupported notification backend: {backend}")
