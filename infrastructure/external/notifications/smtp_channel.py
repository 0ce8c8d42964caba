"""
SMTP channel built on aiosmtplib.

A new connection is opened per message; the dispatcher bounds each send with
its own timeout on top of the socket timeout configured here.
"""
from __future__ import annotations

from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from typing import Optional

import aiosmtplib

from application.dtos.orders import NotificationMessage
from core.logging_config import get_logger

logger = get_logger(__name__)


class SmtpNotConfiguredError(RuntimeError):
    pass


def build_email(message: NotificationMessage) -> EmailMessage:
    email = EmailMessage()
    email["From"] = message.sender
    email["To"] = message.recipient
    email["Subject"] = message.subject
    email["Date"] = formatdate(localtime=False, usegmt=True)
    email["Message-ID"] = make_msgid()
    email.set_content(message.body)
    return email


class SmtpChannel:
    name = "smtp"

    def __init__(
        self,
        *,
        host: Optional[str],
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        start_tls: bool = True,
        use_tls: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.start_tls = start_tls
        self.use_tls = use_tls
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.host)

    def _client(self) -> aiosmtplib.SMTP:
        if not self.host:
            raise SmtpNotConfiguredError("SMTP host is not configured")
        return aiosmtplib.SMTP(
            hostname=self.host,
            port=self.port,
            username=self.username or None,
            password=self.password or None,
            use_tls=self.use_tls,
            start_tls=False if self.use_tls else self.start_tls,
            timeout=self.timeout,
        )

    async def send(self, message: NotificationMessage) -> None:
        client = self._client()
        async with client:
            await client.send_message(build_email(message))

    async def verify(self) -> bool:
        """Connect and authenticate without sending; False on any failure."""
        try:
            client = self._client()
            async with client:
                await client.noop()
        except (SmtpNotConfiguredError, aiosmtplib.SMTPException, OSError) as exc:
            logger.warning("smtp_verify_failed", host=self.host, port=self.port, error=str(exc))
            return False
        logger.info("smtp_verified", host=self.host, port=self.port)
        return True
