"""
API dependencies.

Service handles are built once per process from settings and shared by every
request; tests replace them through `app.dependency_overrides`.
"""
from functools import lru_cache

from fastapi import Depends

from application.ports.notification_channel import NotificationChannel
from application.ports.payment_gateway import PaymentGateway
from application.services.notification_composer import NotificationComposer
from application.services.notification_dispatcher import NotificationDispatcher
from application.services.order_email_service import OrderEmailService
from application.services.payment_event_dispatcher import PaymentEventDispatcher
from application.services.payment_service import PaymentService
from core.config import settings
from core.settings import notification_settings, payment_settings
from infrastructure.external.notifications import get_notification_channel
from infrastructure.external.payments import get_payment_gateway


@lru_cache(maxsize=None)
def get_payment_event_dispatcher() -> PaymentEventDispatcher:
    """Process-wide dispatcher; register success/failure hooks on this instance."""
    return PaymentEventDispatcher()


def get_gateway() -> PaymentGateway:
    return get_payment_gateway()


def get_channel() -> NotificationChannel:
    return get_notification_channel()


def get_payment_service(
    gateway: PaymentGateway = Depends(get_gateway),
    dispatcher: PaymentEventDispatcher = Depends(get_payment_event_dispatcher),
) -> PaymentService:
    return PaymentService(
        gateway=gateway,
        dispatcher=dispatcher,
        min_amount_minor=payment_settings.min_amount_minor,
        integration_source=payment_settings.integration_source,
    )


@lru_cache(maxsize=None)
def get_notification_composer() -> NotificationComposer:
    return NotificationComposer(
        brand_name=notification_settings.brand_name,
        sender_address=notification_settings.sender_address,
        sender_name=notification_settings.sender_name,
        admin_sender_name=notification_settings.admin_sender_name,
        admin_address=notification_settings.admin_address,
        currency_symbol=notification_settings.currency_symbol,
        frontend_url=settings.public_base_url,
    )


def get_order_email_service(
    channel: NotificationChannel = Depends(get_channel),
    composer: NotificationComposer = Depends(get_notification_composer),
) -> OrderEmailService:
    dispatcher = NotificationDispatcher(channel, timeout_seconds=notification_settings.send_timeout_seconds)
    return OrderEmailService(composer=composer, dispatcher=dispatcher)
