"""
Factory for payment gateway clients.

The gateway is a process-wide, read-only handle: it is built once from
settings and shared by every request.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from core.settings import payment_settings
from application.ports.payment_gateway import PaymentGateway


@lru_cache(maxsize=None)
def get_payment_gateway(provider: Optional[str] = None) -> PaymentGateway:
    name = (provider or payment_settings.default_provider).lower()
    if name == "stripe":
        from .stripe_client import StripeClient
        return StripeClient(
            secret_key=payment_settings.stripe.secret_key,
            webhook_secret=payment_settings.stripe.webhook_secret,
            tolerance_seconds=payment_settings.webhook.tolerance_seconds,
            timeout_seconds=payment_settings.timeouts.total,
        )
    raise ValueError(f"Unsupported payment provider: {name}")
