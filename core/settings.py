"""
Payment and notification settings using pydantic-settings v2 with nested env keys.

Examples: `PAYMENT__STRIPE__SECRET_KEY`, `PAYMENT__WEBHOOK__TOLERANCE_SECONDS`,
`NOTIFICATION__SMTP__HOST`, `NOTIFICATION__ADMIN_ADDRESS`.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaymentTimeouts(BaseModel):
    total: float = 20.0


class WebhookSettings(BaseModel):
    tolerance_seconds: int = 300
    signature_header: str = "Stripe-Signature"


class StripeSettings(BaseModel):
    secret_key: Optional[str] = None
    webhook_secret: Optional[str] = None


class PaymentSettings(BaseSettings):
    default_provider: str = "stripe"
    default_currency: str = "eur"
    min_amount_minor: int = 50
    integration_source: str = "storefront-website"
    timeouts: PaymentTimeouts = Field(default_factory=PaymentTimeouts)
    webhook: WebhookSettings = Field(default_factory=WebhookSettings)
    stripe: StripeSettings = Field(default_factory=StripeSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PAYMENT__",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


class SmtpSettings(BaseModel):
    host: Optional[str] = None
    port: int = 587
    username: Optional[str] = None
    password: Optional[str] = None
    start_tls: bool = True
    use_tls: bool = False
    timeout: float = 10.0


class NotificationSettings(BaseSettings):
    backend: Literal["smtp", "console"] = "smtp"
    smtp: SmtpSettings = Field(default_factory=SmtpSettings)

    brand_name: str = "Storefront"
    sender_address: str = "no-reply@example.com"
    sender_name: Optional[str] = None
    admin_sender_name: Optional[str] = None
    admin_address: str = "orders@example.com"
    currency_symbol: str = "€"

    send_timeout_seconds: float = 10.0
    verify_on_startup: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NOTIFICATION__",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


payment_settings = PaymentSettings()
notification_settings = NotificationSettings()
