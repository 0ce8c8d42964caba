"""
Payment DTOs (Pydantic v2) used at application boundaries.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CreatePaymentIntent(BaseModel):
    """Body of `POST /create-payment-intent`.

    `amount` stays optional here so that a missing amount is reported as an
    invalid amount (400) rather than a schema error.
    """

    amount: Optional[float] = None
    currency: str = Field(default="eur")
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("currency")
    @classmethod
    def _lower_and_validate_currency(cls, v: str) -> str:
        c = (v or "").strip().lower()
        if len(c) != 3 or not c.isalpha():
            raise ValueError("currency must be ISO-4217 alpha-3")
        return c

    @field_validator("metadata", mode="before")
    @classmethod
    def _stringify_metadata(cls, v: Any) -> Any:
        # gateway metadata values are strings
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(k): "" if val is None else str(val) for k, val in v.items()}
        return v


class PaymentIntent(BaseModel):
    """Intent as returned by the gateway at creation time."""

    id: str
    client_secret: str
    amount: int
    currency: str
    metadata: dict[str, str] = Field(default_factory=dict)
    provider: str = "stripe"


class PaymentIntentCreated(BaseModel):
    """The only two fields handed back to the storefront."""

    client_secret: str
    payment_intent_id: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WebhookAck(BaseModel):
    received: bool = True
