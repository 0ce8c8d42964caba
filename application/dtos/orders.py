"""
Order and notification DTOs.

Orders are posted whole by the storefront in camelCase and are only read here.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderItem(_CamelModel):
    name: str
    quantity: int = Field(ge=1)
    # older storefront builds send `price`
    unit_price: Decimal = Field(validation_alias=AliasChoices("unitPrice", "price", "unit_price"))


class ShippingAddress(_CamelModel):
    first_name: str
    last_name: str
    street: str
    zip: str
    city: str
    country: str
    phone: str = ""

    @field_validator("zip", "phone", mode="before")
    @classmethod
    def _coerce_str(cls, v):
        return "" if v is None else str(v)


class Order(_CamelModel):
    order_number: str
    customer_email: str
    items: list[OrderItem] = Field(min_length=1)
    shipping_address: ShippingAddress
    total: Decimal
    payment_id: Optional[str] = None
    order_notes: Optional[str] = None

    @field_validator("order_number", mode="before")
    @classmethod
    def _order_number_str(cls, v):
        return v if v is None else str(v)


class SendOrderEmails(_CamelModel):
    """Body of `POST /send-order-emails`; a missing order is a 400, not a 422."""

    order_data: Optional[Order] = None


class NotificationMessage(BaseModel):
    sender: str
    recipient: str
    subject: str
    body: str


class ComposedNotifications(BaseModel):
    customer_message: NotificationMessage
    admin_message: NotificationMessage
    generated_at: datetime


class NotificationOutcome(_CamelModel):
    customer_sent: bool
    admin_sent: bool


class OrderEmailsResult(_CamelModel):
    success: bool = True
    customer_email_sent: bool
    admin_email_sent: bool
