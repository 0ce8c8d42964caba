"""
Builds the customer confirmation and the operator alert for one order.

Pure: the same order and timestamp always yield identical messages.
"""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from application.dtos.orders import ComposedNotifications, NotificationMessage, Order


NOT_AVAILABLE = "N/A"
_CENTS = Decimal("0.01")


def _format_sender(name: Optional[str], address: str) -> str:
    return f'"{name}" <{address}>' if name else address


class NotificationComposer:
    def __init__(
        self,
        *,
        brand_name: str,
        sender_address: str,
        admin_address: str,
        frontend_url: str,
        sender_name: Optional[str] = None,
        admin_sender_name: Optional[str] = None,
        currency_symbol: str = "€",
    ) -> None:
        self.brand_name = brand_name
        self.sender_address = sender_address
        self.admin_address = admin_address
        self.frontend_url = frontend_url.rstrip("/")
        self.sender_name = sender_name or brand_name
        self.admin_sender_name = admin_sender_name or f"{brand_name} Orders"
        self.currency_symbol = currency_symbol

    def compose(self, order: Order, generated_at: Optional[datetime] = None) -> ComposedNotifications:
        generated_at = generated_at or datetime.now(timezone.utc)
        return ComposedNotifications(
            customer_message=self._customer_message(order, generated_at),
            admin_message=self._admin_message(order, generated_at),
            generated_at=generated_at,
        )

    def format_price(self, value: Decimal) -> str:
        return f"{Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)}{self.currency_symbol}"

    def items_block(self, order: Order) -> str:
        return "\n".join(
            f"{item.quantity} × {item.name} — {self.format_price(item.unit_price)}" for item in order.items
        )

    @staticmethod
    def address_block(order: Order) -> str:
        addr = order.shipping_address
        return "\n".join(
            [
                f"{addr.first_name} {addr.last_name}",
                addr.street,
                f"{addr.zip} {addr.city}",
                addr.country,
                f"Phone: {addr.phone}",
            ]
        )

    def _customer_message(self, order: Order, generated_at: datetime) -> NotificationMessage:
        addr = order.shipping_address
        body = "\n".join(
            [
                f"Hello {addr.first_name},",
                "",
                "We have received your order and thank you for your trust.",
                "",
                "Order details",
                f"Order number: {order.order_number}",
                f"Date: {generated_at:%d/%m/%Y}",
                f"Total: {self.format_price(order.total)}",
                "",
                "Items:",
                self.items_block(order),
                "",
                "Shipping address:",
                self.address_block(order),
                "",
                "We are preparing your order with care. You will receive another e-mail once your parcel ships.",
                f"Track your order: {self.frontend_url}/profile.html",
                "",
                f"{self.brand_name}",
            ]
        )
        return NotificationMessage(
            sender=_format_sender(self.sender_name, self.sender_address),
            recipient=order.customer_email,
            subject=f"Order confirmation #{order.order_number}",
            body=body,
        )

    def _admin_message(self, order: Order, generated_at: datetime) -> NotificationMessage:
        addr = order.shipping_address
        total = self.format_price(order.total)
        lines = [
            f"New order #{order.order_number}",
            f"Received: {generated_at.astimezone(timezone.utc):%d/%m/%Y %H:%M} UTC",
            f"Total: {total}",
            "",
            "Customer",
            f"Name: {addr.first_name} {addr.last_name}",
            f"Email: {order.customer_email}",
            f"Phone: {addr.phone}",
            "",
            "Items:",
            self.items_block(order),
            "",
            "Shipping address:",
            self.address_block(order),
            "",
            "Payment",
            f"Payment ID: {order.payment_id or NOT_AVAILABLE}",
            f"Amount: {total}",
        ]
        if order.order_notes and order.order_notes.strip():
            lines += ["", "Customer notes:", order.order_notes.strip()]
        lines += ["", f"Manage orders: {self.frontend_url}/admin.html"]

        return NotificationMessage(
            sender=_format_sender(self.admin_sender_name, self.sender_address),
            recipient=self.admin_address,
            subject=f"New order #{order.order_number} - {total}",
            body="\n".join(lines),
        )
