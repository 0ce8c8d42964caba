"""Pytest bootstrap configuration.

Environment variables are set before any application module is imported, so
settings pick them up at import time.
"""
import asyncio
import hashlib
import hmac
import os
import time

import pytest

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("FRONTEND_URL", "https://shop.example.com")
os.environ.setdefault("PAYMENT__STRIPE__SECRET_KEY", "sk_test_123")
os.environ.setdefault("PAYMENT__STRIPE__WEBHOOK_SECRET", "whsec_test_secret")
os.environ.setdefault("NOTIFICATION__BACKEND", "console")
os.environ.setdefault("NOTIFICATION__VERIFY_ON_STARTUP", "false")
os.environ.setdefault("NOTIFICATION__ADMIN_ADDRESS", "orders@shop.example.com")
os.environ.setdefault("NOTIFICATION__SENDER_ADDRESS", "no-reply@shop.example.com")

WEBHOOK_SECRET = os.environ["PAYMENT__STRIPE__WEBHOOK_SECRET"]


def stripe_signature(payload: bytes, *, secret: str = WEBHOOK_SECRET, timestamp: int | None = None) -> str:
    """Build a `Stripe-Signature` header the way Stripe signs webhook bodies."""
    ts = int(time.time()) if timestamp is None else timestamp
    signed = f"{ts}.".encode() + payload
    mac = hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()
    return f"t={ts},v1={mac}"


class FakeGateway:
    """In-memory PaymentGateway that records every create call."""

    provider = "fake"

    def __init__(self):
        self.calls = []
        self.events = []
        self.error = None

    async def create_intent(self, amount_minor, currency, metadata):
        from application.dtos.payments import PaymentIntent

        self.calls.append({"amount": amount_minor, "currency": currency, "metadata": metadata})
        if self.error is not None:
            raise self.error
        n = len(self.calls)
        return PaymentIntent(
            id=f"pi_{n}",
            client_secret=f"pi_{n}_secret_abc",
            amount=amount_minor,
            currency=currency,
            metadata=metadata,
            provider=self.provider,
        )

    def authenticate_webhook(self, raw_body, signature_header):
        raise NotImplementedError


class FakeChannel:
    """NotificationChannel that can fail or stall for chosen recipients."""

    name = "fake"

    def __init__(self, *, fail_for=(), stall_for=(), stall_seconds=1.0):
        self.fail_for = set(fail_for)
        self.stall_for = set(stall_for)
        self.stall_seconds = stall_seconds
        self.sent = []

    async def send(self, message):
        if message.recipient in self.stall_for:
            await asyncio.sleep(self.stall_seconds)
        if message.recipient in self.fail_for:
            raise ConnectionError(f"mailbox unavailable: {message.recipient}")
        self.sent.append(message)

    async def verify(self):
        return True


@pytest.fixture
def sign():
    return stripe_signature


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def fake_channel():
    return FakeChannel()


@pytest.fixture
def make_channel():
    return FakeChannel


@pytest.fixture
def order_payload():
    """Order as the storefront posts it."""
    return {
        "orderNumber": "QG-1001",
        "customerEmail": "jane@example.com",
        "items": [
            {"name": "Dragon figurine", "quantity": 2, "price": 12.5},
            {"name": "Phone stand", "quantity": 1, "unitPrice": "8.90"},
        ],
        "shippingAddress": {
            "firstName": "Jane",
            "lastName": "Doe",
            "street": "12 Rue de la Paix",
            "zip": 75002,
            "city": "Paris",
            "country": "France",
            "phone": "+33 6 12 34 56 78",
        },
        "total": 33.9,
        "paymentId": "pi_123",
        "orderNotes": "Please gift wrap",
    }


@pytest.fixture
def order(order_payload):
    from application.dtos.orders import Order

    return Order.model_validate(order_payload)


@pytest.fixture
def app():
    from main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app, raise_server_exceptions=False)
