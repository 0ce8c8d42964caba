import time

import pytest

stripe = pytest.importorskip("stripe")

from infrastructure.external.payments import get_payment_gateway
from infrastructure.external.payments.exceptions import PaymentGatewayError
from infrastructure.external.payments.stripe_client import StripeClient
from shared.codes.payment_codes import PaymentCode


def test_factory_builds_stripe_client_from_settings():
    gw = get_payment_gateway("stripe")
    assert isinstance(gw, StripeClient)
    assert gw.configured and gw.webhook_configured
    assert get_payment_gateway("stripe") is gw


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError):
        get_payment_gateway("paypal")


@pytest.mark.asyncio
async def test_create_intent_calls_sdk(monkeypatch):
    captured = {}

    def fake_create(**kwargs):
        captured.update(kwargs)
        return stripe.PaymentIntent.construct_from(
            {
                "id": "pi_42",
                "object": "payment_intent",
                "client_secret": "pi_42_secret",
                "amount": kwargs["amount"],
                "currency": "eur",
                "metadata": kwargs["metadata"],
            },
            kwargs["api_key"],
        )

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)
    gw = StripeClient(secret_key="sk_test_123", webhook_secret="whsec_x")

    intent = await gw.create_intent(1500, "eur", {"integration_source": "storefront-website"})

    assert intent.id == "pi_42"
    assert intent.client_secret == "pi_42_secret"
    assert intent.amount == 1500
    assert intent.currency == "eur"
    assert intent.metadata == {"integration_source": "storefront-website"}
    assert captured["api_key"] == "sk_test_123"
    assert captured["amount"] == 1500
    assert captured["automatic_payment_methods"] == {"enabled": True}


@pytest.mark.asyncio
async def test_create_intent_wraps_sdk_errors(monkeypatch):
    def fake_create(**kwargs):
        raise stripe.InvalidRequestError("Amount must be at least 50 cents", param="amount", code="amount_too_small")

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)
    gw = StripeClient(secret_key="sk_test_123", webhook_secret=None)

    with pytest.raises(PaymentGatewayError) as ei:
        await gw.create_intent(10, "eur", {})
    assert ei.value.code == PaymentCode.PROVIDER_ERROR
    assert ei.value.details["provider_code"] == "amount_too_small"
    assert "Amount must be at least 50 cents" in ei.value.provider_message


@pytest.mark.asyncio
async def test_create_intent_times_out(monkeypatch):
    def slow_create(**kwargs):
        time.sleep(0.5)
        return {"id": "pi_late", "client_secret": "s"}

    monkeypatch.setattr(stripe.PaymentIntent, "create", slow_create)
    gw = StripeClient(secret_key="sk_test_123", webhook_secret=None, timeout_seconds=0.05)

    with pytest.raises(PaymentGatewayError) as ei:
        await gw.create_intent(500, "eur", {})
    assert ei.value.code == PaymentCode.TIMEOUT


@pytest.mark.asyncio
async def test_create_intent_without_key():
    gw = StripeClient(secret_key=None, webhook_secret=None)
    with pytest.raises(PaymentGatewayError):
        await gw.create_intent(500, "eur", {})
