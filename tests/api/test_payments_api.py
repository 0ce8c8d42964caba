import json

import pytest

from api.dependencies import get_gateway, get_payment_event_dispatcher
from application.services.payment_event_dispatcher import PaymentEventDispatcher


@pytest.fixture
def gateway_client(app, client, fake_gateway):
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    return client


@pytest.fixture
def dispatcher(app):
    d = PaymentEventDispatcher()
    app.dependency_overrides[get_payment_event_dispatcher] = lambda: d
    return d


def _event_body(event_type):
    return json.dumps(
        {"id": "evt_1", "type": event_type, "data": {"object": {"id": "pi_1", "object": "payment_intent"}}}
    ).encode()


def test_create_payment_intent(gateway_client, fake_gateway):
    resp = gateway_client.post("/create-payment-intent", json={"amount": 2599.5, "metadata": {"cart": 3}})

    assert resp.status_code == 200
    assert resp.json() == {"clientSecret": "pi_1_secret_abc", "paymentIntentId": "pi_1"}
    assert fake_gateway.calls[0]["amount"] == 2600
    assert fake_gateway.calls[0]["currency"] == "eur"
    assert fake_gateway.calls[0]["metadata"] == {"cart": "3", "integration_source": "storefront-website"}


@pytest.mark.parametrize("body", [{"amount": 49}, {"amount": 0}, {}])
def test_create_payment_intent_rejects_small_amounts(gateway_client, fake_gateway, body):
    resp = gateway_client.post("/create-payment-intent", json=body)

    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "The minimum amount is 0.50 EUR"
    assert data["type"] == "InvalidAmount"
    assert data["field"] == "amount"
    assert fake_gateway.calls == []


def test_create_payment_intent_malformed_body(gateway_client, fake_gateway):
    resp = gateway_client.post("/create-payment-intent", json={"amount": "lots", "currency": "euro"})
    assert resp.status_code == 422
    assert resp.json()["type"] == "ValidationError"
    assert fake_gateway.calls == []


def test_create_payment_intent_gateway_failure(gateway_client, fake_gateway):
    from infrastructure.external.payments.exceptions import PaymentGatewayError

    fake_gateway.error = PaymentGatewayError("Your card was declined.", provider="fake", provider_code="card_declined")
    resp = gateway_client.post("/create-payment-intent", json={"amount": 500})

    assert resp.status_code == 500
    data = resp.json()
    assert data["type"] == "GatewayError"
    assert data["details"]["provider_message"] == "Your card was declined."


def test_webhook_success_dispatched_once(client, dispatcher, sign):
    seen = []

    @dispatcher.on_succeeded
    async def record(event):
        seen.append(event.event_id)

    body = _event_body("payment_intent.succeeded")
    resp = client.post("/webhook", content=body, headers={"Stripe-Signature": sign(body)})

    assert resp.status_code == 200
    assert resp.json() == {"received": True}
    assert seen == ["evt_1"]


def test_webhook_unknown_type_is_acknowledged(client, dispatcher, sign):
    body = _event_body("customer.created")
    resp = client.post("/webhook", content=body, headers={"Stripe-Signature": sign(body)})
    assert resp.status_code == 200
    assert resp.json() == {"received": True}


def test_webhook_bad_signature_never_dispatches(client, dispatcher, sign):
    calls = []

    @dispatcher.on_succeeded
    async def record(event):
        calls.append(event)

    body = _event_body("payment_intent.succeeded")
    resp = client.post("/webhook", content=body, headers={"Stripe-Signature": sign(body, secret="whsec_wrong")})

    assert resp.status_code == 400
    assert resp.json()["type"] == "AuthenticationFailed"
    assert resp.json()["error"].startswith("Webhook Error:")
    assert calls == []


def test_webhook_missing_signature(client, dispatcher):
    resp = client.post("/webhook", content=_event_body("payment_intent.succeeded"))
    assert resp.status_code == 400


def test_webhook_verified_but_malformed(client, dispatcher, sign):
    body = b"this is not json"
    resp = client.post("/webhook", content=body, headers={"Stripe-Signature": sign(body)})
    assert resp.status_code == 400
    assert resp.json()["type"] == "WebhookPayloadInvalid"


def test_webhook_hook_failure_is_a_server_error(client, dispatcher, sign):
    @dispatcher.on_failed
    async def boom(event):
        raise RuntimeError("ledger unavailable")

    body = _event_body("payment_intent.payment_failed")
    resp = client.post("/webhook", content=body, headers={"Stripe-Signature": sign(body)})

    assert resp.status_code == 500
    assert resp.json()["error"] == "Internal server error"


def test_create_payment_intent_without_body(gateway_client, fake_gateway):
    resp = gateway_client.post("/create-payment-intent")

    assert resp.status_code == 400
    assert resp.json()["type"] == "InvalidAmount"
    assert fake_gateway.calls == []


def test_create_payment_intent_large_amount_is_forwarded(gateway_client, fake_gateway):
    resp = gateway_client.post("/create-payment-intent", json={"amount": 1e28})

    assert resp.status_code == 200
    assert fake_gateway.calls[0]["amount"] == 10**28
