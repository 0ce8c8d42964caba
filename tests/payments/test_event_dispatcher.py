import pytest

from application.services.payment_event_dispatcher import DispatchResult, PaymentEventDispatcher
from domain.payment.events import WebhookEvent, WebhookEventType
from shared.codes.payment_codes import PROVIDER_EVENT_TO_INTERNAL


def _event(raw_type, **obj):
    return WebhookEvent.from_gateway(
        raw_type,
        {"id": "pi_1", **obj},
        mapping=PROVIDER_EVENT_TO_INTERNAL["stripe"],
        event_id="evt_1",
    )


def test_event_mapping():
    assert _event("payment_intent.succeeded").type is WebhookEventType.PAYMENT_SUCCEEDED
    assert _event("payment_intent.payment_failed").type is WebhookEventType.PAYMENT_FAILED
    other = _event("charge.refunded")
    assert other.is_other
    assert other.raw_type == "charge.refunded"
    assert other.object_id == "pi_1"


@pytest.mark.asyncio
async def test_success_hooks_run_once():
    seen = []
    dispatcher = PaymentEventDispatcher()

    @dispatcher.on_succeeded
    async def record(event):
        seen.append(event.object_id)

    assert await dispatcher.dispatch(_event("payment_intent.succeeded")) is DispatchResult.SUCCEEDED
    assert seen == ["pi_1"]


@pytest.mark.asyncio
async def test_failed_hooks_only_for_failures():
    succeeded, failed = [], []

    async def on_ok(event):
        succeeded.append(event)

    async def on_fail(event):
        failed.append(event)

    dispatcher = PaymentEventDispatcher(on_succeeded=[on_ok], on_failed=[on_fail])
    result = await dispatcher.dispatch(
        _event("payment_intent.payment_failed", last_payment_error={"message": "Your card was declined."})
    )

    assert result is DispatchResult.FAILED
    assert succeeded == []
    assert len(failed) == 1


@pytest.mark.asyncio
async def test_other_events_are_unhandled_without_hooks():
    calls = []

    async def hook(event):
        calls.append(event)

    dispatcher = PaymentEventDispatcher(on_succeeded=[hook], on_failed=[hook])
    assert await dispatcher.dispatch(_event("customer.created")) is DispatchResult.UNHANDLED
    assert calls == []


@pytest.mark.asyncio
async def test_hook_errors_propagate():
    dispatcher = PaymentEventDispatcher()

    @dispatcher.on_succeeded
    async def boom(event):
        raise RuntimeError("database down")

    with pytest.raises(RuntimeError):
        await dispatcher.dispatch(_event("payment_intent.succeeded"))
