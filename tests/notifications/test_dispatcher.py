import time

import pytest

from application.dtos.orders import NotificationMessage
from application.services.notification_dispatcher import NotificationDispatcher


CUSTOMER = NotificationMessage(sender="shop", recipient="jane@example.com", subject="c", body="c")
ADMIN = NotificationMessage(sender="shop", recipient="orders@shop.example.com", subject="a", body="a")


@pytest.mark.asyncio
async def test_both_sent(fake_channel):
    outcome = await NotificationDispatcher(fake_channel).dispatch(CUSTOMER, ADMIN)
    assert outcome.customer_sent and outcome.admin_sent
    assert [m.recipient for m in fake_channel.sent] == ["jane@example.com", "orders@shop.example.com"]


@pytest.mark.asyncio
async def test_customer_failure_does_not_block_admin(make_channel):
    channel = make_channel(fail_for={"jane@example.com"})
    outcome = await NotificationDispatcher(channel).dispatch(CUSTOMER, ADMIN)
    assert outcome.customer_sent is False
    assert outcome.admin_sent is True


@pytest.mark.asyncio
async def test_both_fail(make_channel):
    channel = make_channel(fail_for={"jane@example.com", "orders@shop.example.com"})
    outcome = await NotificationDispatcher(channel).dispatch(CUSTOMER, ADMIN)
    assert (outcome.customer_sent, outcome.admin_sent) == (False, False)


@pytest.mark.asyncio
async def test_stalled_send_times_out(make_channel):
    channel = make_channel(stall_for={"orders@shop.example.com"}, stall_seconds=5)
    outcome = await NotificationDispatcher(channel, timeout_seconds=0.05).dispatch(CUSTOMER, ADMIN)
    assert outcome.customer_sent is True
    assert outcome.admin_sent is False


@pytest.mark.asyncio
async def test_sends_run_concurrently(make_channel):
    stall = 0.3
    channel = make_channel(stall_for={"jane@example.com", "orders@shop.example.com"}, stall_seconds=stall)

    started = time.monotonic()
    outcome = await NotificationDispatcher(channel, timeout_seconds=5).dispatch(CUSTOMER, ADMIN)
    elapsed = time.monotonic() - started

    assert outcome.customer_sent and outcome.admin_sent
    assert elapsed < stall * 1.6
