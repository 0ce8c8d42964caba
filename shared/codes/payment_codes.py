"""
Payment specific codes and gateway event-type mapping.
"""
from __future__ import annotations

from enum import IntEnum


class PaymentCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Request errors (6xxxx)
    INVALID_AMOUNT = 60010

    # Provider/Network errors
    PROVIDER_ERROR = 60000
    SIGNATURE_ERROR = 60002
    TIMEOUT = 60003
    WEBHOOK_PAYLOAD_INVALID = 60005


# Gateway event type -> internal event kind. Types not listed are kept as "other".
PROVIDER_EVENT_TO_INTERNAL = {
    "stripe": {
        "payment_intent.succeeded": "payment_succeeded",
        "payment_intent.payment_failed": "payment_failed",
    },
}
