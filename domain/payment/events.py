"""
Payment webhook events.

A gateway callback is reduced to a tagged event: the kinds this service acts
on are explicit members, everything else is carried as OTHER together with the
raw gateway type so it is never dropped or mistaken for a success.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class WebhookEventType(str, Enum):
    PAYMENT_SUCCEEDED = "payment_succeeded"
    PAYMENT_FAILED = "payment_failed"
    OTHER = "other"


@dataclass(frozen=True)
class WebhookEvent:
    type: WebhookEventType
    raw_type: str
    object_id: str
    object_payload: Mapping[str, Any] = field(default_factory=dict)
    event_id: Optional[str] = None
    provider: str = "stripe"

    @classmethod
    def from_gateway(
        cls,
        raw_type: str,
        data_object: Mapping[str, Any],
        *,
        mapping: Mapping[str, str],
        event_id: Optional[str] = None,
        provider: str = "stripe",
    ) -> "WebhookEvent":
        """Build an event from a gateway type string and its data object."""
        kind = mapping.get(raw_type)
        event_type = WebhookEventType(kind) if kind else WebhookEventType.OTHER
        return cls(
            type=event_type,
            raw_type=raw_type,
            object_id=str(data_object.get("id") or ""),
            object_payload=data_object,
            event_id=event_id,
            provider=provider,
        )

    @property
    def is_other(self) -> bool:
        return self.type is WebhookEventType.OTHER
