"""
Event Transformer - Discount and Fingerprint

Turns one raw queue payload into a priced event plus a content fingerprint.

The fingerprint is taken over the raw payload exactly as it was popped, before
parsing and pricing, so byte-identical inputs always share a fingerprint and
any byte difference (whitespace, key order) changes it.

Usage:
    from pricing_worker.apps.worker.transformer import EventTransformer

    event, signature = EventTransformer().process('{"price":100,"wday":2,"index":"e1"}')
    event.total  # 90.0
"""

import hashlib

import orjson

from pricing_worker.utils.discounts import discount_for
from pricing_worker.utils.schemas import PricingEvent


def fingerprint(raw_event: str | bytes) -> str:
    """Hex MD5 digest of the raw payload."""
    if isinstance(raw_event, str):
        raw_event = raw_event.encode("utf-8")
    return hashlib.md5(raw_event).hexdigest()


def apply_discount(event: PricingEvent) -> PricingEvent:
    """Set event.total from its price and weekday discount."""
    discount = discount_for(event.wday)
    event.total = event.price * (1 - discount / 100)
    return event


class EventTransformer:
    """Pure raw-payload to (priced event, fingerprint) transform."""

    def parse(self, raw_event: str | bytes) -> PricingEvent:
        """
        Parse and validate a raw payload.

        Raises:
            orjson.JSONDecodeError: If the payload is not valid JSON
            pydantic.ValidationError: If required fields are missing or mistyped
        """
        return PricingEvent.model_validate(orjson.loads(raw_event))

    def process(self, raw_event: str | bytes) -> tuple[PricingEvent, str]:
        """
        Price one event and fingerprint its raw payload.

        Args:
            raw_event: Payload string as received from the queue

        Returns:
            (priced event, hex fingerprint of raw_event)
        """
        event = self.parse(raw_event)
        signature = fingerprint(raw_event)
        return apply_discount(event), signature
