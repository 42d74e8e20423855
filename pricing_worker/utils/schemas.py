"""
Pydantic Schemas - Data Validation Models

Defines the schemas that flow through the worker:
- Pricing events popped from the queue
- Result tuples reported back to the supervisor

Usage:
    from pricing_worker.utils.schemas import PricingEvent

    event = PricingEvent(**orjson.loads(raw))
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PricingEvent(BaseModel):
    """Pricing event as published on the events queue.

    Input feed format:
    {
        "price": 100,
        "wday": 2,
        "index": "e1"
    }

    Extra fields in the feed (payload, user_id, ...) are accepted and ignored.
    `total` is filled in by the transformer.
    """

    model_config = ConfigDict(extra="ignore")

    price: float = Field(..., description="List price")
    wday: Any = Field(default=None, description="Weekday index (0-6); anything else earns no discount")
    index: Any = Field(..., description="Opaque event identifier, echoed back")
    total: Optional[float] = Field(default=None, description="Discounted price")


class WorkerResult(BaseModel):
    """Result of one processed event.

    Sent over the result channel as an ordered 3-element list:
    [timestamp_ms, index, fingerprint]
    """

    ts: int = Field(..., description="Emission timestamp in milliseconds")
    index: Any = Field(..., description="Index echoed from the event")
    fingerprint: str = Field(..., description="Hex digest of the raw payload")

    def to_message(self) -> list[Any]:
        """Channel representation of the result."""
        return [self.ts, self.index, self.fingerprint]
