"""
Event Publisher for the Pricing Queue

Seeds the events queue from a JSONL file. Lines are pushed exactly as they
appear in the file (minus the line terminator) because workers fingerprint
the raw payload.

Usage:
    from pricing_worker.apps.producer.publisher import EventProducer

    await EventProducer().publish_file("events.jsonl", stop_after=8)
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from pricing_worker.utils.config import settings
from pricing_worker.utils.mq import RedisQueue

logger = logging.getLogger(__name__)

STOP_PAYLOAD = ""


def read_events(path: str) -> list[str]:
    """
    Read raw events from a JSONL file.

    Args:
        path: JSONL file, one event per line

    Returns:
        Non-blank lines without their line terminator

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    events_path = Path(path)

    if not events_path.is_file():
        error_msg = f"Events file not found: {path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    with open(events_path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


class EventProducer:
    """Publisher of raw pricing events onto the shared queue."""

    def __init__(self, queue: Optional[RedisQueue] = None, queue_name: Optional[str] = None) -> None:
        self.queue = queue or RedisQueue()
        self.queue_name = queue_name or settings.EVENTS_QUEUE

    async def publish(self, events: Iterable[str], stop_after: int = 0) -> int:
        """
        Push raw events, then `stop_after` empty stop payloads.

        Args:
            events: Raw payload strings
            stop_after: Number of stop payloads to append

        Returns:
            Number of items pushed

        Raises:
            redis.RedisError: If publishing fails after retries
        """
        payloads = list(events)
        payloads.extend([STOP_PAYLOAD] * stop_after)

        if not payloads:
            logger.info("Nothing to publish", extra={"queue": self.queue_name})
            return 0

        try:
            await self.queue.push(self.queue_name, *payloads)

            logger.info(
                "Published events",
                extra={
                    "queue": self.queue_name,
                    "events": len(payloads) - stop_after,
                    "stop_payloads": stop_after,
                },
            )

        except Exception as e:
            logger.error(
                "Failed to publish events",
                extra={"queue": self.queue_name, "error": str(e)},
            )
            raise

        finally:
            await self.queue.close()

        return len(payloads)

    async def publish_file(self, path: str, stop_after: int = 0) -> int:
        """Push every event in a JSONL file; see publish()."""
        return await self.publish(read_events(path), stop_after=stop_after)
