"""
Redis list-queue wrapper for the pricing event queue.

Consumers issue one blocking pop per call; producers push with retries.
"""

import logging
from typing import Optional

import redis.asyncio as redis
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from pricing_worker.utils.config import settings

logger = logging.getLogger(__name__)


class RedisQueue:
    """Blocking FIFO queue on top of a Redis list (LPUSH / BRPOP)."""

    def __init__(self, redis_url: Optional[str] = None) -> None:
        """Initialize queue client.

        Args:
            redis_url: Redis connection URL, defaults to settings.redis_url
        """
        self.redis_url = redis_url or settings.redis_url
        self.client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Establish Redis connection with connection pooling."""
        if self.client is None:
            self.client = redis.from_url(
                self.redis_url,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                decode_responses=False,  # Payloads are fingerprinted as raw bytes
            )

    async def pop(self, queue_name: str, timeout: int) -> Optional[tuple[str, bytes]]:
        """Block until an item is available or the timeout elapses.

        Args:
            queue_name: Redis list to pop from
            timeout: Seconds to wait for an item

        Returns:
            (queue_name, raw_payload bytes), or None when the wait timed out

        Raises:
            redis.RedisError: If the backend is unavailable
        """
        if self.client is None:
            await self.connect()

        response = await self.client.brpop([queue_name], timeout=timeout)
        if response is None:
            return None

        name, payload = response
        return name.decode("utf-8"), payload

    @retry(
        retry=retry_if_exception_type((redis.ConnectionError, redis.TimeoutError)),
        stop=stop_after_attempt(settings.PUSH_MAX_RETRIES),
        wait=wait_exponential(multiplier=1, min=1, max=5),
        reraise=True,
    )
    async def push(self, queue_name: str, *payloads: str) -> int:
        """Append payloads so that consumers pop them in the given order.

        Args:
            queue_name: Redis list to push to
            payloads: Raw payload strings, pushed verbatim

        Returns:
            Length of the list after the push

        Raises:
            redis.RedisError: If pushing fails after retries
        """
        if self.client is None:
            await self.connect()

        return await self.client.lpush(queue_name, *payloads)

    async def close(self) -> None:
        """Close Redis connection and cleanup resources."""
        if self.client:
            await self.client.aclose()
            self.client = None
