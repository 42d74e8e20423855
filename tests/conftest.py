"""Shared fixtures and in-memory fakes for worker tests."""

from collections import deque
from typing import Any, Optional

import pytest


class FakeQueue:
    """In-memory stand-in for RedisQueue; an empty queue behaves like a timeout."""

    def __init__(self, *payloads: str) -> None:
        self.items = deque(payloads)
        self.pops: list[tuple[str, int]] = []
        self.connected = False
        self.closed = False

    async def connect(self) -> None:
        self.connected = True

    async def pop(self, queue_name: str, timeout: int) -> Optional[tuple[str, str]]:
        self.pops.append((queue_name, timeout))
        if not self.items:
            return None
        return queue_name, self.items.popleft()

    async def close(self) -> None:
        self.closed = True


class RecordingReporter:
    def __init__(self) -> None:
        self.sent: list[Any] = []

    def send(self, result: Any) -> None:
        self.sent.append(result)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_queue():
    return FakeQueue
