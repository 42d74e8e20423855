"""
Result Reporters

One-way delivery of worker results. Reporters never block the consumer loop
and never signal anything back to it.
"""

import logging
from typing import Any, Protocol

from pricing_worker.utils.schemas import WorkerResult

logger = logging.getLogger(__name__)


class ResultReporter(Protocol):
    def send(self, result: WorkerResult) -> None: ...


class ChannelReporter:
    """Report results to the supervising process through a multiprocessing queue."""

    def __init__(self, channel: Any) -> None:
        """
        Args:
            channel: multiprocessing.Queue shared with the supervisor
        """
        self.channel = channel

    def send(self, result: WorkerResult) -> None:
        self.channel.put_nowait(result.to_message())


class LogReporter:
    """Report results to the log; used when a worker runs without a supervisor."""

    def send(self, result: WorkerResult) -> None:
        logger.info(
            "Result %s",
            result.to_message(),
            extra={"index": result.index, "fingerprint": result.fingerprint, "result_ts": result.ts},
        )
