"""
Worker Consumer - Competing Consumer for the Pricing Event Queue

Drains the shared events queue with blocking pops, prices each event and
reports [timestamp_ms, index, fingerprint] to the supervising process.

Several identical workers run side by side against the same queue; Redis
decides which worker receives which item.

Termination:
- No item within the pop timeout -> stop (idle shutdown)
- Empty payload popped -> stop
- Malformed payload -> error propagates and the worker process aborts

Usage:
    # Standalone, results go to the log
    python -m pricing_worker.apps.worker

    # Under the supervisor
    python -m pricing_worker.apps.supervisor
"""

import asyncio
import enum
import logging
import time
from typing import Any, Optional

from pricing_worker.apps.worker.reporter import ChannelReporter, ResultReporter
from pricing_worker.apps.worker.transformer import EventTransformer
from pricing_worker.utils.config import settings
from pricing_worker.utils.logging import setup_logging
from pricing_worker.utils.mq import RedisQueue
from pricing_worker.utils.schemas import WorkerResult

logger = logging.getLogger(__name__)


class WorkerState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


def now_ms() -> int:
    return time.time_ns() // 1_000_000


class EventConsumer:
    """
    Consumer loop for the pricing event queue.

    Handles:
    - One blocking pop per iteration
    - Delegation to the transformer
    - Result reporting
    - Running -> Stopped transition on idle timeout or empty payload
    """

    def __init__(
        self,
        queue: Any,
        reporter: ResultReporter,
        queue_name: Optional[str] = None,
        timeout: Optional[int] = None,
        transformer: Optional[EventTransformer] = None,
    ) -> None:
        """
        Initialize event consumer.

        Args:
            queue: Queue client exposing `async pop(queue_name, timeout)`
            reporter: Result reporter exposing `send(result)`
            queue_name: Queue to drain, defaults to settings.EVENTS_QUEUE
            timeout: Pop timeout in seconds, defaults to settings.POP_TIMEOUT_SECONDS
            transformer: Event transformer, defaults to EventTransformer()
        """
        self.queue = queue
        self.reporter = reporter
        self.queue_name = queue_name or settings.EVENTS_QUEUE
        self.timeout = timeout or settings.POP_TIMEOUT_SECONDS
        self.transformer = transformer or EventTransformer()
        self.state = WorkerState.RUNNING
        self._processed_count = 0

    @property
    def processed_count(self) -> int:
        return self._processed_count

    async def step(self) -> WorkerState:
        """
        Run one iteration of the loop.

        Returns:
            State after the iteration

        Raises:
            Exception: If the popped payload cannot be processed
        """
        response = await self.queue.pop(self.queue_name, self.timeout)

        if response is None:
            logger.info("Queue idle for %ss, stopping", self.timeout)
            self.state = WorkerState.STOPPED
            return self.state

        _, raw_event = response
        if not raw_event:
            logger.info("Empty payload received, stopping")
            self.state = WorkerState.STOPPED
            return self.state

        try:
            event, signature = self.transformer.process(raw_event)
        except Exception as e:
            logger.error(
                "Failed to process event",
                extra={"queue": self.queue_name, "raw_event": raw_event, "error": str(e)},
                exc_info=True,
            )
            raise

        self.reporter.send(WorkerResult(ts=now_ms(), index=event.index, fingerprint=signature))
        self._processed_count += 1

        logger.debug(
            "Processed event index=%s total=%s fingerprint=%s",
            event.index,
            event.total,
            signature,
        )
        return self.state

    async def run(self) -> int:
        """
        Consume until the loop reaches the Stopped state.

        Returns:
            Number of processed events
        """
        logger.info(
            "Consumer started",
            extra={"queue": self.queue_name, "pop_timeout": self.timeout},
        )

        while self.state is WorkerState.RUNNING:
            await self.step()

        logger.info(
            "Consumer stopped",
            extra={"queue": self.queue_name, "processed_events": self._processed_count},
        )
        return self._processed_count


async def run_worker(reporter: ResultReporter, queue: Optional[RedisQueue] = None) -> int:
    """
    Run one worker against Redis until it stops.

    Args:
        reporter: Where results are sent
        queue: Queue client, defaults to a RedisQueue built from settings

    Returns:
        Number of processed events
    """
    queue = queue or RedisQueue()

    try:
        await queue.connect()
        consumer = EventConsumer(queue, reporter)
        return await consumer.run()
    finally:
        await queue.close()


def worker_process_main(channel: Any) -> None:
    """
    Entry point of a supervised worker process.

    Returns normally (exit code 0) once the loop stops; any unhandled error
    terminates the process with a non-zero exit code.

    Args:
        channel: multiprocessing.Queue shared with the supervisor
    """
    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)
    asyncio.run(run_worker(ChannelReporter(channel)))
