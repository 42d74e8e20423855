"""
Worker Supervisor - Process Pool and Result Collection

Starts a pool of identical worker processes that compete for the same queue,
collects their results from a shared one-way channel and writes the run report.

Features:
- Configurable pool size (WORKER_COUNT)
- Result collection until every worker has exited
- CSV run report: OUTPUT_DIR/<REPORT_PREFIX>-<timestamp_ms>.csv
- Abnormal worker exits are logged and reflected in the exit status

Usage:
    python -m pricing_worker.apps.supervisor
"""

import csv
import logging
import multiprocessing
import queue
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from pricing_worker.apps.worker.consumer import now_ms, worker_process_main
from pricing_worker.utils.config import settings

logger = logging.getLogger(__name__)


class WorkerSupervisor:
    """
    Supervisor for a pool of pricing workers.

    Handles:
    - Worker process startup
    - Draining the shared result channel
    - Writing the run report
    - Noticing workers that exited abnormally
    """

    def __init__(
        self,
        worker_count: Optional[int] = None,
        output_dir: Optional[str] = None,
        target: Callable[[Any], None] = worker_process_main,
        poll_interval: float = 0.2,
    ) -> None:
        """
        Initialize supervisor.

        Args:
            worker_count: Number of worker processes, defaults to settings.WORKER_COUNT
            output_dir: Report directory, defaults to settings.OUTPUT_DIR
            target: Worker process entry point, called with the result channel
            poll_interval: Seconds to wait on the channel between liveness checks
        """
        self.worker_count = worker_count or settings.WORKER_COUNT
        self.output_dir = Path(output_dir or settings.OUTPUT_DIR)
        self.target = target
        self.poll_interval = poll_interval
        self.context = multiprocessing.get_context("spawn")

        logger.info(
            "WorkerSupervisor initialized (workers=%d, queue=%s, output_dir=%s)",
            self.worker_count,
            settings.EVENTS_QUEUE,
            self.output_dir,
        )

    def start_workers(self, channel: Any) -> list[multiprocessing.Process]:
        """Start the worker pool, all sharing `channel`."""
        processes = []
        for number in range(self.worker_count):
            process = self.context.Process(
                target=self.target,
                args=(channel,),
                name=f"pricing-worker-{number}",
            )
            process.start()
            processes.append(process)

        logger.info("Started %d workers", len(processes))
        return processes

    def collect_results(self, processes: Sequence[Any], channel: Any) -> list[list[Any]]:
        """
        Drain the result channel until every worker has exited.

        Args:
            processes: Worker processes (anything exposing is_alive())
            channel: Result channel shared with the workers

        Returns:
            Results in arrival order
        """
        results: list[list[Any]] = []

        while True:
            try:
                results.append(channel.get(timeout=self.poll_interval))
                continue
            except queue.Empty:
                pass

            if not any(process.is_alive() for process in processes):
                break

        # Workers flush their channel buffers before exiting
        while True:
            try:
                results.append(channel.get(timeout=self.poll_interval))
            except queue.Empty:
                break

        return results

    def check_workers(self, processes: Sequence[Any]) -> int:
        """
        Join workers and count the ones that exited abnormally.

        Returns:
            Number of failed workers
        """
        failed = 0
        for process in processes:
            process.join()
            if process.exitcode != 0:
                failed += 1
                logger.error(
                    "Task failed",
                    extra={"worker": process.name, "exitcode": process.exitcode},
                )
        return failed

    def write_report(self, results: Sequence[Sequence[Any]]) -> Path:
        """
        Write results as timestamp_ms,index,fingerprint rows.

        Returns:
            Path of the written report
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        report_path = self.output_dir / f"{settings.REPORT_PREFIX}-{now_ms()}.csv"

        with open(report_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            for row in results:
                writer.writerow(row)

        logger.info("Report written: path=%s, rows=%d", str(report_path), len(results))
        return report_path

    def run(self) -> int:
        """
        Run the pool to completion.

        Returns:
            0 if every worker stopped normally, 1 otherwise
        """
        channel = self.context.Queue()
        processes = self.start_workers(channel)

        results = self.collect_results(processes, channel)
        failed = self.check_workers(processes)
        self.write_report(results)

        logger.info(
            "Supervisor finished",
            extra={"results": len(results), "failed_workers": failed},
        )
        return 1 if failed else 0
