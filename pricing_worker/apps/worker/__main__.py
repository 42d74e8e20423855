"""
Worker Module Entry Point

Allows execution via: python -m pricing_worker.apps.worker

Runs a single worker without a supervisor; results are written to the log.
"""

import asyncio
import logging
import sys

from pricing_worker.apps.worker.consumer import run_worker
from pricing_worker.apps.worker.reporter import LogReporter
from pricing_worker.utils.config import settings
from pricing_worker.utils.logging import setup_logging

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main entry point for a standalone worker."""
    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    try:
        await run_worker(LogReporter())
    except Exception as e:
        logger.error("Worker failed", extra={"error": str(e)}, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
