"""
Supervisor Module Entry Point

Allows execution via: python -m pricing_worker.apps.supervisor
"""

import logging
import sys

from pricing_worker.apps.supervisor.supervisor import WorkerSupervisor
from pricing_worker.utils.config import settings
from pricing_worker.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the supervisor."""
    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    try:
        status = WorkerSupervisor().run()
    except Exception as e:
        logger.error("Supervisor failed", extra={"error": str(e)}, exc_info=True)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
