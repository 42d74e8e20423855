"""
Producer Module Entry Point

Allows execution via: python -m pricing_worker.apps.producer events.jsonl [--stop-after N]
"""

import argparse
import asyncio
import logging
import sys

from pricing_worker.apps.producer.publisher import EventProducer
from pricing_worker.utils.config import settings
from pricing_worker.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pricing_worker.apps.producer",
        description="Push raw pricing events onto the shared events queue.",
    )
    parser.add_argument("events_file", help="JSONL file, one raw event per line")
    parser.add_argument(
        "--queue",
        default=settings.EVENTS_QUEUE,
        help="Queue name (default: %(default)s)",
    )
    parser.add_argument(
        "--stop-after",
        type=int,
        default=0,
        help="Push this many empty stop payloads after the events",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> None:
    """Main entry point for the producer."""
    args = parse_args(argv)
    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    producer = EventProducer(queue_name=args.queue)

    try:
        await producer.publish_file(args.events_file, stop_after=args.stop_after)
    except Exception as e:
        logger.error("Producer failed", extra={"error": str(e)}, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
