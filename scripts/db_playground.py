#!/usr/bin/env python3
"""
Play around with the users table: look one user up by first name and list
everybody, printing what comes back.
"""
import sys
import logging
import asyncio

def setup_logging():
    """Setup basic logging for the playground run."""
    from dbplayground.config import settings

    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger(__name__)

async def main():
    logger = setup_logging()

    from dbplayground.db import init_db
    from dbplayground.playground import run

    init_db()
    record, names = await run()
    logger.debug(f"Playground finished: record={record!r} names={names!r}")

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)
