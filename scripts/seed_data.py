# Seed the sample users
import asyncio
import logging
import sys

from dbplayground.config import settings
from dbplayground.db import init_db
from dbplayground.playground import seed

def main():
    logging.basicConfig(level=settings.log_level, format=settings.log_format, handlers=[logging.StreamHandler(sys.stdout)])
    init_db()
    created = asyncio.run(seed())
    print(f"Seeded {len(created)} user(s)")

if __name__ == "__main__":
    main()
