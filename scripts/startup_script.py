#!/usr/bin/env python3
"""
Startup script for the playground API.
Validates configuration and database connectivity, then serves the app.
"""
import sys
import logging
import asyncio

def setup_logging():
    """Setup basic logging for startup validation."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger(__name__)

async def check_database() -> bool:
    logger = logging.getLogger(__name__)
    try:
        from sqlalchemy import text
        from dbplayground.db import engine

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection validated")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False

async def validate_configuration() -> bool:
    logger = setup_logging()
    logger.info("Starting DB Playground configuration validation...")

    try:
        from dbplayground.config import get_settings

        settings = get_settings()
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Debug mode: {settings.debug}")
        logger.info(f"Database: {settings.database_url.split('://', 1)[0]}")
    except Exception as e:
        logger.error(f"Configuration validation failed: {e}")
        logger.error("Please check your environment variables and .env file")
        return False

    if not await check_database():
        return False

    logger.info("Configuration validation completed successfully")
    return True

async def main():
    if not await validate_configuration():
        print("\nConfiguration validation failed. Server startup aborted.")
        sys.exit(1)

    try:
        import uvicorn
        from dbplayground.main import app
        from dbplayground.config import settings

        config = uvicorn.Config(
            app=app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            access_log=settings.environment != "production",
        )

        server = uvicorn.Server(config)
        await server.serve()

    except Exception as e:
        logger = logging.getLogger(__name__)
        logger.error(f"Server startup failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
        sys.exit(0)
