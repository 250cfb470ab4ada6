"""Entry point for the User Directory API server.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example in Docker
where you only specify a single Python file to run.

Host, port and log level are read from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``user_directory_api/app/core/config.py``
for the full list of supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_directory_api.app.core.config import settings
from user_directory_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on the configured address."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
