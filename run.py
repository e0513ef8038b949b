"""Entry point for serving the Contacts API.

Starts the FastAPI application under uvicorn.  The listen address and
log level come from the environment (``API_HOST``, ``API_PORT``,
``LOG_LEVEL``), see ``contacts_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from contacts_api.app.core.config import settings
from contacts_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
