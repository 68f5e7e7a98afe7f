"""Entry point for the Product Catalog API.

Starts the FastAPI application under Uvicorn.  Configuration is read
from environment variables (see ``product_catalog_api.app.core.config``):
``API_KEY`` must be set for product requests to be accepted, and
``HOST``/``PORT`` choose the bind address (defaults ``0.0.0.0:3000``).

Usage:
    API_KEY=secret python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
