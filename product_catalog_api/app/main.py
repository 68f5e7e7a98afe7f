"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging, installs
the error translator and includes the API router.  ``create_app`` builds
a fresh application around a ``ProductStore``; the module-level ``app``
is the instance served in production, e.g.::

    uvicorn product_catalog_api.app.main:app --port 3000

Tests call ``create_app`` with their own ``Settings`` and store so that
each test runs against isolated state.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.security import enforce_api_key
from .core.store import ProductStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[ProductStore]
        Product store owned by the application.  A new empty store is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that anything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    register_exception_handlers(app)
    app.middleware("http")(enforce_api_key)
    app.include_router(api_router)

    if not settings.api_key:
        logger.warning("API_KEY is not set; every request to /api/products will be rejected")
    return app


# Created at import time so uvicorn can discover it.
app = create_app()
