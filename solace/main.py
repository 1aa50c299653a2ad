"""
FastAPI application entry point.
Mounts the v1 API, Prometheus metrics and uploaded media; prepares search indices on startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import make_asgi_app

from solace.api.v1.router import api_router
from solace.config import get_settings
from solace.core.errors import setup_exception_handlers
from solace.core.logging import configure_logging
from solace.search.elasticsearch_client import ensure_indices

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create search indices when Elasticsearch is reachable."""
    try:
        await ensure_indices()
    except Exception as e:
        # Search falls back to the database while ES is down
        logger.warning("Elasticsearch indices not ensured: %s", e)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Grief support community: memorials, forums, meetups, messaging, gift store and sponsors.",
        version="1.0.0",
        lifespan=lifespan,
    )
    setup_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.site_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router, prefix="/api")

    # Uploaded memorial photos
    app.mount(settings.media_url, StaticFiles(directory=settings.media_root, check_dir=False), name="media")

    return app


app = create_app()
