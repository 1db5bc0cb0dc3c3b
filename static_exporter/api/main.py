"""FastAPI application setup and configuration."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from static_exporter import __version__
from static_exporter.api.exceptions import exporter_error_handler
from static_exporter.api.middleware import RequestLoggingMiddleware
from static_exporter.api.routers import health, metrics
from static_exporter.config import Settings, settings
from static_exporter.exceptions import ExporterError
from static_exporter.exposition import validate_exposition
from static_exporter.utils.logging import get_logger, setup_logging

# Setup logging first
setup_logging()
log = get_logger(__name__)

tags_metadata = [
    {"name": "Health", "description": "Liveness checks"},
    {"name": "Metrics", "description": "Static Prometheus exposition"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    config: Settings = app.state.config
    log.info(
        "exporter_starting",
        version=__version__,
        environment=config.environment,
        metrics_path=config.server.metrics_path,
    )

    families = validate_exposition()
    log.info(
        "exposition_validated",
        families=[family.name for family in families],
        samples=sum(len(family.samples) for family in families),
    )

    yield

    log.info("exporter_stopping")


def create_app(config: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build the app from. Defaults to the
            environment-loaded settings.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or settings

    app = FastAPI(
        title="Static Metrics Exporter",
        description="Serves a fixed Prometheus metrics exposition",
        version=__version__,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(RequestLoggingMiddleware, metrics_path=config.server.metrics_path)

    app.add_exception_handler(ExporterError, exporter_error_handler)

    app.include_router(health.router)
    app.include_router(metrics.create_router(config.server.metrics_path))

    return app


# Create the app instance
app = create_app()
