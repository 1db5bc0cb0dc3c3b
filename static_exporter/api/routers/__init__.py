"""API routers package."""

from static_exporter.api.routers import health, metrics

__all__ = ["health", "metrics"]
