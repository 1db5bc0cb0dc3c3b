"""Health check endpoints."""

from fastapi import APIRouter

from static_exporter import __version__
from static_exporter.exposition import validate_exposition
from static_exporter.utils.logging import get_logger

router = APIRouter(tags=["Health"])
log = get_logger(__name__)


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint that verifies the served exposition still parses.

    An ExpositionFormatError propagates to the exporter error handler (500).
    """
    families = validate_exposition()
    log.debug("health_check", status="ok", families=len(families))

    return {
        "status": "ok",
        "version": __version__,
        "families": len(families),
    }
