"""Exception handlers for the HTTP API."""

from fastapi import status
from fastapi.responses import JSONResponse

from static_exporter.exceptions import ExporterError


async def exporter_error_handler(request, exc: ExporterError):
    """Convert ExporterError to a JSON error response."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc), "type": exc.__class__.__name__}
    )
