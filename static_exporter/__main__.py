"""Run the exporter under uvicorn: ``python -m static_exporter``."""

import uvicorn

from static_exporter.config import settings


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    uvicorn.run(
        "static_exporter.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,  # keep the structlog handlers installed by setup_logging
    )


if __name__ == "__main__":
    main()
