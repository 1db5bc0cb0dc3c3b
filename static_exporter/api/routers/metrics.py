"""
Prometheus metrics endpoint.

Serves the static exposition for Prometheus scraping at the configured
metrics path.
"""

from fastapi import APIRouter, Response
from starlette.requests import Request

from static_exporter.exposition import CONTENT_TYPE, METRICS_PAYLOAD


def _payload_response() -> Response:
    return Response(
        content=METRICS_PAYLOAD,
        media_type=CONTENT_TYPE,
    )


async def metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns the fixed exposition in Prometheus text format. Query string,
    headers and body are ignored.
    """
    return _payload_response()


async def metrics_any_method(request: Request) -> Response:
    """Same payload for every other HTTP method, extension methods included."""
    return _payload_response()


def create_router(path: str) -> APIRouter:
    """
    Build the metrics router.

    GET is the documented operation. A method-less starlette route after it
    answers everything else.

    Args:
        path: Route path, e.g. "/metrics" or "/".
    """
    router = APIRouter(tags=["Metrics"])
    router.add_api_route(path, metrics, methods=["GET"])
    router.add_route(path, metrics_any_method, include_in_schema=False)
    return router
