"""
Static metrics exposition.

The exporter serves a fixed block of Prometheus text. Nothing is collected
or aggregated; the counter values below are literals.
"""

from prometheus_client.metrics_core import Metric
from prometheus_client.parser import text_string_to_metric_families

from static_exporter.exceptions import ExpositionFormatError

# Always text format 0.0.4, independent of prometheus_client.CONTENT_TYPE_LATEST.
CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

METRIC_LINES: tuple[str, ...] = (
    "# HELP php_requests_total The total number of HTTP requests.",
    "# TYPE php_requests_total counter",
    'php_requests_total{method="get"} 1027',
    'php_requests_total{method="post"} 3',
    "",
    "# HELP php_errors_total The total number of errors.",
    "# TYPE php_errors_total counter",
    "php_errors_total 42",
)


def get_metrics() -> str:
    """Return the exposition text, newline-joined with no trailing newline."""
    return "\n".join(METRIC_LINES)


METRICS_PAYLOAD: bytes = get_metrics().encode("utf-8")


def parse_metric_families(text: str) -> list[Metric]:
    """
    Parse exposition text into metric families.

    Args:
        text: Prometheus text-format exposition.

    Returns:
        Parsed families in declaration order.

    Raises:
        ExpositionFormatError: If the text is not valid exposition format.
    """
    try:
        return list(text_string_to_metric_families(text))
    except ValueError as e:
        raise ExpositionFormatError(f"Invalid exposition text: {e}") from e


def validate_exposition() -> list[Metric]:
    """Parse the served payload, raising ExpositionFormatError if it is malformed."""
    return parse_metric_families(METRICS_PAYLOAD.decode("utf-8"))
