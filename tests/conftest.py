"""
Pytest configuration and shared fixtures for the exporter test suite.

Test Structure:
- tests/unit/ - Fast tests against the ASGI app via TestClient (no network)

Run all tests:
    pytest
"""

import pytest
from fastapi.testclient import TestClient

from static_exporter.api.main import create_app

EXPECTED_BODY = (
    "# HELP php_requests_total The total number of HTTP requests.\n"
    "# TYPE php_requests_total counter\n"
    'php_requests_total{method="get"} 1027\n'
    'php_requests_total{method="post"} 3\n'
    "\n"
    "# HELP php_errors_total The total number of errors.\n"
    "# TYPE php_errors_total counter\n"
    "php_errors_total 42"
)

EXPECTED_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


@pytest.fixture
def client():
    """Test client with lifespan events run (startup validation included)."""
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def expected_body() -> str:
    """Exposition text every metrics response must carry."""
    return EXPECTED_BODY


@pytest.fixture
def expected_content_type() -> str:
    return EXPECTED_CONTENT_TYPE
