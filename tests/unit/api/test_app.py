"""
Unit tests for application setup: health, startup validation, error handling.
"""

import pytest
from unittest.mock import patch

from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from static_exporter import __version__
from static_exporter.api.main import create_app
from static_exporter.config import ServerSettings, Settings
from static_exporter.exceptions import ExpositionFormatError


class TestHealthEndpoint:
    """Test GET /health."""

    def test_health_ok(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__, "families": 2}

    def test_malformed_payload_returns_json_500(self, client: TestClient):
        """ExpositionFormatError from the health check goes through the error handler."""
        with patch(
            "static_exporter.api.routers.health.validate_exposition",
            side_effect=ExpositionFormatError("Invalid exposition text: bad"),
        ):
            response = client.get("/health")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Invalid exposition text: bad",
            "type": "ExpositionFormatError",
        }


class TestStartupValidation:
    """Test exposition validation in the application lifespan."""

    def test_startup_validates_payload(self):
        with patch("static_exporter.api.main.validate_exposition") as mock_validate:
            mock_validate.return_value = []
            with TestClient(create_app()):
                pass

        mock_validate.assert_called_once()

    def test_startup_aborts_on_malformed_payload(self):
        with patch(
            "static_exporter.api.main.validate_exposition",
            side_effect=ExpositionFormatError("Invalid exposition text: bad"),
        ):
            with pytest.raises(ExpositionFormatError):
                with TestClient(create_app()):
                    pass

    def test_startup_logs_environment_and_path(self):
        config = Settings(environment="staging", server=ServerSettings(metrics_path="/scrape"))

        with patch("static_exporter.api.main.log") as mock_log:
            with TestClient(create_app(config)):
                pass

        mock_log.info.assert_any_call(
            "exporter_starting",
            version=__version__,
            environment="staging",
            metrics_path="/scrape",
        )


class TestRequestLogging:
    """Test RequestLoggingMiddleware events."""

    def test_scrape_logged_with_payload_size(self, client: TestClient, expected_body):
        with capture_logs() as logs:
            client.get("/metrics")

        scrapes = [entry for entry in logs if entry["event"] == "scrape"]
        assert len(scrapes) == 1
        assert scrapes[0]["method"] == "GET"
        assert scrapes[0]["status"] == 200
        assert scrapes[0]["bytes"] == len(expected_body.encode("utf-8"))

    def test_other_paths_logged_as_request(self, client: TestClient):
        with capture_logs() as logs:
            client.get("/health")

        events = [entry["event"] for entry in logs]
        assert "request" in events
        assert "scrape" not in events


class TestServerEntryPoint:
    """Test python -m static_exporter."""

    def test_main_runs_uvicorn_with_settings(self):
        from static_exporter import __main__ as entry

        with patch.object(entry.uvicorn, "run") as mock_run, patch.object(entry, "settings") as mock_settings:
            mock_settings.server.host = "127.0.0.1"
            mock_settings.server.port = 9300

            entry.main()

        mock_run.assert_called_once_with(
            "static_exporter.api.main:app",
            host="127.0.0.1",
            port=9300,
            log_config=None,
        )
