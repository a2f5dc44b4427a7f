"""
Application Tests

Tests for the application shell:
- Root and health endpoints
- Application factory
- Settings validation
- Rate limiter helpers
"""

from unittest.mock import MagicMock

import pytest
from fastapi import status
from pydantic import ValidationError

from catalog.config import Settings
from catalog.main import create_app
from catalog.services.rate_limiter import get_client_ip


class TestRootAndHealth:
    """Tests for GET / and GET /health."""

    def test_root(self, client):
        """Test the root endpoint points to the API."""
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["books"] == "/books"
        assert data["docs"] == "/docs"

    def test_health_reports_catalog_size(self, client, book_store):
        """Test the health check reports the number of books."""
        book_store.delete_book("9780345339683")

        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["books"] == 9
        assert data["rate_limiting"]["enabled"] is False

    def test_openapi_lists_book_routes(self, client):
        """Test the OpenAPI document describes the book endpoints."""
        response = client.get("/openapi.json")

        assert response.status_code == status.HTTP_200_OK
        paths = response.json()["paths"]
        assert set(paths["/books"]) == {"get", "post"}
        assert set(paths["/books/{isbn}"]) == {"get", "patch", "delete"}
        assert "/books/stream" in paths
        assert "/books/error" in paths


class TestCreateApp:
    """Tests for the application factory."""

    def test_each_app_owns_a_seeded_store(self):
        """Test two apps never share a store."""
        first = create_app()
        second = create_app()

        assert first.state.book_store is not second.state.book_store
        assert first.state.book_store.count() == 10

        first.state.book_store.clear()
        assert second.state.book_store.count() == 10

    def test_stream_interval_from_settings(self):
        """Test the stream interval comes from configuration."""
        app = create_app()

        assert app.state.stream_interval == 1.0


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        """Test the default configuration."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "Book Catalog API"
        assert settings.stream_interval_seconds == 1.0
        assert settings.seed_sample_data is True

    def test_log_level_is_uppercased(self):
        """Test log levels are accepted in any case."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_environment(self):
        """Test unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="moon")

    def test_is_production(self):
        """Test only the production environment counts as production."""
        assert Settings(_env_file=None, environment="Production").is_production
        assert not Settings(_env_file=None, environment="staging").is_production

    def test_stream_interval_must_be_positive(self):
        """Test a zero stream interval is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, stream_interval_seconds=0)

    def test_allowed_origins_list(self):
        """Test CORS origins are split and trimmed."""
        settings = Settings(_env_file=None, allowed_origins="http://a, http://b")

        assert settings.allowed_origins_list == ["http://a", "http://b"]


class TestClientIp:
    """Tests for the rate limiter key function."""

    def test_forwarded_for_first_address(self):
        """Test the first X-Forwarded-For address is the client."""
        request = MagicMock()
        request.headers = {"X-Forwarded-For": "10.0.0.1, 10.0.0.2"}

        assert get_client_ip(request) == "10.0.0.1"

    def test_real_ip(self):
        """Test X-Real-IP is used when there is no X-Forwarded-For."""
        request = MagicMock()
        request.headers = {"X-Real-IP": " 10.0.0.3 "}

        assert get_client_ip(request) == "10.0.0.3"
