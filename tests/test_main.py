"""Tests for main API endpoints and error translation."""

from pathlib import Path

from fastapi import status
from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns service information."""
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["message"] == "Welcome to coursehub API"
    assert data["version"] == "0.1.0"
    assert data["api"] == "/api/v1"


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "healthy"}


def test_request_id_header(client: TestClient) -> None:
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_unknown_route_uses_error_payload(client: TestClient) -> None:
    response = client.get("/api/v1/nao-existe")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "not_found"


class TestStorageFailures:
    """Test suite for failures of the backing document."""

    def test_missing_document_is_server_error(self, client: TestClient, data_file: Path) -> None:
        """Test that a deleted data file is reported as a storage error."""
        data_file.unlink()

        response = client.get("/api/v1/instrutores")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"] == "document_missing"

    def test_invalid_json_is_server_error(self, client: TestClient, data_file: Path) -> None:
        data_file.write_text("{ not json", encoding="utf-8")

        response = client.get("/api/v1/usuarios/agrupados-por-tipo")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"] == "document_malformed"

    def test_failed_mutation_is_server_error(self, client: TestClient, data_file: Path) -> None:
        data_file.write_text('{"usuarios": []}', encoding="utf-8")

        response = client.patch("/api/v1/usuarios/1/progresso/1")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"] == "document_malformed"
        assert data_file.read_text(encoding="utf-8") == '{"usuarios": []}'
