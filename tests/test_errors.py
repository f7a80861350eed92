"""Tests for the 404 fallback, the 500 boundary and response middleware."""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from devops_demo.core.config import Settings
from devops_demo.main import create_app


def _failing_client(env: str) -> TestClient:
    app = create_app(Settings(NODE_ENV=env, APP_VERSION="1.0.0-test"))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("something broke")

    @app.get("/teapot")
    async def teapot():
        raise HTTPException(status_code=418, detail="I'm a teapot")

    return TestClient(app, raise_server_exceptions=False)


class TestNotFound:
    """Unmatched routes."""

    def test_unknown_path_returns_404(self, client: TestClient) -> None:
        response = client.get("/nonexistent-path")
        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Route not found"
        assert data["path"] == "/nonexistent-path"
        assert data["timestamp"].endswith("Z")
        assert "details" not in data

    def test_query_string_is_kept_in_path(self, client: TestClient) -> None:
        data = client.get("/missing?page=2").json()
        assert data["path"] == "/missing?page=2"

    @pytest.mark.parametrize("method", ["post", "put", "delete"])
    def test_unknown_method_is_not_found(self, client: TestClient, method: str) -> None:
        response = getattr(client, method)("/health")
        assert response.status_code == 404
        assert response.json()["error"] == "Route not found"

    def test_docs_are_not_exposed(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404


class TestUnhandledError:
    """Exceptions raised by handlers."""

    def test_development_includes_details(self) -> None:
        response = _failing_client("development").get("/boom")
        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Internal server error"
        assert data["details"] == "something broke"
        assert data["timestamp"].endswith("Z")

    @pytest.mark.parametrize("env", ["production", "test"])
    def test_other_environments_hide_details(self, env: str) -> None:
        response = _failing_client(env).get("/boom")
        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Internal server error"
        assert "details" not in data

    def test_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("ERROR", logger="devops_demo.core.errors"):
            _failing_client("production").get("/boom")
        assert any(r.getMessage() == "Unhandled error" and r.exc_info for r in caplog.records)

    def test_process_keeps_serving_after_error(self) -> None:
        client = _failing_client("production")
        assert client.get("/boom").status_code == 500
        assert client.get("/health").status_code == 200

    def test_other_http_errors_keep_status(self) -> None:
        response = _failing_client("production").get("/teapot")
        assert response.status_code == 418
        assert response.json()["error"] == "I'm a teapot"


class TestMiddleware:
    """Security headers, compression and access logging."""

    def test_security_headers(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "SAMEORIGIN"
        assert "default-src 'self'" in response.headers["content-security-policy"]
        assert response.headers["referrer-policy"] == "no-referrer"
        assert response.headers["x-dns-prefetch-control"] == "off"

    def test_security_headers_on_errors(self, client: TestClient) -> None:
        response = client.get("/nonexistent-path")
        assert response.headers["x-content-type-options"] == "nosniff"

    def test_landing_page_is_gzipped(self, client: TestClient) -> None:
        response = client.get("/", headers={"Accept-Encoding": "gzip"})
        assert response.headers.get("content-encoding") == "gzip"
        assert "DevOps Demo" in response.text

    def test_small_bodies_are_not_gzipped(self, client: TestClient) -> None:
        response = client.get("/ready", headers={"Accept-Encoding": "gzip"})
        assert "content-encoding" not in response.headers

    def test_access_log(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="devops_demo.access"):
            client.get("/ready")
        records = [r for r in caplog.records if r.name == "devops_demo.access"]
        assert records
        assert records[-1].status == 200
        assert records[-1].path == "/ready"
        assert records[-1].method == "GET"

    def test_access_log_keeps_query_string(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="devops_demo.access"):
            client.get("/health?verbose=1")
        records = [r for r in caplog.records if r.name == "devops_demo.access"]
        assert records[-1].path == "/health?verbose=1"
        assert records[-1].getMessage() == "GET /health?verbose=1 200"


class TestHeadRequests:
    """HEAD is answered wherever GET is."""

    @pytest.mark.parametrize("path", ["/", "/health", "/ready", "/metrics", "/api/info"])
    def test_head_returns_200(self, client: TestClient, path: str) -> None:
        response = client.head(path)
        assert response.status_code == 200

    def test_head_on_unknown_path_is_not_found(self, client: TestClient) -> None:
        assert client.head("/nonexistent-path").status_code == 404
