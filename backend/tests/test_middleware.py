"""
Notes API Backend: Middleware Tests
===================================

What:  Request-id correlation, access logging and the CORS policy.
"""

import logging

import pytest
from httpx import AsyncClient, ASGITransport

from app.middleware.request_id import RequestIDLogFilter, request_id_var


class TestRequestID:
    """Tests for RequestIDMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_request_id(self, test_client):
        response = await test_client.get("/api/notes")

        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_echoes_client_request_id(self, test_client):
        response = await test_client.get("/api/health", headers={"X-Request-ID": "client-123"})

        assert response.headers["X-Request-ID"] == "client-123"

    @pytest.mark.asyncio
    async def test_oversized_request_id_replaced(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "x" * 200})

        assert response.headers["X-Request-ID"] != "x" * 200

    @pytest.mark.asyncio
    async def test_error_responses_carry_request_id(self, test_client):
        response = await test_client.get("/api/notes/999")

        assert response.status_code == 404
        assert "X-Request-ID" in response.headers

    def test_log_filter_uses_context_var(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        token = request_id_var.set("abcd1234")
        try:
            RequestIDLogFilter().filter(record)
        finally:
            request_id_var.reset(token)

        assert record.request_id == "abcd1234"

    def test_log_filter_outside_request(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        RequestIDLogFilter().filter(record)

        assert record.request_id == "-"


class TestAccessLog:
    """Tests for RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_logs_successful_request_at_info(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notes.access")

        await test_client.get("/api/notes")

        records = [r for r in caplog.records if r.name == "notes.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].status == 200
        assert records[0].path == "/api/notes"

    @pytest.mark.asyncio
    async def test_logs_client_error_at_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notes.access")

        await test_client.post("/api/notes", json={"title": ""})

        records = [r for r in caplog.records if r.name == "notes.access"]
        assert records[-1].levelno == logging.WARNING
        assert records[-1].status == 400

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notes.access")

        await test_client.get("/api/health")

        assert not [r for r in caplog.records if r.name == "notes.access"]


class TestCORS:
    """Any origin may call the API."""

    @pytest.mark.asyncio
    async def test_simple_request_allows_any_origin(self, test_client):
        response = await test_client.get(
            "/api/notes", headers={"Origin": "http://localhost:3000"}
        )

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_preflight(self, test_client):
        response = await test_client.options(
            "/api/notes",
            headers={
                "Origin": "http://example.org:8080",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]


class TestUnexpectedErrors:
    """500 envelopes are rendered outside the middleware chain but keep its headers."""

    @pytest.fixture
    def failing_app(self, app):
        async def explode():
            raise RuntimeError("boom")

        app.add_api_route("/api/explode", explode, methods=["GET"])
        return app

    @pytest.mark.asyncio
    async def test_500_envelope_keeps_request_id_and_cors(self, failing_app):
        transport = ASGITransport(app=failing_app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(
                "/api/explode",
                headers={"Origin": "http://localhost:3000", "X-Request-ID": "trace-500"},
            )

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "An unexpected error occurred"}
        assert response.headers["X-Request-ID"] == "trace-500"
        assert response.headers["access-control-allow-origin"] == "*"
