"""Tests for src/middleware/access_log.py.

Each behaviour is exercised through a minimal FastAPI test application that
wires both RequestIdMiddleware (outermost) and AccessLogMiddleware together,
matching the production configuration.
"""

import io
import json
import logging
import uuid
from collections.abc import Generator

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from src.logging_config import JsonFormatter
from src.middleware.access_log import AccessLogMiddleware
from src.middleware.request_id import RequestIdMiddleware

_LOGGER = "src.middleware.access_log"
_FIELDS = ("method", "path", "status", "duration_ms", "request_id", "client")


def _make_app() -> FastAPI:
    """Minimal app with both middlewares wired in production order."""
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"ok": "true"}

    @app.get("/missing")
    async def missing() -> dict[str, str]:  # type: ignore[return]
        raise HTTPException(status_code=404, detail="Not found")

    @app.get("/unavailable")
    async def unavailable() -> dict[str, str]:  # type: ignore[return]
        raise HTTPException(status_code=503, detail="Try later")

    return app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(_make_app(), raise_server_exceptions=False)


def _access_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    records = [r for r in caplog.records if r.name == _LOGGER]
    assert records, "No access log record found"
    return records


class TestAccessLogEmission:
    def test_one_record_per_request(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/ping")
        assert len(_access_records(caplog)) == 1

    def test_success_logged_at_info(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/ping")
        assert _access_records(caplog)[0].levelno == logging.INFO

    def test_client_error_logged_at_info(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/missing")
        assert _access_records(caplog)[0].levelno == logging.INFO

    def test_server_error_logged_at_warning(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/unavailable")
        assert _access_records(caplog)[0].levelno == logging.WARNING


class TestAccessLogRecord:
    def test_record_carries_request_fields(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/ping")
        record = _access_records(caplog)[0]
        for field in _FIELDS:
            assert hasattr(record, field), field

    def test_message_is_plain_text(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/missing")
        assert _access_records(caplog)[0].getMessage() == "GET /missing 404"

    def test_field_values(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            client.get("/missing")
        record = _access_records(caplog)[0]
        assert record.method == "GET"  # type: ignore[attr-defined]
        assert record.path == "/missing"  # type: ignore[attr-defined]
        assert record.status == 404  # type: ignore[attr-defined]
        assert isinstance(record.duration_ms, (int, float))  # type: ignore[attr-defined]
        assert record.duration_ms >= 0  # type: ignore[attr-defined]
        assert record.client == "testclient"  # type: ignore[attr-defined]

    def test_request_id_matches_response_header(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger=_LOGGER):
            res = client.get("/ping")
        record = _access_records(caplog)[0]
        uuid.UUID(record.request_id)  # type: ignore[attr-defined]
        assert record.request_id == res.headers["x-request-id"]  # type: ignore[attr-defined]


class TestAccessLogJsonOutput:
    """The access record rendered by the production formatter is flat JSON."""

    @pytest.fixture
    def json_stream(self) -> Generator[io.StringIO]:
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter())
        logger = logging.getLogger(_LOGGER)
        previous_level = logger.level
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        yield stream
        logger.removeHandler(handler)
        logger.setLevel(previous_level)

    def test_fields_are_top_level_keys(
        self, client: TestClient, json_stream: io.StringIO
    ) -> None:
        res = client.get("/ping")
        line = json.loads(json_stream.getvalue().splitlines()[0])
        assert line["status"] == 200
        assert line["method"] == "GET"
        assert line["path"] == "/ping"
        assert line["request_id"] == res.headers["x-request-id"]
        assert isinstance(line["duration_ms"], (int, float))
        assert line["message"] == "GET /ping 200"
        assert line["logger"] == _LOGGER
