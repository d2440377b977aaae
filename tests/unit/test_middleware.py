"""Raw ASGI middleware tests (timeout and request ID) without the full app."""

import asyncio
import json
import logging

from app.middleware import RequestIDMiddleware, TimeoutMiddleware, request_id_var
from app.shared.telemetry.logging import RequestIDFilter


def _http_scope(headers: list[tuple[bytes, bytes]] | None = None) -> dict:
    return {"type": "http", "method": "GET", "path": "/slow", "headers": headers or []}


async def _receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


async def test_timeout_answers_504_envelope() -> None:
    async def slow_app(scope, receive, send) -> None:
        await asyncio.sleep(1)

    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    await TimeoutMiddleware(slow_app, timeout_seconds=0.01)(_http_scope(), _receive, send)

    assert sent[0]["status"] == 504
    body = json.loads(sent[1]["body"])
    assert body["success"] is False
    assert body["status_code"] == 504
    assert body["errors"][0]["error"] == "GATEWAY_TIMEOUT"


async def test_request_id_visible_to_app_and_reset_after() -> None:
    seen: dict[str, str] = {}

    async def app(scope, receive, send) -> None:
        seen["var"] = request_id_var.get()
        seen["state"] = scope["state"]["request_id"]
        await send({"type": "http.response.start", "status": 200, "headers": []})

    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    middleware = RequestIDMiddleware(app)
    await middleware(_http_scope([(b"x-request-id", b"req-42")]), _receive, send)

    assert seen == {"var": "req-42", "state": "req-42"}
    assert (b"X-Request-ID", b"req-42") in sent[0]["headers"]
    assert request_id_var.get() == "-"


def test_log_filter_stamps_request_id() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    token = request_id_var.set("abc")
    try:
        assert RequestIDFilter().filter(record) is True
    finally:
        request_id_var.reset(token)
    assert record.request_id == "abc"
