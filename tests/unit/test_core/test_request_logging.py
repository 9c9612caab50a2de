"""
test_request_logging.py - 요청 로깅 테스트
"""

import logging

import pytest

from favtree.core.logging import configure_logging, log_requests
from favtree.domain.schemas import IncomingRequest, RenderedResponse


def _handler(request: IncomingRequest) -> RenderedResponse:
    return RenderedResponse.html(b"<p>ok</p>")


class TestLogRequests:
    """log_requests wrapper 테스트."""

    def test_logs_request_and_response(self, caplog: pytest.LogCaptureFixture):
        handler = log_requests(_handler)

        with caplog.at_level(logging.INFO, logger="favtree.core.logging"):
            handler(IncomingRequest("POST", "/", b"{}"))

        assert "path=/ method=POST body=2 bytes" in caplog.text
        assert "status=200" in caplog.text

    def test_logs_nil_body(self, caplog: pytest.LogCaptureFixture):
        handler = log_requests(_handler)

        with caplog.at_level(logging.INFO, logger="favtree.core.logging"):
            handler(IncomingRequest("POST", "/", None))

        assert "body=nil" in caplog.text

    def test_returns_handler_response(self):
        handler = log_requests(_handler)

        response = handler(IncomingRequest("POST", "/", b"{}"))

        assert response.body == b"<p>ok</p>"


def test_configure_logging_sets_level(monkeypatch: pytest.MonkeyPatch):
    """basicConfig에 레벨/포맷 전달."""
    calls = {}

    def fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging("debug", "%(message)s")

    assert calls == {"level": "DEBUG", "format": "%(message)s"}
