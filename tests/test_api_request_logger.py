"""Tests for API request logger."""

import logging

import pytest

from travel_checkin.adapters.api_request_logger import (
    LOG_REQUESTS_ENV,
    MAX_BODY_LOG_CHARS,
    log_api_request,
    should_log_requests,
)

LOGGER_NAME = "travel_checkin.adapters.api_request_logger"


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given the variable not set, when checking, then returns False."""
        monkeypatch.delenv(LOG_REQUESTS_ENV, raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize(
        ("value", "expected"), [("true", True), ("True", True), ("false", False), ("1", False)]
    )
    def test_only_true_enables_logging(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        """Given a value, when checking, then only 'true' in any case enables logging."""
        monkeypatch.setenv(LOG_REQUESTS_ENV, value)

        assert should_log_requests() is expected


class TestLogApiRequest:
    """Tests for log_api_request function."""

    def test_when_logging_disabled_then_does_not_log(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging disabled, when logging a request, then nothing is written."""
        monkeypatch.delenv(LOG_REQUESTS_ENV, raising=False)

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_api_request("GET", "https://nominatim.example.org/search")

        assert caplog.records == []

    def test_when_logging_enabled_then_logs_url_with_query(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging enabled, when logging with params, then the full URL is written."""
        monkeypatch.setenv(LOG_REQUESTS_ENV, "true")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_api_request(
                "GET",
                "https://nominatim.example.org/search",
                params={"q": "Ranchi", "countrycodes": "in"},
            )

        assert "API Request:" in caplog.text
        assert "GET https://nominatim.example.org/search?countrycodes=in&q=Ranchi" in caplog.text

    def test_long_body_is_truncated(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given a body longer than the limit, when logging, then it is truncated."""
        monkeypatch.setenv(LOG_REQUESTS_ENV, "true")
        body = "x" * (MAX_BODY_LOG_CHARS + 500)

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_api_request("POST", "https://overpass.example.org/api/interpreter", body=body)

        assert f"({len(body)} chars)" in caplog.text
        assert body not in caplog.text

    def test_dict_body_is_rendered_as_json(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given a dict body, when logging, then it is rendered as JSON."""
        monkeypatch.setenv(LOG_REQUESTS_ENV, "true")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_api_request("POST", "https://example.org", body={"data": "[out:json];"})

        assert '"data": "[out:json];"' in caplog.text
