"""Tests for Sheets API request logging."""

import logging

import pytest

from vc_roster.adapters.sheets.request_logger import (
    log_api_request,
    redact_headers,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given VC_ROSTER_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("VC_ROSTER_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given VC_ROSTER_LOG_REQUESTS=True, when checking, then returns True."""
        monkeypatch.setenv("VC_ROSTER_LOG_REQUESTS", "True")

        assert should_log_requests() is True


class TestLogApiRequest:
    """Tests for log_api_request function."""

    def test_when_disabled_then_nothing_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging disabled, when logging a request, then no record is emitted."""
        monkeypatch.delenv("VC_ROSTER_LOG_REQUESTS", raising=False)

        with caplog.at_level(logging.INFO):
            log_api_request("GET", "https://example.invalid")

        assert caplog.records == []

    def test_when_enabled_then_token_is_redacted(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging enabled, when logging a request, then the bearer token never appears."""
        monkeypatch.setenv("VC_ROSTER_LOG_REQUESTS", "true")

        with caplog.at_level(logging.INFO):
            log_api_request(
                "PUT",
                "https://example.invalid/values/A2",
                headers={"Authorization": "Bearer secret"},
                payload={"values": [["alice"]]},
            )

        assert "PUT https://example.invalid/values/A2" in caplog.text
        assert "secret" not in caplog.text
        assert "***REDACTED***" in caplog.text
        assert "alice" in caplog.text


def test_redact_headers_is_case_insensitive() -> None:
    """Given mixed-case sensitive headers, when redacting, then they are masked."""
    redacted = redact_headers({"authorization": "x", "Content-Type": "application/json"})

    assert redacted == {"authorization": "***REDACTED***", "Content-Type": "application/json"}
