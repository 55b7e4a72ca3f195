"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from metro_stay.adapters.api_request_logger import (
    REDACTED,
    build_logged_url,
    log_api_request,
    redact_params,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given METRO_STAY_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("METRO_STAY_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given METRO_STAY_LOG_REQUESTS=True, when checking, then returns True."""
        monkeypatch.setenv("METRO_STAY_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given METRO_STAY_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("METRO_STAY_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestRedaction:
    """Tests for credential redaction."""

    def test_when_params_hold_credentials_then_values_are_redacted(self) -> None:
        """Given ODPT and Rakuten credentials, when redacting, then only they are hidden."""
        params = {"acl:consumerKey": "secret", "applicationId": "app", "odpt:operator": "x"}

        result = redact_params(params)

        assert result["acl:consumerKey"] == REDACTED
        assert result["applicationId"] == REDACTED
        assert result["odpt:operator"] == "x"
        assert params["acl:consumerKey"] == "secret"

    def test_when_no_params_then_url_is_unchanged(self) -> None:
        """Given no params, when building the logged URL, then it is the bare URL."""
        assert build_logged_url("https://example.com/api", None) == "https://example.com/api"

    def test_when_url_has_existing_params_then_appends_params(self) -> None:
        """Given a URL with a query, when adding params, then they are appended with '&'."""
        result = build_logged_url("https://example.com/api?existing=1", {"new": 2})

        assert result == "https://example.com/api?existing=1&new=2"


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("metro_stay.adapters.api_request_logger.should_log_requests")
    @patch("metro_stay.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("odpt", "GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    @patch("metro_stay.adapters.api_request_logger.should_log_requests")
    @patch("metro_stay.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_params_then_logs_redacted_url(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when calling with a key, then the key never reaches the log."""
        mock_should_log.return_value = True

        log_api_request(
            "odpt", "GET", "https://example.com/api", params={"acl:consumerKey": "secret", "a": 1}
        )

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert message.startswith("odpt request: GET https://example.com/api?")
        assert "a=1" in message
        assert "secret" not in message
