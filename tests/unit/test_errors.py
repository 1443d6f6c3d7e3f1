"""
Unit tests for the error model.
"""

import pytest
import requests

from mastodon_client import ErrorHandler, ErrorKind, MastodonRequestException
from mastodon_client.runtime.errors import error_from_response

from helpers import MockResponse


@pytest.mark.unit
class TestMastodonRequestException:
    """Tests for MastodonRequestException."""

    def test_basic_error(self):
        err = MastodonRequestException("Test error")
        assert err.message == "Test error"
        assert err.kind is ErrorKind.TRANSPORT
        assert err.status_code is None
        assert err.details == {}
        assert str(err) == "[TRANSPORT] Test error"

    def test_str_includes_status_details_and_cause(self):
        cause = ValueError("bad")
        err = MastodonRequestException(
            "Record not found", ErrorKind.HTTP_STATUS, status_code=404,
            details={"error": "Record not found"}, cause=cause,
        )
        text = str(err)
        assert text.startswith("[HTTP_STATUS] Record not found")
        assert "HTTP 404" in text
        assert "Details:" in text
        assert "Caused by: ValueError('bad')" in text

    def test_cause_is_chained(self):
        cause = requests.exceptions.ConnectionError("reset")
        err = MastodonRequestException("failed", cause=cause)
        assert err.__cause__ is cause

    def test_to_dict(self):
        err = MastodonRequestException("Nope", ErrorKind.HTTP_STATUS, status_code=422)
        assert err.to_dict() == {"kind": "http_status", "message": "Nope", "status_code": 422}
        assert err.is_http_error


@pytest.mark.unit
class TestErrorFromResponse:
    """Tests for mapping non-2xx responses."""

    def test_mastodon_error_body(self):
        response = MockResponse(
            status_code=401, reason="Unauthorized",
            text='{"error": "invalid_grant", "error_description": "The provided authorization grant is invalid"}',
        )
        err = error_from_response(response)

        assert err.kind is ErrorKind.HTTP_STATUS
        assert err.status_code == 401
        assert err.message == "invalid_grant"
        assert err.details["error_description"] == "The provided authorization grant is invalid"

    def test_non_json_body(self):
        err = error_from_response(MockResponse(status_code=502, reason="Bad Gateway", text="<html>"))
        assert err.status_code == 502
        assert err.message == "HTTP 502: Bad Gateway"
        assert err.details == {}

    def test_empty_body(self):
        err = error_from_response(MockResponse(status_code=500, reason="Internal Server Error"))
        assert err.message == "HTTP 500: Internal Server Error"

    def test_error_without_description(self):
        err = error_from_response(MockResponse(status_code=404, reason="Not Found", text='{"error": "Record not found"}'))
        assert err.message == "Record not found"
        assert err.details == {"error": "Record not found"}

    def test_body_not_matching_error_shape(self):
        err = error_from_response(MockResponse(status_code=422, reason="Unprocessable Entity", text='[{"error": "x"}]'))
        assert err.message == "HTTP 422: Unprocessable Entity"
        assert err.details == {}

        err = error_from_response(MockResponse(status_code=500, reason="Internal Server Error", text='{"status": "down"}'))
        assert err.message == "HTTP 500: Internal Server Error"


@pytest.mark.unit
class TestErrorHandler:
    """Tests for error classification."""

    @pytest.mark.parametrize("status,expected", [(429, True), (503, True), (404, False), (422, False)])
    def test_http_status_retryable(self, status, expected):
        err = MastodonRequestException("x", ErrorKind.HTTP_STATUS, status_code=status)
        assert ErrorHandler.is_retryable(err) is expected

    def test_transport_retryable(self):
        assert ErrorHandler.is_retryable(MastodonRequestException("x", ErrorKind.TRANSPORT))

    def test_precondition_not_retryable(self):
        assert not ErrorHandler.is_retryable(MastodonRequestException("x", ErrorKind.PRECONDITION))
        assert not ErrorHandler.is_retryable(ValueError("x"))

    def test_unauthorized(self):
        assert ErrorHandler.is_unauthorized(
            MastodonRequestException("x", ErrorKind.HTTP_STATUS, status_code=401)
        )
        assert not ErrorHandler.is_unauthorized(
            MastodonRequestException("x", ErrorKind.HTTP_STATUS, status_code=404)
        )
