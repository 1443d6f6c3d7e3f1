"""
Test doubles for the HTTP layer.

MockSession stands in for requests.Session: it records every request and
answers with a canned MockResponse (usually built from a JSON fixture), or
raises the configured exception to simulate I/O failures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from requests.structures import CaseInsensitiveDict

from mastodon_client import ClientConfig, MastodonClient

FIXTURES = Path(__file__).parent.parent / "fixtures"


def load_fixture(name: str) -> str:
    """Return the raw text of a JSON fixture."""
    return (FIXTURES / name).read_text(encoding="utf-8")


class MockResponse:
    """Mock response for testing"""

    def __init__(self, status_code=200, text="", headers=None, reason="OK", url=""):
        self.status_code = status_code
        self.reason = reason
        self.text = text
        self.headers = CaseInsensitiveDict(headers or {})
        self.url = url

    def json(self):
        return json.loads(self.text)


class MockSession:
    """Records calls made through request() and returns a fixed response."""

    def __init__(self, response: Optional[MockResponse] = None, error: Optional[Exception] = None):
        self.response = response or MockResponse()
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, **kwargs):
        call = {"method": method, "url": url, **kwargs}
        files = kwargs.get("files")
        if files:
            # Capture uploaded content while the file handle is still open
            call["file_contents"] = {name: part[1].read() for name, part in files.items()}
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        self.response.url = url
        return self.response

    def close(self):
        self.closed = True

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


def mock_client(fixture: Optional[str] = None, status_code: int = 200, link: Optional[str] = None,
                text: Optional[str] = None, access_token: Optional[str] = "token",
                instance_name: str = "mastodon.cloud", **config: Any) -> MastodonClient:
    """
    Build a client whose session answers every call with the given fixture.

    The session is reachable as ``client._session`` for assertions.
    """
    body = text if text is not None else (load_fixture(fixture) if fixture else "")
    headers = {"Content-Type": "application/json"}
    if link is not None:
        headers["Link"] = link
    session = MockSession(MockResponse(status_code=status_code, text=body, headers=headers,
                                       reason=_reason(status_code)))
    return MastodonClient(
        ClientConfig(instance_name=instance_name, access_token=access_token, **config),
        session=session,
    )


def io_exception_client(error: Optional[Exception] = None,
                        instance_name: str = "mastodon.cloud") -> MastodonClient:
    """Build a client whose session raises an I/O error on every call."""
    session = MockSession(error=error or requests.exceptions.ConnectionError("connection reset"))
    return MastodonClient(ClientConfig(instance_name=instance_name), session=session)


def _reason(status_code: int) -> str:
    return {
        200: "OK",
        401: "Unauthorized",
        404: "Not Found",
        422: "Unprocessable Entity",
        429: "Too Many Requests",
        500: "Internal Server Error",
        503: "Service Unavailable",
    }.get(status_code, "")
