"""
Mastodon Client Error Model

This module provides the single exception kind surfaced by the client for every
transport, HTTP-status, deserialization or client-side precondition failure.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import Enum

import requests


class ErrorKind(str, Enum):
    """Failure categories carried by MastodonRequestException."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DESERIALIZATION = "deserialization"
    PRECONDITION = "precondition"


# Status codes worth retrying by the caller
RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})


class MastodonRequestException(Exception):
    """
    Raised for any failure while building, executing or parsing a request.

    Callers catch this one type and inspect ``kind``, ``status_code`` and
    ``cause`` to decide on retries or user-facing messaging.
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.TRANSPORT,
                 status_code: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None,
                 cause: Optional[BaseException] = None):
        """
        Initialize a request exception.

        Args:
            message: Error message
            kind: Failure category
            status_code: HTTP status of the response, if one was received
            details: Additional error details (e.g. Mastodon's error body)
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.details = details or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        parts = [f"[{self.kind.name}] {self.message}"]
        if self.status_code is not None:
            parts.append(f"HTTP {self.status_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause!r}")
        return " | ".join(parts)

    @property
    def is_http_error(self) -> bool:
        return self.kind is ErrorKind.HTTP_STATUS

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.status_code is not None:
            result["status_code"] = self.status_code
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


def error_from_response(response: requests.Response) -> MastodonRequestException:
    """
    Create an exception from a non-successful HTTP response.

    Mastodon reports failures as ``{"error": "...", "error_description": "..."}``;
    when the body has that shape its text becomes the exception message.

    Args:
        response: The HTTP response with a non-2xx status

    Returns:
        Exception carrying the status code and any error details
    """
    # Local imports: the api package and the serializer import this module
    from ..api.entities import Error
    from .serializer import parse_entity

    status = response.status_code
    message = f"HTTP {status}: {response.reason}"
    details: Dict[str, Any] = {}

    if response.text:
        try:
            body = parse_entity(response.text, Error)
        except MastodonRequestException:
            body = None
        if body is not None:
            message = body.error
            details = body.model_dump(exclude_none=True)

    return MastodonRequestException(message, ErrorKind.HTTP_STATUS, status_code=status, details=details)


class ErrorHandler:
    """
    Utility class for categorizing errors on the caller's side.

    The client never retries on its own; these helpers only classify.
    """

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Check if an error is worth retrying.

        Args:
            error: Exception to check

        Returns:
            True for transport failures and transient HTTP statuses
        """
        if not isinstance(error, MastodonRequestException):
            return False
        if error.kind is ErrorKind.TRANSPORT:
            return True
        if error.kind is ErrorKind.HTTP_STATUS:
            return error.status_code in RETRYABLE_STATUS_CODES
        return False

    @staticmethod
    def is_unauthorized(error: Exception) -> bool:
        """Check if an error means the access token was rejected."""
        return isinstance(error, MastodonRequestException) and error.status_code in (401, 403)


__all__ = [
    "ErrorKind",
    "MastodonRequestException",
    "RETRYABLE_STATUS_CODES",
    "error_from_response",
    "ErrorHandler",
]
