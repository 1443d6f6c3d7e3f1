"""Runtime support: error model and JSON deserialization."""

from .errors import ErrorKind, MastodonRequestException, ErrorHandler, error_from_response
from .serializer import parse_entity, parse_list

__all__ = [
    "ErrorKind",
    "MastodonRequestException",
    "ErrorHandler",
    "error_from_response",
    "parse_entity",
    "parse_list",
]
