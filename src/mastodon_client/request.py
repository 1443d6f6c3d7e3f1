"""
Deferred API requests.

A MastodonRequest describes one API call without performing it. Nothing is
sent until ``execute()`` is called, and every call to ``execute()`` issues the
request again.
"""

from __future__ import annotations
from typing import Callable, Generic, List, Optional, Type, TypeVar
import logging

import requests

from .runtime.errors import ErrorKind, MastodonRequestException
from .runtime.serializer import parse_entity

logger = logging.getLogger(__name__)

T = TypeVar("T")

Executor = Callable[[], requests.Response]
Mapper = Callable[[requests.Response, Optional[Callable[[str], None]]], T]


class MastodonRequest(Generic[T]):
    """
    A network call paired with the function that maps its response.

    Example:
        ```python
        request = client.statuses.get_status("123")   # no I/O yet
        status = request.execute()                    # performs the call
        ```
    """

    def __init__(self, executor: Executor, mapper: Mapper[T]):
        """
        Args:
            executor: Performs the HTTP call and returns the successful response
            mapper: Turns the response into the result; receives the on_json callback
        """
        self._executor = executor
        self._mapper = mapper
        self._json_callbacks: List[Callable[[str], None]] = []

    def on_json(self, action: Callable[[str], None]) -> MastodonRequest[T]:
        """
        Register a callback that receives the raw JSON of the result.

        For list endpoints the callback is invoked once per element.
        """
        self._json_callbacks.append(action)
        return self

    def _emit_json(self, text: str) -> None:
        for action in self._json_callbacks:
            action(text)

    def execute(self) -> T:
        """
        Perform the request and map its response.

        Returns:
            The mapped result

        Raises:
            MastodonRequestException: On transport, HTTP-status or parsing failures
        """
        response = self._executor()
        callback = self._emit_json if self._json_callbacks else None
        try:
            return self._mapper(response, callback)
        except MastodonRequestException:
            raise
        except Exception as e:
            logger.warning(f"Failed to map response from {response.url}: {e}")
            raise MastodonRequestException(
                "Failed to map response",
                ErrorKind.DESERIALIZATION,
                status_code=response.status_code,
                cause=e,
            ) from e


def entity_mapper(entity: Type[T]) -> Mapper[T]:
    """Mapper parsing the whole response body as one entity."""
    def mapper(response: requests.Response, on_json: Optional[Callable[[str], None]]) -> T:
        if on_json is not None:
            on_json(response.text)
        return parse_entity(response.text, entity)
    return mapper


__all__ = ["MastodonRequest", "entity_mapper"]
