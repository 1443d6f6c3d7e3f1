"""
Single-shot asynchronous primitives.

``Single`` delivers one value or one error, ``Completable`` only completion or
an error. Neither schedules work: the wrapped call runs on whichever thread
subscribes, or inside the coroutine that awaits it.
"""

from __future__ import annotations
from concurrent.futures import Future
from typing import Any, Callable, Generator, Generic, Optional, TypeVar
import logging

from ..request import MastodonRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorCallback = Callable[[BaseException], None]


def _raise(error: BaseException) -> None:
    raise error


class Single(Generic[T]):
    """
    A deferred computation emitting exactly one value or one error.

    Example:
        ```python
        single = RxStatusMethods(client).get_status("1")
        single.subscribe(on_success=print, on_error=handle)
        status = await single
        ```
    """

    def __init__(self, source: Callable[[], T]):
        self._source = source

    @classmethod
    def from_request(cls, request: MastodonRequest[T]) -> Single[T]:
        return cls(request.execute)

    @classmethod
    def create(cls, source: Callable[[], T]) -> Single[T]:
        return cls(source)

    def subscribe(self, on_success: Callable[[T], None],
                  on_error: Optional[ErrorCallback] = None) -> None:
        """
        Run the computation and deliver its outcome to the callbacks.

        Exceptions go to ``on_error``; without one the error is raised.
        """
        try:
            value = self._source()
        except Exception as e:
            logger.debug(f"Single failed: {e!r}")
            (on_error or _raise)(e)
            return
        on_success(value)

    def blocking_get(self) -> T:
        """Run the computation and return its value or raise its error."""
        return self._source()

    def to_future(self) -> Future:
        """Run the computation and return an already completed Future."""
        future: Future = Future()
        self.subscribe(future.set_result, future.set_exception)
        return future

    def map(self, transform: Callable[[T], Any]) -> Single[Any]:
        return Single(lambda: transform(self._source()))

    def __await__(self) -> Generator[Any, None, T]:
        return self._run().__await__()

    async def _run(self) -> T:
        return self._source()


class Completable:
    """A deferred computation that signals completion or an error, without a value."""

    def __init__(self, source: Callable[[], Any]):
        self._source = source

    @classmethod
    def from_request(cls, request: MastodonRequest[Any]) -> Completable:
        return cls(request.execute)

    @classmethod
    def create(cls, source: Callable[[], Any]) -> Completable:
        return cls(source)

    def subscribe(self, on_complete: Callable[[], None],
                  on_error: Optional[ErrorCallback] = None) -> None:
        """Run the computation; call ``on_complete`` or route the exception to ``on_error``."""
        try:
            self._source()
        except Exception as e:
            logger.debug(f"Completable failed: {e!r}")
            (on_error or _raise)(e)
            return
        on_complete()

    def blocking_await(self) -> None:
        self._source()

    def to_future(self) -> Future:
        future: Future = Future()
        self.subscribe(lambda: future.set_result(None), future.set_exception)
        return future

    def __await__(self) -> Generator[Any, None, None]:
        return self._run().__await__()

    async def _run(self) -> None:
        self._source()


__all__ = ["Single", "Completable"]
