"""
Mastodon API Client

This module provides the request executor shared by every method group:
it builds URLs against the configured instance, attaches the bearer token,
sends the call through a requests.Session and translates every failure into
MastodonRequestException.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import quote
import logging
import os

import requests

from . import __version__
from .api.pageable import Pageable
from .parameters import Parameters
from .request import MastodonRequest, entity_mapper
from .runtime.errors import ErrorKind, MastodonRequestException, error_from_response
from .runtime.serializer import parse_list

if TYPE_CHECKING:
    from .api.methods import (
        AccountMethods, AppMethods, BookmarkMethods, FavouriteMethods, MediaMethods,
        NotificationMethods, OAuthMethods, StatusMethods, TimelineMethods,
    )

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PORTS = {"https": 443, "http": 80}


def segment(value: Any) -> str:
    """Escape a value for use as one URL path segment."""
    return quote(str(value), safe="")


class Method(str, Enum):
    """HTTP methods used by the Mastodon API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the Mastodon API client."""

    instance_name: str
    access_token: Optional[str] = None
    scheme: str = "https"
    port: Optional[int] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    debug: bool = False
    user_agent: str = field(default=f"mastodon-client-python/{__version__}")

    def __post_init__(self):
        if self.port is None:
            object.__setattr__(self, "port", DEFAULT_PORTS.get(self.scheme, 443))

    @classmethod
    def from_env(cls, prefix: str = "MASTODON_") -> ClientConfig:
        """
        Build a configuration from environment variables.

        Reads ``<prefix>INSTANCE`` (required), ``<prefix>ACCESS_TOKEN``,
        ``<prefix>SCHEME`` and ``<prefix>PORT``.

        Raises:
            ValueError: If the instance variable is not set
        """
        instance = os.environ.get(f"{prefix}INSTANCE")
        if not instance:
            raise ValueError(f"{prefix}INSTANCE is not set")
        scheme = os.environ.get(f"{prefix}SCHEME", "https")
        port = os.environ.get(f"{prefix}PORT")
        return cls(
            instance_name=instance,
            access_token=os.environ.get(f"{prefix}ACCESS_TOKEN") or None,
            scheme=scheme,
            port=int(port) if port else None,
        )


class MastodonClient:
    """
    Client for one Mastodon instance.

    Method groups are available as attributes and return deferred
    MastodonRequest objects:

    Example:
        ```python
        with MastodonClient(ClientConfig("mastodon.social", access_token="...")) as client:
            page = client.timelines.get_home_timeline(Range(limit=20)).execute()
            older = client.timelines.get_home_timeline(page.next).execute()
        ```

    The client holds no mutable state besides its connection pool and may be
    shared between threads.
    """

    def __init__(self, config: Union[str, ClientConfig], session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Either an instance name such as "mastodon.social" or a ClientConfig
            session: Optional requests.Session for connection pooling
        """
        if isinstance(config, str):
            self.config = ClientConfig(instance_name=config)
        else:
            self.config = config

        self.logger = logger
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._session = session or requests.Session()
        self._owns_session = session is None

    # =========================================================================
    # Configuration accessors
    # =========================================================================

    @property
    def instance_name(self) -> str:
        return self.config.instance_name

    @property
    def scheme(self) -> str:
        return self.config.scheme

    @property
    def port(self) -> int:
        return self.config.port

    @property
    def base_url(self) -> str:
        """Base URL of the instance, omitting the port when it is the scheme default."""
        host = self.config.instance_name
        if DEFAULT_PORTS.get(self.config.scheme) != self.config.port:
            host = f"{host}:{self.config.port}"
        return f"{self.config.scheme}://{host}/"

    def full_url(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> MastodonClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Method groups
    # =========================================================================

    @cached_property
    def accounts(self) -> AccountMethods:
        from .api.methods import AccountMethods
        return AccountMethods(self)

    @cached_property
    def apps(self) -> AppMethods:
        from .api.methods import AppMethods
        return AppMethods(self)

    @cached_property
    def bookmarks(self) -> BookmarkMethods:
        from .api.methods import BookmarkMethods
        return BookmarkMethods(self)

    @cached_property
    def favourites(self) -> FavouriteMethods:
        from .api.methods import FavouriteMethods
        return FavouriteMethods(self)

    @cached_property
    def media(self) -> MediaMethods:
        from .api.methods import MediaMethods
        return MediaMethods(self)

    @cached_property
    def notifications(self) -> NotificationMethods:
        from .api.methods import NotificationMethods
        return NotificationMethods(self)

    @cached_property
    def oauth(self) -> OAuthMethods:
        from .api.methods import OAuthMethods
        return OAuthMethods(self)

    @cached_property
    def statuses(self) -> StatusMethods:
        from .api.methods import StatusMethods
        return StatusMethods(self)

    @cached_property
    def timelines(self) -> TimelineMethods:
        from .api.methods import TimelineMethods
        return TimelineMethods(self)

    # =========================================================================
    # Low-level HTTP
    # =========================================================================

    def _headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.config.user_agent, "Accept": "application/json"}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return headers

    def _send(self, method: Method, endpoint: str, parameters: Optional[Parameters] = None,
              files: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Perform one HTTP call.

        GET and DELETE carry the parameters in the query string; other methods
        send them as a form body, or as multipart fields when files are given.

        Returns:
            The response, which has a 2xx status

        Raises:
            MastodonRequestException: On connectivity failures or non-2xx statuses
        """
        url = self.full_url(endpoint)
        headers = self._headers()
        kwargs: Dict[str, Any] = {}

        if method in (Method.GET, Method.DELETE):
            if parameters:
                url = f"{url}?{parameters.build()}"
        elif files is not None:
            kwargs["files"] = files
            if parameters:
                kwargs["data"] = parameters.to_list()
        elif parameters:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            kwargs["data"] = parameters.build()

        self.logger.debug(f"Request: {method.value} {url}")

        try:
            response = self._session.request(
                method.value,
                url,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                **kwargs,
            )
        except requests.exceptions.RequestException as e:
            self.logger.warning(f"{method.value} {url} failed: {e}")
            raise MastodonRequestException(
                f"HTTP request failed: {e}", ErrorKind.TRANSPORT, cause=e
            ) from e

        self.logger.debug(f"Response: {response.status_code} for {method.value} {url}")

        if not 200 <= response.status_code < 300:
            error = error_from_response(response)
            self.logger.warning(f"{method.value} {url} returned {response.status_code}: {error.message}")
            raise error

        return response

    def get(self, endpoint: str, parameters: Optional[Parameters] = None) -> requests.Response:
        return self._send(Method.GET, endpoint, parameters)

    def post(self, endpoint: str, parameters: Optional[Parameters] = None) -> requests.Response:
        return self._send(Method.POST, endpoint, parameters)

    def put(self, endpoint: str, parameters: Optional[Parameters] = None) -> requests.Response:
        return self._send(Method.PUT, endpoint, parameters)

    def patch(self, endpoint: str, parameters: Optional[Parameters] = None) -> requests.Response:
        return self._send(Method.PATCH, endpoint, parameters)

    def delete(self, endpoint: str, parameters: Optional[Parameters] = None) -> requests.Response:
        return self._send(Method.DELETE, endpoint, parameters)

    def post_multipart(self, endpoint: str, files: Dict[str, Any],
                       parameters: Optional[Parameters] = None) -> requests.Response:
        """POST a multipart/form-data body with the given file parts."""
        return self._send(Method.POST, endpoint, parameters, files=files)

    # =========================================================================
    # Request factories
    # =========================================================================

    def get_mastodon_request(self, endpoint: str, method: Method, entity: Type[T],
                             parameters: Optional[Parameters] = None) -> MastodonRequest[T]:
        """
        Create a deferred request whose response body is a single entity.

        Args:
            endpoint: Path relative to the instance, e.g. "api/v1/statuses/1"
            method: HTTP method
            entity: Entity type the body is parsed into
            parameters: Optional request parameters

        Returns:
            Request that performs the call when executed
        """
        return MastodonRequest(lambda: self._send(method, endpoint, parameters), entity_mapper(entity))

    def get_mastodon_request_for_list(self, endpoint: str, method: Method, entity: Type[T],
                                      parameters: Optional[Parameters] = None) -> MastodonRequest[list]:
        """Create a deferred request whose response body is a JSON array of entities."""
        return MastodonRequest(
            lambda: self._send(method, endpoint, parameters),
            lambda response, on_json: parse_list(response.text, entity, on_json),
        )

    def get_pageable_mastodon_request(self, endpoint: str, method: Method, entity: Type[T],
                                      parameters: Optional[Parameters] = None) -> MastodonRequest[Pageable[T]]:
        """Create a deferred request for a paginated list endpoint."""
        return MastodonRequest(
            lambda: self._send(method, endpoint, parameters),
            lambda response, on_json: Pageable.from_response(response, entity, on_json),
        )

    def get_void_request(self, endpoint: str, method: Method,
                         parameters: Optional[Parameters] = None) -> MastodonRequest[None]:
        """Create a deferred request whose response body is ignored."""
        return MastodonRequest(
            lambda: self._send(method, endpoint, parameters),
            lambda response, on_json: None,
        )


__all__ = ["Method", "ClientConfig", "MastodonClient", "segment"]
