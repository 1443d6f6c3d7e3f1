"""
Mastodon Python Client

This package provides a synchronous client for the Mastodon REST API: deferred
requests, Link-header pagination, typed entities and a single request
exception kind, plus reactive-style wrappers.
"""

__version__ = "1.0.0"

from .parameters import Parameters
from .request import MastodonRequest
from .runtime.errors import ErrorKind, MastodonRequestException, ErrorHandler
from .client import ClientConfig, MastodonClient, Method
from .api import Pageable, Range, Scope, parse_link_header
from .api.entities import *
from .api.entities import __all__ as _entity_names
from .api.methods import *
from .rx import *

__all__ = [
    # Client
    "MastodonClient",
    "ClientConfig",
    "Method",
    "MastodonRequest",
    "Parameters",

    # Pagination and scopes
    "Pageable",
    "Range",
    "Scope",
    "parse_link_header",

    # Errors
    "ErrorKind",
    "MastodonRequestException",
    "ErrorHandler",

    # Method groups
    "AccountMethods",
    "AppMethods",
    "BookmarkMethods",
    "FavouriteMethods",
    "MediaMethods",
    "NotificationMethods",
    "OAuthMethods",
    "StatusMethods",
    "TimelineMethods",

    # Reactive wrappers
    "Single",
    "Completable",
    "RxMediaMethods",
    "RxNotificationMethods",
    "RxStatusMethods",
    "RxTimelineMethods",

    # Entities
    *_entity_names,
]
