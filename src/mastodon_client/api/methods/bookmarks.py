"""
Bookmarks API methods (``api/v1/bookmarks``).

Reference: https://docs.joinmastodon.org/methods/bookmarks/
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...client import Method
from ...request import MastodonRequest
from ..entities import Status
from ..pageable import Pageable
from ..range import Range

if TYPE_CHECKING:
    from ...client import MastodonClient


class BookmarkMethods:
    """Access to endpoints with an ``api/v1/bookmarks`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def get_bookmarks(self, range: Range = Range()) -> MastodonRequest[Pageable[Status]]:
        """Statuses the user has bookmarked."""
        return self.client.get_pageable_mastodon_request(
            "api/v1/bookmarks", Method.GET, Status, range.to_parameters()
        )
