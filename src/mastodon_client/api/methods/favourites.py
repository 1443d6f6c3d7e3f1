"""
Favourites API methods (``api/v1/favourites``).

Reference: https://docs.joinmastodon.org/methods/favourites/
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


class FavouriteMethods:
    """Access to endpoints with an ``api/v1/favourites`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def get_favourites(self, range: Range = Range()) -> MastodonRequest[Pageable[Status]]:
        """Statuses the user has favourited."""
        return self.client.get_pageable_mastodon_request(
            "api/v1/favourites", Method.GET, Status, range.to_parameters()
        )
