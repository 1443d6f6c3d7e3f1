"""
Timelines API methods (``api/v1/timelines``).

Reference: https://docs.joinmastodon.org/methods/timelines/
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...client import Method, segment
from ...parameters import Parameters
from ...request import MastodonRequest
from ..entities import Status
from ..pageable import Pageable
from ..range import Range

if TYPE_CHECKING:
    from ...client import MastodonClient


def _timeline_parameters(local_only: bool, remote_only: bool, only_media: bool, range: Range) -> Parameters:
    parameters = Parameters()
    if local_only:
        parameters.append("local", True)
    if remote_only:
        parameters.append("remote", True)
    if only_media:
        parameters.append("only_media", True)
    return parameters.extend(range.to_parameters())


class TimelineMethods:
    """Access to endpoints with an ``api/v1/timelines`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def get_home_timeline(self, range: Range = Range()) -> MastodonRequest[Pageable[Status]]:
        """View statuses from followed users."""
        return self.client.get_pageable_mastodon_request(
            "api/v1/timelines/home", Method.GET, Status, range.to_parameters()
        )

    def get_public_timeline(
        self,
        range: Range = Range(),
        local_only: bool = False,
        remote_only: bool = False,
        only_media: bool = False,
    ) -> MastodonRequest[Pageable[Status]]:
        """View public statuses, optionally limited to local or remote ones."""
        return self.client.get_pageable_mastodon_request(
            "api/v1/timelines/public", Method.GET, Status,
            _timeline_parameters(local_only, remote_only, only_media, range),
        )

    def get_tag_timeline(
        self,
        tag: str,
        range: Range = Range(),
        local_only: bool = False,
        remote_only: bool = False,
        only_media: bool = False,
    ) -> MastodonRequest[Pageable[Status]]:
        """View public statuses containing the given hashtag (without the leading #)."""
        return self.client.get_pageable_mastodon_request(
            f"api/v1/timelines/tag/{segment(tag.lstrip('#'))}", Method.GET, Status,
            _timeline_parameters(local_only, remote_only, only_media, range),
        )

    def get_list_timeline(self, list_id: str, range: Range = Range()) -> MastodonRequest[Pageable[Status]]:
        """View statuses in the given list timeline."""
        return self.client.get_pageable_mastodon_request(
            f"api/v1/timelines/list/{segment(list_id)}", Method.GET, Status, range.to_parameters()
        )
