"""
Reactive wrapper for TimelineMethods.
"""

from __future__ import annotations

from ..api.entities import Status
from ..api.methods.timelines import TimelineMethods
from ..api.pageable import Pageable
from ..api.range import Range
from ..client import MastodonClient
from .single import Single


class RxTimelineMethods:
    """TimelineMethods delivering results through Single."""

    def __init__(self, client: MastodonClient):
        self.timeline_methods = TimelineMethods(client)

    def get_home_timeline(self, range: Range = Range()) -> Single[Pageable[Status]]:
        return Single(lambda: self.timeline_methods.get_home_timeline(range).execute())

    def get_public_timeline(self, range: Range = Range(), local_only: bool = False,
                            remote_only: bool = False, only_media: bool = False) -> Single[Pageable[Status]]:
        return Single(
            lambda: self.timeline_methods.get_public_timeline(range, local_only, remote_only, only_media).execute()
        )

    def get_tag_timeline(self, tag: str, range: Range = Range(), local_only: bool = False,
                         remote_only: bool = False, only_media: bool = False) -> Single[Pageable[Status]]:
        return Single(
            lambda: self.timeline_methods.get_tag_timeline(tag, range, local_only, remote_only, only_media).execute()
        )

    def get_list_timeline(self, list_id: str, range: Range = Range()) -> Single[Pageable[Status]]:
        return Single(lambda: self.timeline_methods.get_list_timeline(list_id, range).execute())
