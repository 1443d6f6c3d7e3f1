"""
Reactive wrapper for StatusMethods.

Request construction happens inside the Single as well, so client-side
precondition failures (e.g. an invalid reblog visibility) arrive through the
error channel like network failures do.
"""

from __future__ import annotations
from typing import List, Optional, Union

from ..api.entities import Account, Context, ScheduledStatus, Status, Translation
from ..api.methods.statuses import StatusMethods, Visibility
from ..api.pageable import Pageable
from ..api.range import Range
from ..client import MastodonClient
from .single import Single


class RxStatusMethods:
    """StatusMethods delivering results through Single."""

    def __init__(self, client: MastodonClient):
        self.status_methods = StatusMethods(client)

    def get_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.get_status(status_id).execute())

    def get_context(self, status_id: str) -> Single[Context]:
        return Single(lambda: self.status_methods.get_context(status_id).execute())

    def translate_status(self, status_id: str, language: Optional[str] = None) -> Single[Translation]:
        return Single(lambda: self.status_methods.translate_status(status_id, language).execute())

    def get_reblogged_by(self, status_id: str, range: Range = Range()) -> Single[Pageable[Account]]:
        return Single(lambda: self.status_methods.get_reblogged_by(status_id, range).execute())

    def get_favourited_by(self, status_id: str, range: Range = Range()) -> Single[Pageable[Account]]:
        return Single(lambda: self.status_methods.get_favourited_by(status_id, range).execute())

    def post_status(
        self,
        status: str,
        in_reply_to_id: Optional[str] = None,
        media_ids: Optional[List[str]] = None,
        sensitive: bool = False,
        spoiler_text: Optional[str] = None,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        language: Optional[str] = None,
    ) -> Single[Status]:
        return Single(lambda: self.status_methods.post_status(
            status, in_reply_to_id, media_ids, sensitive, spoiler_text, visibility, language
        ).execute())

    def post_poll(
        self,
        status: str,
        poll_options: List[str],
        poll_expires_in: int,
        poll_multiple: bool = False,
        poll_hide_totals: bool = False,
        in_reply_to_id: Optional[str] = None,
        sensitive: bool = False,
        spoiler_text: Optional[str] = None,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        language: Optional[str] = None,
    ) -> Single[Status]:
        return Single(lambda: self.status_methods.post_poll(
            status, poll_options, poll_expires_in, poll_multiple, poll_hide_totals,
            in_reply_to_id, sensitive, spoiler_text, visibility, language
        ).execute())

    def schedule_status(
        self,
        status: str,
        scheduled_at: str,
        in_reply_to_id: Optional[str] = None,
        media_ids: Optional[List[str]] = None,
        sensitive: bool = False,
        spoiler_text: Optional[str] = None,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        language: Optional[str] = None,
    ) -> Single[ScheduledStatus]:
        return Single(lambda: self.status_methods.schedule_status(
            status, scheduled_at, in_reply_to_id, media_ids, sensitive, spoiler_text, visibility, language
        ).execute())

    def schedule_poll(
        self,
        status: str,
        poll_options: List[str],
        poll_expires_in: int,
        scheduled_at: str,
        poll_multiple: bool = False,
        poll_hide_totals: bool = False,
        in_reply_to_id: Optional[str] = None,
        sensitive: bool = False,
        spoiler_text: Optional[str] = None,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        language: Optional[str] = None,
    ) -> Single[ScheduledStatus]:
        return Single(lambda: self.status_methods.schedule_poll(
            status, poll_options, poll_expires_in, scheduled_at, poll_multiple, poll_hide_totals,
            in_reply_to_id, sensitive, spoiler_text, visibility, language
        ).execute())

    def delete_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.delete_status(status_id).execute())

    def reblog_status(self, status_id: str,
                      visibility: Union[Visibility, str] = Visibility.PUBLIC) -> Single[Status]:
        return Single(lambda: self.status_methods.reblog_status(status_id, visibility).execute())

    def unreblog_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.unreblog_status(status_id).execute())

    def favourite_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.favourite_status(status_id).execute())

    def unfavourite_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.unfavourite_status(status_id).execute())

    def bookmark_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.bookmark_status(status_id).execute())

    def unbookmark_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.unbookmark_status(status_id).execute())

    def mute_conversation(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.mute_conversation(status_id).execute())

    def unmute_conversation(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.unmute_conversation(status_id).execute())

    def pin_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.pin_status(status_id).execute())

    def unpin_status(self, status_id: str) -> Single[Status]:
        return Single(lambda: self.status_methods.unpin_status(status_id).execute())
