"""
Statuses API methods (``api/v1/statuses``).

Reference: https://docs.joinmastodon.org/methods/statuses/
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Union

from ...client import Method, segment
from ...parameters import Parameters
from ...request import MastodonRequest
from ...runtime.errors import ErrorKind, MastodonRequestException
from ..entities import Account, Context, ScheduledStatus, Status, Translation
from ..pageable import Pageable
from ..range import Range

if TYPE_CHECKING:
    from ...client import MastodonClient

Visibility = Status.Visibility

# Visibilities accepted when reblogging
REBLOG_VISIBILITIES = (Visibility.PUBLIC, Visibility.UNLISTED, Visibility.PRIVATE)


def _visibility(value: Union[Visibility, str]) -> Visibility:
    try:
        return Visibility(value)
    except ValueError as e:
        raise MastodonRequestException(
            f"Unknown visibility: {value!r}", ErrorKind.PRECONDITION, cause=e
        ) from e


def _append_status_options(parameters: Parameters, in_reply_to_id: Optional[str], sensitive: bool,
                            spoiler_text: Optional[str], visibility: Union[Visibility, str],
                            language: Optional[str], media_ids: Optional[List[str]] = None) -> Parameters:
    if in_reply_to_id is not None:
        parameters.append("in_reply_to_id", in_reply_to_id)
    if media_ids is not None:
        parameters.append("media_ids", media_ids)
    parameters.append("sensitive", sensitive)
    if spoiler_text is not None:
        parameters.append("spoiler_text", spoiler_text)
    parameters.append("visibility", _visibility(visibility).value)
    if language is not None:
        parameters.append("language", language)
    return parameters


def _append_poll(parameters: Parameters, poll_options: List[str], poll_expires_in: int,
                 poll_multiple: bool, poll_hide_totals: bool) -> Parameters:
    return (
        parameters
        .append("poll[options]", poll_options)
        .append("poll[expires_in]", poll_expires_in)
        .append("poll[multiple]", poll_multiple)
        .append("poll[hide_totals]", poll_hide_totals)
    )


class StatusMethods:
    """Access to endpoints with an ``api/v1/statuses`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    # =========================================================================
    # Reading
    # =========================================================================

    def get_status(self, status_id: str) -> MastodonRequest[Status]:
        """Obtain information about a status."""
        return self.client.get_mastodon_request(f"api/v1/statuses/{segment(status_id)}", Method.GET, Status)

    def get_context(self, status_id: str) -> MastodonRequest[Context]:
        """View statuses above and below this status in the thread."""
        return self.client.get_mastodon_request(f"api/v1/statuses/{segment(status_id)}/context", Method.GET, Context)

    def translate_status(self, status_id: str, language: Optional[str] = None) -> MastodonRequest[Translation]:
        """
        Translate the status content into some language.

        Args:
            status_id: ID of the status
            language: ISO 639 language code; defaults to the user's locale on the server
        """
        parameters = Parameters()
        if language is not None:
            parameters.append("lang", language)
        return self.client.get_mastodon_request(
            f"api/v1/statuses/{segment(status_id)}/translate", Method.POST, Translation, parameters
        )

    def get_reblogged_by(self, status_id: str, range: Range = Range()) -> MastodonRequest[Pageable[Account]]:
        """View who boosted a given status."""
        return self.client.get_pageable_mastodon_request(
            f"api/v1/statuses/{segment(status_id)}/reblogged_by", Method.GET, Account, range.to_parameters()
        )

    def get_favourited_by(self, status_id: str, range: Range = Range()) -> MastodonRequest[Pageable[Account]]:
        """View who favourited a given status."""
        return self.client.get_pageable_mastodon_request(
            f"api/v1/statuses/{segment(status_id)}/favourited_by", Method.GET, Account, range.to_parameters()
        )

    # =========================================================================
    # Posting
    # =========================================================================

    def post_status(
        self,
        status: str,
        in_reply_to_id: Optional[str] = None,
        media_ids: Optional[List[str]] = None,
        sensitive: bool = False,
        spoiler_text: Optional[str] = None,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        language: Optional[str] = None,
    ) -> MastodonRequest[Status]:
        """
        Publish a status. Use post_poll for a poll, schedule_status to schedule.

        Args:
            status: Text of the status
            in_reply_to_id: ID of the status being replied to
            media_ids: IDs of media attachments (maximum 4)
            sensitive: Mark the attached media as sensitive
            spoiler_text: Warning shown before the actual content
            visibility: One of public, unlisted, private, direct
            language: ISO 639 language code of the status
        """
        parameters = _append_status_options(Parameters().append("status", status), in_reply_to_id,
                                            sensitive, spoiler_text, visibility, language, media_ids)
        return self.client.get_mastodon_request("api/v1/statuses", Method.POST, Status, parameters)

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
    ) -> MastodonRequest[Status]:
        """
        Publish a status containing a poll.

        Args:
            status: Text of the status
            poll_options: Possible answers to the poll
            poll_expires_in: Seconds the poll stays open
            poll_multiple: Allow multiple choices
            poll_hide_totals: Hide vote counts until the poll ends
        """
        parameters = _append_poll(Parameters().append("status", status), poll_options,
                                  poll_expires_in, poll_multiple, poll_hide_totals)
        _append_status_options(parameters, in_reply_to_id, sensitive, spoiler_text, visibility, language)
        return self.client.get_mastodon_request("api/v1/statuses", Method.POST, Status, parameters)

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
    ) -> MastodonRequest[ScheduledStatus]:
        """
        Schedule a status.

        Args:
            scheduled_at: ISO 8601 datetime, at least 5 minutes in the future
        """
        parameters = _append_status_options(Parameters().append("status", status), in_reply_to_id,
                                            sensitive, spoiler_text, visibility, language, media_ids)
        parameters.append("scheduled_at", scheduled_at)
        return self.client.get_mastodon_request("api/v1/statuses", Method.POST, ScheduledStatus, parameters)

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
    ) -> MastodonRequest[ScheduledStatus]:
        """Schedule a status containing a poll."""
        parameters = _append_poll(Parameters().append("status", status), poll_options,
                                  poll_expires_in, poll_multiple, poll_hide_totals)
        _append_status_options(parameters, in_reply_to_id, sensitive, spoiler_text, visibility, language)
        parameters.append("scheduled_at", scheduled_at)
        return self.client.get_mastodon_request("api/v1/statuses", Method.POST, ScheduledStatus, parameters)

    def delete_status(self, status_id: str) -> MastodonRequest[Status]:
        """Delete one of your own statuses."""
        return self.client.get_mastodon_request(f"api/v1/statuses/{segment(status_id)}", Method.DELETE, Status)

    # =========================================================================
    # Interactions
    # =========================================================================

    def reblog_status(self, status_id: str,
                      visibility: Union[Visibility, str] = Visibility.PUBLIC) -> MastodonRequest[Status]:
        """
        Reshare a status on your own profile.

        Raises:
            MastodonRequestException: If visibility is not public, unlisted or private.
                Raised immediately, before any request is built.
        """
        visibility = _visibility(visibility)
        if visibility not in REBLOG_VISIBILITIES:
            raise MastodonRequestException(
                "Visibility must be one of: public, unlisted, private when reblogging.",
                ErrorKind.PRECONDITION,
            )
        parameters = Parameters().append("visibility", visibility.value)
        return self.client.get_mastodon_request(
            f"api/v1/statuses/{segment(status_id)}/reblog", Method.POST, Status, parameters
        )

    def unreblog_status(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "unreblog")

    def favourite_status(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "favourite")

    def unfavourite_status(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "unfavourite")

    def bookmark_status(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "bookmark")

    def unbookmark_status(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "unbookmark")

    def mute_conversation(self, status_id: str) -> MastodonRequest[Status]:
        """Stop notifications for the thread this status is part of."""
        return self._status_action(status_id, "mute")

    def unmute_conversation(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "unmute")

    def pin_status(self, status_id: str) -> MastodonRequest[Status]:
        """Feature one of your own public statuses at the top of your profile."""
        return self._status_action(status_id, "pin")

    def unpin_status(self, status_id: str) -> MastodonRequest[Status]:
        return self._status_action(status_id, "unpin")

    def _status_action(self, status_id: str, action: str) -> MastodonRequest[Status]:
        return self.client.get_mastodon_request(f"api/v1/statuses/{segment(status_id)}/{action}", Method.POST, Status)
