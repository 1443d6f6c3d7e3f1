"""
Notifications API methods (``api/v1/notifications``).

Reference: https://docs.joinmastodon.org/methods/notifications/
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Union

from ...client import Method, segment
from ...parameters import Parameters
from ...request import MastodonRequest
from ..entities import Notification
from ..pageable import Pageable
from ..range import Range

if TYPE_CHECKING:
    from ...client import MastodonClient

NotificationType = Union[Notification.Type, str]


def _type_values(types: List[NotificationType]) -> List[str]:
    return [Notification.Type(t).value if isinstance(t, Notification.Type) else t for t in types]


class NotificationMethods:
    """Access to endpoints with an ``api/v1/notifications`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def get_notifications(
        self,
        range: Range = Range(),
        exclude_types: Optional[List[NotificationType]] = None,
        types: Optional[List[NotificationType]] = None,
        account_id: Optional[str] = None,
    ) -> MastodonRequest[Pageable[Notification]]:
        """
        Notifications concerning the user.

        Args:
            range: Pagination bounds
            exclude_types: Types to exclude from the results
            types: Types to include in the results
            account_id: Only return notifications received from this account
        """
        parameters = Parameters()
        if exclude_types:
            parameters.append("exclude_types", _type_values(exclude_types))
        if types:
            parameters.append("types", _type_values(types))
        if account_id is not None:
            parameters.append("account_id", account_id)
        parameters.extend(range.to_parameters())
        return self.client.get_pageable_mastodon_request(
            "api/v1/notifications", Method.GET, Notification, parameters
        )

    def get_notification(self, notification_id: str) -> MastodonRequest[Notification]:
        """View information about a notification with a given ID."""
        return self.client.get_mastodon_request(
            f"api/v1/notifications/{segment(notification_id)}", Method.GET, Notification
        )

    def dismiss_notification(self, notification_id: str) -> MastodonRequest[None]:
        """Dismiss a single notification from the server."""
        return self.client.get_void_request(f"api/v1/notifications/{segment(notification_id)}/dismiss", Method.POST)

    def clear_notifications(self) -> MastodonRequest[None]:
        """Clear all notifications from the server."""
        return self.client.get_void_request("api/v1/notifications/clear", Method.POST)
