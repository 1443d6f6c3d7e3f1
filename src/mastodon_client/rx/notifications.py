"""
Reactive wrapper for NotificationMethods.
"""

from __future__ import annotations
from typing import List, Optional

from ..api.entities import Notification
from ..api.methods.notifications import NotificationMethods, NotificationType
from ..api.pageable import Pageable
from ..api.range import Range
from ..client import MastodonClient
from .single import Completable, Single


class RxNotificationMethods:
    """NotificationMethods delivering results through Single and Completable."""

    def __init__(self, client: MastodonClient):
        self.notification_methods = NotificationMethods(client)

    def get_notifications(
        self,
        range: Range = Range(),
        exclude_types: Optional[List[NotificationType]] = None,
        types: Optional[List[NotificationType]] = None,
        account_id: Optional[str] = None,
    ) -> Single[Pageable[Notification]]:
        return Single(
            lambda: self.notification_methods.get_notifications(range, exclude_types, types, account_id).execute()
        )

    def get_notification(self, notification_id: str) -> Single[Notification]:
        return Single(lambda: self.notification_methods.get_notification(notification_id).execute())

    def dismiss_notification(self, notification_id: str) -> Completable:
        return Completable(lambda: self.notification_methods.dismiss_notification(notification_id).execute())

    def clear_notifications(self) -> Completable:
        return Completable(lambda: self.notification_methods.clear_notifications().execute())
