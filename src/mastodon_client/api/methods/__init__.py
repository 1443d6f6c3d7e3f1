"""
Method groups, one per Mastodon resource family.

Each method builds a deferred MastodonRequest; nothing is sent until the
request is executed.
"""

from .accounts import AccountMethods
from .apps import AppMethods
from .bookmarks import BookmarkMethods
from .favourites import FavouriteMethods
from .media import MediaMethods
from .notifications import NotificationMethods
from .oauth import OAuthMethods, OOB_REDIRECT_URI
from .statuses import StatusMethods
from .timelines import TimelineMethods

__all__ = [
    "AccountMethods",
    "AppMethods",
    "BookmarkMethods",
    "FavouriteMethods",
    "MediaMethods",
    "NotificationMethods",
    "OAuthMethods",
    "OOB_REDIRECT_URI",
    "StatusMethods",
    "TimelineMethods",
]
