"""
Reactive-style wrappers.

Each wrapper method returns a Single or Completable around the matching
synchronous request. Errors, including client-side precondition failures,
are delivered through the primitive's error channel.
"""

from .single import Single, Completable
from .media import RxMediaMethods
from .notifications import RxNotificationMethods
from .statuses import RxStatusMethods
from .timelines import RxTimelineMethods

__all__ = [
    "Single",
    "Completable",
    "RxMediaMethods",
    "RxNotificationMethods",
    "RxStatusMethods",
    "RxTimelineMethods",
]
