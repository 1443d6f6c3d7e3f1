"""
Reactive wrapper for MediaMethods.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple, Union

from ..api.entities import MediaAttachment
from ..api.methods.media import MediaMethods
from ..client import MastodonClient
from .single import Single


class RxMediaMethods:
    """MediaMethods delivering results through Single."""

    def __init__(self, client: MastodonClient):
        self.media_methods = MediaMethods(client)

    def upload_media(self, file: Union[str, Path], media_type: str, description: Optional[str] = None,
                     focus: Optional[Tuple[float, float]] = None) -> Single[MediaAttachment]:
        return Single(lambda: self.media_methods.upload_media(file, media_type, description, focus).execute())

    def update_media(self, media_id: str, description: Optional[str] = None,
                     focus: Optional[Tuple[float, float]] = None) -> Single[MediaAttachment]:
        return Single(lambda: self.media_methods.update_media(media_id, description, focus).execute())
