"""
Media API methods (``api/v1/media``).

Reference: https://docs.joinmastodon.org/methods/media/
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple, Union
import logging

import requests

from ...client import Method, segment
from ...parameters import Parameters
from ...request import MastodonRequest, entity_mapper
from ...runtime.errors import ErrorKind, MastodonRequestException
from ..entities import MediaAttachment

if TYPE_CHECKING:
    from ...client import MastodonClient

logger = logging.getLogger(__name__)


def _media_parameters(description: Optional[str], focus: Optional[Tuple[float, float]]) -> Parameters:
    parameters = Parameters()
    if description is not None:
        parameters.append("description", description)
    if focus is not None:
        parameters.append("focus", f"{focus[0]},{focus[1]}")
    return parameters


class MediaMethods:
    """Access to endpoints with an ``api/v1/media`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def upload_media(
        self,
        file: Union[str, Path],
        media_type: str,
        description: Optional[str] = None,
        focus: Optional[Tuple[float, float]] = None,
    ) -> MastodonRequest[MediaAttachment]:
        """
        Create an attachment to be used with a new status.

        The file is read when the request is executed, and sent as the single
        multipart part named ``file``.

        Args:
            file: Path of the file to upload
            media_type: MIME type of the file, e.g. "image/png"
            description: Alt text for the media
            focus: Focal point as (x, y), each between -1.0 and 1.0
        """
        path = Path(file)
        parameters = _media_parameters(description, focus)

        def upload() -> requests.Response:
            try:
                handle = path.open("rb")
            except OSError as e:
                raise MastodonRequestException(
                    f"Cannot read media file {path}", ErrorKind.TRANSPORT, cause=e
                ) from e
            with handle:
                logger.debug(f"Uploading {path.name} ({media_type})")
                return self.client.post_multipart(
                    "api/v1/media", {"file": (path.name, handle, media_type)}, parameters
                )

        return MastodonRequest(upload, entity_mapper(MediaAttachment))

    def update_media(
        self,
        media_id: str,
        description: Optional[str] = None,
        focus: Optional[Tuple[float, float]] = None,
    ) -> MastodonRequest[MediaAttachment]:
        """Update a media attachment's parameters before it is attached to a status."""
        return self.client.get_mastodon_request(
            f"api/v1/media/{segment(media_id)}", Method.PUT, MediaAttachment, _media_parameters(description, focus)
        )
