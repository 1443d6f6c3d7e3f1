"""
Tests for MediaMethods.
"""

import pytest

from mastodon_client import ErrorKind, MastodonRequestException
from mastodon_client.api.entities import MediaAttachment

from helpers import mock_client


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "test.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return path


@pytest.mark.unit
class TestMediaMethods:

    def test_upload_media(self, image):
        client = mock_client("media_attachment.json")
        media = client.media.upload_media(image, "image/png", description="test media description").execute()

        assert isinstance(media, MediaAttachment)
        assert media.id == "22345792"
        assert media.description == "test media description"

        call = client._session.last_call
        assert call["method"] == "POST"
        assert call["url"] == "https://mastodon.cloud/api/v1/media"
        assert list(call["files"]) == ["file"]
        name, _, media_type = call["files"]["file"]
        assert name == "test.png"
        assert media_type == "image/png"
        assert call["file_contents"]["file"] == b"\x89PNG\r\n\x1a\nfake"
        assert call["data"] == [("description", "test media description")]

    def test_upload_reads_file_at_execute_time(self, tmp_path):
        path = tmp_path / "later.png"
        client = mock_client("media_attachment.json")
        request = client.media.upload_media(str(path), "image/png")

        path.write_bytes(b"data")
        request.execute()
        assert client._session.last_call["file_contents"]["file"] == b"data"

    def test_upload_focus(self, image):
        client = mock_client("media_attachment.json")
        client.media.upload_media(image, "image/png", focus=(-0.42, 0.69)).execute()
        assert client._session.last_call["data"] == [("focus", "-0.42,0.69")]

    def test_missing_file(self, tmp_path):
        client = mock_client("media_attachment.json")
        request = client.media.upload_media(tmp_path / "missing.png", "image/png")

        with pytest.raises(MastodonRequestException) as exc_info:
            request.execute()
        assert exc_info.value.kind is ErrorKind.TRANSPORT
        assert isinstance(exc_info.value.cause, OSError)
        assert client._session.calls == []

    def test_upload_on_json(self, image):
        seen = []
        client = mock_client("media_attachment.json")
        client.media.upload_media(image, "image/png").on_json(seen.append).execute()
        assert len(seen) == 1

    def test_update_media(self):
        client = mock_client("media_attachment.json")
        client.media.update_media("22345792", description="new").execute()

        call = client._session.last_call
        assert call["method"] == "PUT"
        assert call["url"].endswith("api/v1/media/22345792")
        assert call["data"] == "description=new"
