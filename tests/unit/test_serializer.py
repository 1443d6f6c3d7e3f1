"""
Unit tests for JSON deserialization into entities.
"""

import pytest

from mastodon_client import ErrorKind, MastodonRequestException
from mastodon_client.api.entities import (
    AccessToken, Account, Context, MediaAttachment, Notification, ScheduledStatus, Status, Translation,
)
from mastodon_client.runtime.serializer import parse_entity, parse_list

from helpers import load_fixture


@pytest.mark.unit
class TestParseEntity:
    """Tests for single-entity parsing."""

    def test_account_ignores_unknown_fields(self):
        account = parse_entity(load_fixture("account.json"), Account)
        assert account.id == "14715"
        assert account.username == "trwnh"
        assert account.created_at is not None

    def test_status(self, fixture_text):
        status = parse_entity(fixture_text("status.json"), Status)
        assert status.id == "103270115826048975"
        assert status.visibility == Status.Visibility.PUBLIC.value
        assert status.reblogs_count == 6

    def test_notification(self):
        notification = parse_entity(load_fixture("notification.json"), Notification)
        assert notification.type == Notification.Type.MENTION.value
        assert notification.status.mentions[0].acct == "trwnh"

    def test_context(self):
        context = parse_entity(load_fixture("context.json"), Context)
        assert len(context.ancestors) == 1
        assert len(context.descendants) == 2

    def test_scheduled_status(self):
        scheduled = parse_entity(load_fixture("scheduled_status.json"), ScheduledStatus)
        assert scheduled.id == "3221"
        assert scheduled.params.text == "test content"

    def test_translation(self):
        assert parse_entity(load_fixture("translation.json"), Translation).detected_source_language == "de"

    def test_media_attachment(self):
        media = parse_entity(load_fixture("media_attachment.json"), MediaAttachment)
        assert media.type == MediaAttachment.Type.IMAGE.value
        assert media.description == "test media description"

    def test_access_token(self):
        token = parse_entity(load_fixture("access_token.json"), AccessToken)
        assert token.access_token == "test"
        assert token.created_at == 1493188835

    def test_invalid_json(self):
        with pytest.raises(MastodonRequestException) as exc_info:
            parse_entity("{", Status)
        assert exc_info.value.kind is ErrorKind.DESERIALIZATION

    def test_missing_required_field(self):
        with pytest.raises(MastodonRequestException) as exc_info:
            parse_entity('{"content": "no id"}', Status)
        assert exc_info.value.kind is ErrorKind.DESERIALIZATION
        assert "Status" in exc_info.value.message


@pytest.mark.unit
class TestParseList:
    """Tests for list parsing."""

    def test_statuses_in_server_order(self):
        statuses = parse_list(load_fixture("statuses.json"), Status)
        assert [s.id for s in statuses] == ["103270115826048975", "103270115826048974"]
        assert statuses[1].reblog.id == "103270115826040000"

    def test_empty_list(self):
        assert parse_list("[]", Status) == []

    def test_object_instead_of_list(self):
        with pytest.raises(MastodonRequestException) as exc_info:
            parse_list(load_fixture("status.json"), Status)
        assert exc_info.value.kind is ErrorKind.DESERIALIZATION

    def test_invalid_element(self):
        with pytest.raises(MastodonRequestException):
            parse_list('[{"id": "1"}, {"content": "x"}]', Status)

    def test_on_json_keeps_non_ascii_text(self):
        seen = []
        parse_list('[{"id": "1", "content": "héllo"}]', Status, seen.append)
        assert seen == ['{"id": "1", "content": "héllo"}']

    def test_on_json_receives_each_element(self):
        seen = []
        parse_list(load_fixture("accounts.json"), Account, seen.append)
        assert len(seen) == 2
        assert '"Gargron"' in seen[0]
