"""
Unit tests for Link-header parsing and Pageable construction.
"""

import pytest

from mastodon_client import MastodonRequestException, Pageable, Range, parse_link_header
from mastodon_client.api.entities import Notification
from mastodon_client.api.pageable import range_from_url

from helpers import MockResponse, load_fixture

LINK = (
    '<https://mstdn.jp/api/v1/notifications?max_id=34975535>; rel="next", '
    '<https://mstdn.jp/api/v1/notifications?min_id=34975861>; rel="prev"'
)


@pytest.mark.unit
class TestParseLinkHeader:
    """Tests for parse_link_header."""

    def test_next_and_prev(self):
        links = parse_link_header(LINK)
        assert links == {
            "next": "https://mstdn.jp/api/v1/notifications?max_id=34975535",
            "prev": "https://mstdn.jp/api/v1/notifications?min_id=34975861",
        }

    def test_missing_header(self):
        assert parse_link_header(None) == {}
        assert parse_link_header("") == {}

    def test_unquoted_rel(self):
        links = parse_link_header("<https://a.example/x?max_id=1>; rel=next")
        assert links == {"next": "https://a.example/x?max_id=1"}

    def test_multiple_rels_in_one_link(self):
        links = parse_link_header('<https://a.example/x?max_id=1>; rel="next last"')
        assert links["next"] == links["last"] == "https://a.example/x?max_id=1"

    def test_first_occurrence_wins(self):
        links = parse_link_header(
            '<https://a.example/1>; rel="next", <https://a.example/2>; rel="next"'
        )
        assert links["next"] == "https://a.example/1"

    def test_ignores_other_params(self):
        links = parse_link_header('<https://a.example/1>; title="page"; rel="prev"')
        assert links == {"prev": "https://a.example/1"}

    def test_link_without_rel(self):
        assert parse_link_header("<https://a.example/1>; title=x") == {}


@pytest.mark.unit
class TestRangeFromUrl:
    """Tests for turning page URLs into ranges."""

    def test_max_id(self):
        assert range_from_url("https://a.example/api?max_id=34975535") == Range(max_id="34975535")

    def test_all_bounds(self):
        r = range_from_url("https://a.example/api?limit=20&since_id=1&min_id=2&max_id=3&exclude_types[]=follow")
        assert r == Range(max_id="3", min_id="2", since_id="1", limit=20)

    def test_invalid_limit_is_dropped(self):
        assert range_from_url("https://a.example/api?max_id=1&limit=abc").limit is None
        assert range_from_url("https://a.example/api?max_id=1&limit=0").limit is None


@pytest.mark.unit
class TestPageableFromResponse:
    """Tests for Pageable.from_response."""

    def test_parts_and_cursors(self):
        response = MockResponse(text=load_fixture("notifications.json"), headers={"Link": LINK})
        page = Pageable.from_response(response, Notification)

        assert len(page) == 3
        assert [n.id for n in page] == ["34975861", "34975535", "34975400"]
        assert page.next == Range(max_id="34975535")
        assert page.prev == Range(min_id="34975861")
        assert page.has_next and page.has_prev

    def test_no_link_header(self):
        response = MockResponse(text=load_fixture("notifications.json"))
        page = Pageable.from_response(response, Notification)

        assert page.next is None
        assert page.prev is None
        assert not page.has_next
        assert page.links == {}

    def test_only_next(self):
        response = MockResponse(
            text="[]", headers={"link": '<https://a.example/api?max_id=9>; rel="next"'}
        )
        page = Pageable.from_response(response, Notification)

        assert page.to_list() == []
        assert page.next == Range(max_id="9")
        assert page.prev is None

    def test_non_list_body(self):
        response = MockResponse(text=load_fixture("notification.json"))
        with pytest.raises(MastodonRequestException) as exc_info:
            Pageable.from_response(response, Notification)
        assert exc_info.value.kind.value == "deserialization"

    def test_links_are_read_only(self):
        response = MockResponse(text="[]", headers={"Link": LINK})
        page = Pageable.from_response(response, Notification)

        with pytest.raises(TypeError):
            page.links["next"] = "https://elsewhere.example"
        assert page.links["next"].endswith("max_id=34975535")

    def test_on_json_per_element(self):
        seen = []
        response = MockResponse(text=load_fixture("notifications.json"))
        Pageable.from_response(response, Notification, seen.append)
        assert len(seen) == 3
        assert '"34975861"' in seen[0]
