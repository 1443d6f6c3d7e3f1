"""
Tests for AccountMethods.
"""

import pytest

from mastodon_client import Range
from mastodon_client.api.entities import Account, Relationship

from helpers import mock_client


@pytest.mark.unit
class TestAccountMethods:

    def test_get_account(self):
        client = mock_client("account.json")
        account = client.accounts.get_account("14715").execute()

        assert isinstance(account, Account)
        assert account.acct == "trwnh"
        assert client._session.last_call["url"] == "https://mastodon.cloud/api/v1/accounts/14715"

    def test_verify_credentials(self):
        client = mock_client("account.json")
        client.accounts.verify_credentials().execute()
        assert client._session.last_call["url"].endswith("api/v1/accounts/verify_credentials")

    def test_followers_pageable(self):
        link = '<https://mastodon.cloud/api/v1/accounts/1/followers?max_id=100>; rel="next"'
        client = mock_client("accounts.json", link=link)
        page = client.accounts.get_followers("1", Range(limit=2)).execute()

        assert len(page) == 2
        assert page.next == Range(max_id="100")
        assert client._session.last_call["url"].endswith("api/v1/accounts/1/followers?limit=2")

    def test_following(self):
        client = mock_client("accounts.json")
        client.accounts.get_following("1").execute()
        assert client._session.last_call["url"].endswith("api/v1/accounts/1/following")

    def test_get_statuses_flags(self):
        client = mock_client("statuses.json")
        client.accounts.get_statuses("1", only_media=True, pinned=True, range=Range(max_id="9")).execute()
        assert client._session.last_call["url"].endswith(
            "api/v1/accounts/1/statuses?only_media=true&pinned=true&max_id=9"
        )

    def test_follow_account(self):
        client = mock_client("relationship.json")
        relationship = client.accounts.follow_account("3", reblogs=False).execute()

        assert isinstance(relationship, Relationship)
        assert relationship.following is True
        call = client._session.last_call
        assert call["url"].endswith("api/v1/accounts/3/follow")
        assert call["data"] == "reblogs=false"

    def test_unfollow_account(self):
        client = mock_client("relationship.json")
        client.accounts.unfollow_account("3").execute()
        assert client._session.last_call["url"].endswith("api/v1/accounts/3/unfollow")

    def test_get_relationships(self):
        client = mock_client("relationships.json")
        relationships = client.accounts.get_relationships(["1", "2"]).execute()

        assert relationships[0].followed_by is True
        assert client._session.last_call["url"].endswith("api/v1/accounts/relationships?id[]=1&id[]=2")

    def test_search_accounts(self):
        client = mock_client("accounts.json")
        accounts = client.accounts.search_accounts("trwnh", limit=5).execute()

        assert [a.username for a in accounts] == ["Gargron", "trwnh"]
        assert client._session.last_call["url"].endswith("api/v1/accounts/search?q=trwnh&limit=5&resolve=false")
