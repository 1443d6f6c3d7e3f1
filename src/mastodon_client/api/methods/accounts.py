"""
Accounts API methods (``api/v1/accounts``).

Reference: https://docs.joinmastodon.org/methods/accounts/
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from ...client import Method, segment
from ...parameters import Parameters
from ...request import MastodonRequest
from ..entities import Account, Relationship, Status
from ..pageable import Pageable
from ..range import Range

if TYPE_CHECKING:
    from ...client import MastodonClient


class AccountMethods:
    """Access to endpoints with an ``api/v1/accounts`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def get_account(self, account_id: str) -> MastodonRequest[Account]:
        """View information about a profile."""
        return self.client.get_mastodon_request(f"api/v1/accounts/{segment(account_id)}", Method.GET, Account)

    def verify_credentials(self) -> MastodonRequest[Account]:
        """Test to make sure that the user token works."""
        return self.client.get_mastodon_request("api/v1/accounts/verify_credentials", Method.GET, Account)

    def get_followers(self, account_id: str, range: Range = Range()) -> MastodonRequest[Pageable[Account]]:
        """Accounts which follow the given account."""
        return self.client.get_pageable_mastodon_request(
            f"api/v1/accounts/{segment(account_id)}/followers", Method.GET, Account, range.to_parameters()
        )

    def get_following(self, account_id: str, range: Range = Range()) -> MastodonRequest[Pageable[Account]]:
        """Accounts which the given account is following."""
        return self.client.get_pageable_mastodon_request(
            f"api/v1/accounts/{segment(account_id)}/following", Method.GET, Account, range.to_parameters()
        )

    def get_statuses(
        self,
        account_id: str,
        only_media: bool = False,
        exclude_replies: bool = False,
        pinned: bool = False,
        range: Range = Range(),
    ) -> MastodonRequest[Pageable[Status]]:
        """
        Statuses posted to the given account.

        Only flags that are set are sent to the server.
        """
        parameters = Parameters()
        if only_media:
            parameters.append("only_media", True)
        if exclude_replies:
            parameters.append("exclude_replies", True)
        if pinned:
            parameters.append("pinned", True)
        parameters.extend(range.to_parameters())
        return self.client.get_pageable_mastodon_request(
            f"api/v1/accounts/{segment(account_id)}/statuses", Method.GET, Status, parameters
        )

    def follow_account(self, account_id: str, reblogs: Optional[bool] = None,
                       notify: Optional[bool] = None) -> MastodonRequest[Relationship]:
        """Follow the given account."""
        parameters = Parameters()
        if reblogs is not None:
            parameters.append("reblogs", reblogs)
        if notify is not None:
            parameters.append("notify", notify)
        return self.client.get_mastodon_request(
            f"api/v1/accounts/{segment(account_id)}/follow", Method.POST, Relationship, parameters
        )

    def unfollow_account(self, account_id: str) -> MastodonRequest[Relationship]:
        return self.client.get_mastodon_request(
            f"api/v1/accounts/{segment(account_id)}/unfollow", Method.POST, Relationship
        )

    def get_relationships(self, account_ids: List[str]) -> MastodonRequest[list]:
        """Relationships of the authenticated account to the given accounts."""
        return self.client.get_mastodon_request_for_list(
            "api/v1/accounts/relationships", Method.GET, Relationship,
            Parameters().append("id", account_ids),
        )

    def search_accounts(self, query: str, limit: int = 40,
                        resolve: bool = False) -> MastodonRequest[list]:
        """
        Search for matching accounts by username or display name.

        Args:
            query: Search text
            limit: Maximum number of results
            resolve: Attempt WebFinger lookup for remote accounts
        """
        parameters = (
            Parameters()
            .append("q", query)
            .append("limit", limit)
            .append("resolve", resolve)
        )
        return self.client.get_mastodon_request_for_list("api/v1/accounts/search", Method.GET, Account, parameters)
