"""
OAuth API methods (``oauth/``).

Reference: https://docs.joinmastodon.org/methods/oauth/
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from ...client import Method
from ...parameters import Parameters
from ...request import MastodonRequest
from ..entities import AccessToken
from ..scope import Scope

if TYPE_CHECKING:
    from ...client import MastodonClient

# Out-of-band redirect: the authorization code is shown to the user instead of redirected
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


class OAuthMethods:
    """Access to endpoints with an ``oauth`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def get_oauth_url(
        self,
        client_id: str,
        scope: Scope = Scope(),
        redirect_uri: str = OOB_REDIRECT_URI,
    ) -> str:
        """
        Build the URL a user opens to authorize this application.

        Args:
            client_id: Client ID of the registered application
            scope: Scopes to request
            redirect_uri: Where the user is sent after authorizing

        Returns:
            Authorization URL on the configured instance
        """
        parameters = (
            Parameters()
            .append("client_id", client_id)
            .append("redirect_uri", redirect_uri)
            .append("response_type", "code")
            .append("scope", str(scope))
        )
        return f"{self.client.full_url('oauth/authorize')}?{parameters.build()}"

    def get_user_access_token_with_authorization_code_grant(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str = OOB_REDIRECT_URI,
        code: str = "",
        grant_type: str = "authorization_code",
    ) -> MastodonRequest[AccessToken]:
        """
        Exchange an authorization code for a user access token.

        Args:
            client_id: Client ID of the registered application
            client_secret: Client secret of the registered application
            redirect_uri: Must match the URI used for get_oauth_url
            code: Authorization code obtained by the user
            grant_type: Grant type, "authorization_code" by default
        """
        parameters = (
            Parameters()
            .append("client_id", client_id)
            .append("client_secret", client_secret)
            .append("redirect_uri", redirect_uri)
            .append("code", code)
            .append("grant_type", grant_type)
        )
        return self.client.get_mastodon_request("oauth/token", Method.POST, AccessToken, parameters)

    def get_user_access_token_with_password_grant(
        self,
        client_id: str,
        client_secret: str,
        scope: Scope,
        redirect_uri: str,
        username: str,
        password: str,
        grant_type: str = "password",
    ) -> MastodonRequest[AccessToken]:
        """
        Obtain a user access token with the resource owner's credentials.

        Args:
            username: E-mail address of the user
            password: Password of the user
        """
        parameters = (
            Parameters()
            .append("client_id", client_id)
            .append("client_secret", client_secret)
            .append("scope", str(scope))
            .append("redirect_uri", redirect_uri)
            .append("username", username)
            .append("password", password)
            .append("grant_type", grant_type)
        )
        return self.client.get_mastodon_request("oauth/token", Method.POST, AccessToken, parameters)

    def get_access_token_with_client_credentials_grant(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str = OOB_REDIRECT_URI,
        scope: Optional[Scope] = None,
    ) -> MastodonRequest[AccessToken]:
        """Obtain an application-level access token that is not tied to a user."""
        parameters = (
            Parameters()
            .append("client_id", client_id)
            .append("client_secret", client_secret)
            .append("redirect_uri", redirect_uri)
            .append("grant_type", "client_credentials")
        )
        if scope is not None:
            parameters.append("scope", str(scope))
        return self.client.get_mastodon_request("oauth/token", Method.POST, AccessToken, parameters)

    def revoke_token(self, client_id: str, client_secret: str, token: str) -> MastodonRequest[None]:
        """Revoke an access token so it can no longer be used."""
        parameters = (
            Parameters()
            .append("client_id", client_id)
            .append("client_secret", client_secret)
            .append("token", token)
        )
        return self.client.get_void_request("oauth/revoke", Method.POST, parameters)
