"""
Apps API methods (``api/v1/apps``).

Reference: https://docs.joinmastodon.org/methods/apps/
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from ...client import Method
from ...parameters import Parameters
from ...request import MastodonRequest
from ..entities import Application
from ..scope import Scope
from .oauth import OOB_REDIRECT_URI

if TYPE_CHECKING:
    from ...client import MastodonClient


class AppMethods:
    """Access to endpoints with an ``api/v1/apps`` prefix."""

    def __init__(self, client: MastodonClient):
        self.client = client

    def create_app(
        self,
        client_name: str,
        redirect_uris: str = OOB_REDIRECT_URI,
        scope: Scope = Scope(),
        website: Optional[str] = None,
    ) -> MastodonRequest[Application]:
        """
        Register a client application; the result carries its client_id and client_secret.

        Args:
            client_name: Name of the application
            redirect_uris: Where users are sent after authorization
            scope: Scopes the application may request
            website: URL of the application's homepage
        """
        parameters = (
            Parameters()
            .append("client_name", client_name)
            .append("redirect_uris", redirect_uris)
            .append("scopes", str(scope))
        )
        if website is not None:
            parameters.append("website", website)
        return self.client.get_mastodon_request("api/v1/apps", Method.POST, Application, parameters)

    def verify_app_credentials(self) -> MastodonRequest[Application]:
        """Confirm that the app's OAuth2 credentials work."""
        return self.client.get_mastodon_request("api/v1/apps/verify_credentials", Method.GET, Application)
