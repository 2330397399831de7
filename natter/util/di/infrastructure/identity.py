"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from natter.adapter.github import RealGitHubIdentityClient
from natter.config import AdminSettings
from natter.domain.service import IdentityProvider
from natter.util.di.base import ProviderBase


class IdentityProviderProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "identity"


class ProdIdentityProviderProvider(IdentityProviderProvider):
    """Production identity provider backed by the GitHub API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, admin_settings: AdminSettings) -> IdentityProvider:
        """Provide GitHub identity client."""
        return RealGitHubIdentityClient(
            api_url=admin_settings.identity_api_url,
            user_agent=admin_settings.user_agent,
            timeout=admin_settings.timeout_seconds,
        )
