"""Mock identity provider for testing."""

from dishka import Scope, provide

from natter.adapter.github import MockGitHubIdentityClient
from natter.domain.service import IdentityProvider
from natter.util.di.infrastructure.identity import IdentityProviderProvider


class MockIdentityProviderProvider(IdentityProviderProvider):
    """Mock identity provider using the mock GitHub client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_provider(self) -> IdentityProvider:
        """Provide mock GitHub identity client."""
        return MockGitHubIdentityClient()
