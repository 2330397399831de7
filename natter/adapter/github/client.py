"""GitHub identity client.

Resolves a moderator's bearer token to a GitHub login through the REST API
"who am I" endpoint (GET /user).
"""

import httpx
import logfire

from natter.adapter.error import ProviderError
from natter.domain.error import InvalidCredentialError, ProviderUnavailableError
from natter.domain.service.identity_service import IdentityProvider
from natter.domain.value import Username


class GitHubIdentityClient(IdentityProvider):
    """Base class for GitHub identity clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitHubIdentityClient(GitHubIdentityClient):
    """GitHub identity client backed by the REST API."""

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        user_agent: str = "natter-admin",
        timeout: float = 10.0,
    ) -> None:
        """Initialize GitHub identity client.

        Args:
            api_url: GitHub REST API base URL
            user_agent: User-Agent header (required by GitHub)
            timeout: Request timeout in seconds
        """
        self.user_info_url = f"{api_url.rstrip('/')}/user"
        self.user_agent = user_agent
        self.timeout = timeout

    async def get_username(self, access_token: str) -> Username:
        """Resolve an access token to the GitHub login it belongs to.

        Args:
            access_token: GitHub OAuth access token

        Returns:
            GitHub login

        Raises:
            InvalidCredentialError: If GitHub rejects the token
            ProviderUnavailableError: If GitHub is unreachable or fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Accept": "application/json",
                        "User-Agent": self.user_agent,
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("GitHub user info HTTP error", error=str(e))
            raise ProviderUnavailableError(f"HTTP error fetching user info: {e}")

        if response.status_code >= 500:
            logfire.error(
                "GitHub user info request failed",
                status_code=response.status_code,
            )
            raise ProviderUnavailableError(
                f"User info request failed: {response.status_code}"
            )

        if response.status_code != 200:
            logfire.warn(
                "GitHub rejected credential",
                status_code=response.status_code,
            )
            raise InvalidCredentialError()

        try:
            return self._parse_login(response.json())
        except (ValueError, ProviderError) as e:
            logfire.warn("GitHub user info response unusable", error=str(e))
            raise InvalidCredentialError()

    @staticmethod
    def _parse_login(payload: object) -> Username:
        """Pull the login out of a /user response body."""
        if not isinstance(payload, dict):
            raise ProviderError("User info response is not an object")
        login = payload.get("login")
        if not isinstance(login, str) or not login:
            raise ProviderError("User info response has no login")
        return Username(login)


class MockGitHubIdentityClient(GitHubIdentityClient):
    """Mock GitHub identity client for testing.

    Returns deterministic identities without making real API calls.
    """

    # token -> login
    TOKENS: dict[str, str] = {
        "mock-admin-token": "mockadmin",
        "mock-outsider-token": "outsider",
    }
    # Token that simulates a provider outage
    UNAVAILABLE_TOKEN = "mock-unavailable-token"

    def __init__(self, tokens: dict[str, str] | None = None) -> None:
        """Initialize mock client without real API configuration."""
        self.tokens = dict(self.TOKENS if tokens is None else tokens)
        self.calls: list[str] = []

    async def get_username(self, access_token: str) -> Username:
        """Return the mock login for a known token.

        Raises:
            InvalidCredentialError: For unknown tokens
            ProviderUnavailableError: For UNAVAILABLE_TOKEN
        """
        self.calls.append(access_token)
        if access_token == self.UNAVAILABLE_TOKEN:
            raise ProviderUnavailableError()
        login = self.tokens.get(access_token)
        if login is None:
            raise InvalidCredentialError()
        return Username(login)
