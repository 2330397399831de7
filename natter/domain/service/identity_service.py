"""Moderator identity verification."""

from collections.abc import Iterable

import logfire

from natter.domain.error import MissingCredentialError, NotAuthorizedError
from natter.domain.value import Username

from .base import Service


class IdentityProvider:
    """Generic "who am I" interface of an external identity provider."""

    async def get_username(self, access_token: str) -> Username:
        """Resolve a bearer credential to the username it belongs to.

        Args:
            access_token: Bearer credential issued by the provider

        Returns:
            Verified username

        Raises:
            InvalidCredentialError: If the provider rejects the credential
            ProviderUnavailableError: If the provider cannot be reached or fails
        """
        raise NotImplementedError


def extract_bearer_token(authorization: str | None) -> str:
    """Extract the credential from an Authorization header value.

    Raises:
        MissingCredentialError: If the header is absent or not "Bearer <token>"
    """
    if not authorization:
        raise MissingCredentialError()

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise MissingCredentialError()
    return token


class IdentityVerifier(Service):
    """Verifies moderator credentials against the allow-list.

    An empty allow-list admits any identity the provider verifies.
    """

    def __init__(
        self, identity_provider: IdentityProvider, allowed_users: Iterable[str]
    ) -> None:
        """Initialize identity verifier.

        Args:
            identity_provider: External identity provider client
            allowed_users: Usernames permitted to moderate
        """
        self.identity_provider = identity_provider
        self.allowed_users = frozenset(
            user.strip().lower() for user in allowed_users if user.strip()
        )

    def is_allowed(self, username: Username) -> bool:
        """Check a verified username against the allow-list."""
        if not self.allowed_users:
            return True
        return username.root.lower() in self.allowed_users

    async def verify(self, authorization: str | None) -> Username:
        """Verify an Authorization header and return the moderator username.

        Calls the identity provider exactly once.

        Args:
            authorization: Raw Authorization header value

        Returns:
            Verified, allow-listed username

        Raises:
            MissingCredentialError: If no usable bearer credential was sent
            InvalidCredentialError: If the provider rejects the credential
            ProviderUnavailableError: If the provider cannot be reached
            NotAuthorizedError: If the user is not on a non-empty allow-list
        """
        token = extract_bearer_token(authorization)

        with logfire.span("identity_verifier.verify"):
            username = await self.identity_provider.get_username(token)

            if not self.is_allowed(username):
                logfire.warn("Moderator access denied", username=username.root)
                raise NotAuthorizedError(username.root)

            logfire.info("Moderator access granted", username=username.root)
            return username
