"""Domain layer DI providers."""

from dishka import Scope, provide

from natter.config import AdminSettings, Settings
from natter.domain.repository import CommentRepository
from natter.domain.service import (
    CommentService,
    IdentityProvider,
    IdentityVerifier,
    RateLimiter,
)
from natter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped and stateless; all shared state lives in the
    store.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: Settings
    ) -> CommentService:
        """Provide comment domain service with the configured approval policy."""
        return CommentService(
            comment_repository=comment_repository,
            auto_approve=settings.moderation.auto_approve,
        )

    @provide
    def get_rate_limiter(
        self, comment_repository: CommentRepository, settings: Settings
    ) -> RateLimiter:
        """Provide per-source rate limiter."""
        return RateLimiter(
            comment_repository=comment_repository,
            max_comments=settings.rate_limit.max_comments,
            window_seconds=settings.rate_limit.window_seconds,
        )

    @provide
    def get_identity_verifier(
        self, identity_provider: IdentityProvider, admin_settings: AdminSettings
    ) -> IdentityVerifier:
        """Provide moderator identity verifier.

        The allow-list is passed in explicitly from configuration.
        """
        return IdentityVerifier(
            identity_provider=identity_provider,
            allowed_users=admin_settings.allowed_users,
        )
