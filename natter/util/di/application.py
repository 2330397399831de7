"""Application layer DI providers."""

from dishka import Scope, provide

from natter.application.usecase.comment import GetCommentsUseCase, SubmitCommentUseCase
from natter.application.usecase.moderation import (
    ApproveCommentUseCase,
    DeleteCommentUseCase,
    GetModeratorUseCase,
    HideCommentUseCase,
    ListModerationCommentsUseCase,
)
from natter.config import Settings
from natter.domain.service import CommentService, IdentityVerifier, RateLimiter
from natter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Public comment use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, comment_service: CommentService, rate_limiter: RateLimiter
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            comment_service=comment_service, rate_limiter=rate_limiter
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_list_moderation_comments_use_case(
        self,
        identity_verifier: IdentityVerifier,
        comment_service: CommentService,
        settings: Settings,
    ) -> ListModerationCommentsUseCase:
        """Provide moderation listing use case."""
        return ListModerationCommentsUseCase(
            identity_verifier=identity_verifier,
            comment_service=comment_service,
            max_limit=settings.moderation.admin_list_limit,
        )

    @provide(scope=Scope.REQUEST)
    def get_approve_comment_use_case(
        self, identity_verifier: IdentityVerifier, comment_service: CommentService
    ) -> ApproveCommentUseCase:
        """Provide approve comment use case."""
        return ApproveCommentUseCase(
            identity_verifier=identity_verifier, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_hide_comment_use_case(
        self, identity_verifier: IdentityVerifier, comment_service: CommentService
    ) -> HideCommentUseCase:
        """Provide hide comment use case."""
        return HideCommentUseCase(
            identity_verifier=identity_verifier, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, identity_verifier: IdentityVerifier, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            identity_verifier=identity_verifier, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_moderator_use_case(
        self, identity_verifier: IdentityVerifier
    ) -> GetModeratorUseCase:
        """Provide current moderator use case."""
        return GetModeratorUseCase(identity_verifier=identity_verifier)
