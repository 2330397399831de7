"""List comments for moderation use case."""

from pydantic import BaseModel, Field

from natter.application.usecase.comment.items import ModerationCommentItem
from natter.domain.service import CommentService, IdentityVerifier

from .base import ModerationRequest, ModerationUseCase


class ListModerationCommentsRequest(ModerationRequest):
    """List moderation comments request."""

    limit: int = Field(default=500, ge=1)


class ListModerationCommentsResponse(BaseModel):
    """List moderation comments response."""

    success: bool = True
    comments: list[ModerationCommentItem]


class ListModerationCommentsUseCase(ModerationUseCase):
    """Use case for moderators listing recent comments in every state."""

    def __init__(
        self,
        identity_verifier: IdentityVerifier,
        comment_service: CommentService,
        max_limit: int = 500,
    ) -> None:
        """Initialize list moderation comments use case.

        Args:
            identity_verifier: Moderator identity verifier
            comment_service: Comment domain service
            max_limit: Configured upper bound for the listing
        """
        super().__init__(identity_verifier)
        self.comment_service = comment_service
        self.max_limit = max_limit

    async def execute(
        self, request: ListModerationCommentsRequest
    ) -> ListModerationCommentsResponse:
        """Execute moderation listing flow.

        Raises:
            AuthError: If the caller is not a verified, allowed moderator
            StoreUnavailableError: If the store is not available
        """
        await self.authorize(request)

        comments = await self.comment_service.list_all(
            min(request.limit, self.max_limit)
        )
        return ListModerationCommentsResponse(
            comments=[ModerationCommentItem.from_domain(c) for c in comments],
        )
