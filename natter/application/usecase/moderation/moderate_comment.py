"""Approve, hide and delete comment use cases."""

import logfire

from natter.domain.service import CommentService, IdentityVerifier
from natter.domain.value import parse_comment_id

from .base import ModerationRequest, ModerationResultResponse, ModerationUseCase


class ModerateCommentRequest(ModerationRequest):
    """Moderation request targeting one comment.

    comment_id is the raw path segment; it is validated after the caller
    has been authenticated.
    """

    comment_id: str


class _SingleCommentUseCase(ModerationUseCase):
    def __init__(
        self, identity_verifier: IdentityVerifier, comment_service: CommentService
    ) -> None:
        super().__init__(identity_verifier)
        self.comment_service = comment_service


class ApproveCommentUseCase(_SingleCommentUseCase):
    """Use case for making a comment public."""

    async def execute(self, request: ModerateCommentRequest) -> ModerationResultResponse:
        """Execute approve flow.

        Raises:
            AuthError: If the caller is not an allowed moderator
            InvalidCommentIdError: If the ID is not a positive integer
            NotFoundError: If no comment has that ID
        """
        moderator = await self.authorize(request)
        comment_id = parse_comment_id(request.comment_id)

        await self.comment_service.approve(comment_id)
        logfire.info(
            "Comment approved by moderator",
            comment_id=comment_id,
            moderator=moderator.root,
        )
        return ModerationResultResponse(message="Comment approved successfully")


class HideCommentUseCase(_SingleCommentUseCase):
    """Use case for withdrawing a comment from public view."""

    async def execute(self, request: ModerateCommentRequest) -> ModerationResultResponse:
        """Execute hide flow.

        Raises:
            AuthError: If the caller is not an allowed moderator
            InvalidCommentIdError: If the ID is not a positive integer
            NotFoundError: If no comment has that ID
        """
        moderator = await self.authorize(request)
        comment_id = parse_comment_id(request.comment_id)

        await self.comment_service.hide(comment_id)
        logfire.info(
            "Comment hidden by moderator",
            comment_id=comment_id,
            moderator=moderator.root,
        )
        return ModerationResultResponse(message="Comment hidden successfully")


class DeleteCommentUseCase(_SingleCommentUseCase):
    """Use case for permanently deleting a comment."""

    async def execute(self, request: ModerateCommentRequest) -> ModerationResultResponse:
        """Execute delete flow.

        Raises:
            AuthError: If the caller is not an allowed moderator
            InvalidCommentIdError: If the ID is not a positive integer
            NotFoundError: If no comment has that ID
        """
        moderator = await self.authorize(request)
        comment_id = parse_comment_id(request.comment_id)

        await self.comment_service.delete(comment_id)
        logfire.info(
            "Comment deleted by moderator",
            comment_id=comment_id,
            moderator=moderator.root,
        )
        return ModerationResultResponse(message="Comment deleted successfully")
