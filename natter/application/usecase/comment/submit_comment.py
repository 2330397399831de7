"""Submit comment use case."""

from pydantic import BaseModel, ConfigDict, Field

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import (
    CommentService,
    CommentSubmission,
    RateLimiter,
    hash_ip,
    sanitize_submission,
)


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    submission: CommentSubmission
    client_address: str = "unknown"


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    comment_id: int = Field(alias="commentId")
    approved: bool


class SubmitCommentUseCase(BaseUseCase):
    """Use case for a reader posting a comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        rate_limiter: RateLimiter,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            rate_limiter: Per-source rate limiter
        """
        self.comment_service = comment_service
        self.rate_limiter = rate_limiter

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Validate and escape the submission
        2. Hash the client address and check the rate limit
        3. Store the comment (service checks the parent)

        Args:
            request: Submit comment request

        Returns:
            Submit comment response with the new comment ID

        Raises:
            ValidationError: If the submission is invalid
            RateLimitedError: If the source posted too often
            ParentNotFoundError: If the reply target is missing
            StoreUnavailableError: If the store is not available
        """
        sanitized = sanitize_submission(request.submission)

        ip_hash = hash_ip(request.client_address)
        await self.rate_limiter.check(ip_hash)

        comment = await self.comment_service.create_comment(sanitized, ip_hash)

        message = (
            "Comment posted successfully"
            if comment.approved
            else "Comment submitted and awaiting moderation"
        )
        return SubmitCommentResponse(
            message=message,
            comment_id=comment.id,
            approved=comment.approved,
        )
