"""Get comments use case."""

import logfire
from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.error import StoreUnavailableError
from natter.domain.service import CommentService, build_threads

from .items import CommentThreadItem, PublicCommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_slug: str
    threaded: bool = False


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[PublicCommentItem]
    threads: list[CommentThreadItem] | None = None
    message: str | None = None


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the public comments of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments come back oldest first; with threaded=True the reply trees
        are included as well. An unprovisioned store yields an empty listing
        with an explanatory message rather than an error, so article pages
        keep rendering.

        Args:
            request: Get comments request

        Returns:
            Approved comments of the post
        """
        try:
            comments = await self.comment_service.list_approved(request.post_slug)
        except StoreUnavailableError as e:
            logfire.warn(
                "Comment store unavailable for public read",
                post_slug=request.post_slug,
                error=str(e),
            )
            return GetCommentsResponse(
                comments=[],
                threads=[] if request.threaded else None,
                message=(
                    "Comments are temporarily unavailable. "
                    "They will appear once the database is reachable."
                ),
            )

        threads = None
        if request.threaded:
            threads = [CommentThreadItem.from_domain(n) for n in build_threads(comments)]

        return GetCommentsResponse(
            comments=[PublicCommentItem.from_domain(c) for c in comments],
            threads=threads,
        )
