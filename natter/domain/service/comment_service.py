"""Comment domain service."""

from dataclasses import dataclass, field

import logfire

from natter.domain.error import NotFoundError, ParentNotFoundError
from natter.domain.model.comment import Comment, NewComment
from natter.domain.repository import CommentRepository
from natter.domain.service.sanitizer import SanitizedComment
from natter.domain.value import CommentId, IpHash

from .base import Service

MAX_LIST_LIMIT = 500


@dataclass
class CommentThread:
    """Node in a reply tree.

    orphaned is set on a reply whose parent is not part of the listing
    (deleted or hidden); it is promoted to the top level.
    """

    comment: Comment
    replies: list["CommentThread"] = field(default_factory=list)
    orphaned: bool = False


def build_threads(comments: list[Comment]) -> list[CommentThread]:
    """Build reply trees from a flat comment list.

    Parent references are resolved against the given list only. Input order
    is preserved at every level, so an oldest-first listing gives
    oldest-first threads.

    Args:
        comments: Flat list of comments

    Returns:
        Top-level threads (root comments and orphans)
    """
    nodes = {comment.id: CommentThread(comment=comment) for comment in comments}
    roots: list[CommentThread] = []

    for comment in comments:
        node = nodes[comment.id]
        parent_id = comment.parent_id
        if parent_id is None:
            roots.append(node)
        elif parent_id in nodes and parent_id != comment.id:
            nodes[parent_id].replies.append(node)
        else:
            node.orphaned = True
            roots.append(node)

    return roots


class CommentService(Service):
    """Domain service for comment storage and moderation."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        auto_approve: bool = True,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            auto_approve: Whether new comments are public immediately
        """
        self.comment_repository = comment_repository
        self.auto_approve = auto_approve

    async def create_comment(
        self, sanitized: SanitizedComment, ip_hash: IpHash
    ) -> Comment:
        """Store a new comment or reply.

        Args:
            sanitized: Validated and escaped submission
            ip_hash: Anonymised source token

        Returns:
            Stored comment with its assigned ID

        Raises:
            ParentNotFoundError: If parent_id is given and no comment with that
                ID exists on the same post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_slug=sanitized.post_slug,
            parent_id=sanitized.parent_id,
        ):
            if sanitized.parent_id is not None:
                parent_exists = await self.comment_repository.exists_in_post(
                    sanitized.parent_id, sanitized.post_slug
                )
                if not parent_exists:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=sanitized.parent_id,
                        post_slug=sanitized.post_slug,
                    )
                    raise ParentNotFoundError(
                        sanitized.parent_id, sanitized.post_slug
                    )

            saved = await self.comment_repository.create(
                NewComment(
                    post_slug=sanitized.post_slug,
                    parent_id=sanitized.parent_id,
                    name=sanitized.name,
                    email=sanitized.email,
                    content=sanitized.content,
                    ip_hash=ip_hash,
                    approved=self.auto_approve,
                )
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_slug=saved.post_slug,
                approved=saved.approved,
            )
            return saved

    async def list_approved(self, post_slug: str) -> list[Comment]:
        """Get the public comments of a post, oldest first.

        Args:
            post_slug: Post slug

        Returns:
            Approved comments ordered by created_at ascending
        """
        with logfire.span("comment_service.list_approved", post_slug=post_slug):
            comments = await self.comment_repository.find_approved_by_post(post_slug)
            logfire.info(
                "Comments retrieved for post", post_slug=post_slug, count=len(comments)
            )
            return comments

    async def list_all(self, limit: int = MAX_LIST_LIMIT) -> list[Comment]:
        """Get the most recent comments for moderation, newest first.

        Args:
            limit: Requested maximum, clamped to 1..500

        Returns:
            Comments in any approval state ordered by created_at descending
        """
        limit = max(1, min(limit, MAX_LIST_LIMIT))
        with logfire.span("comment_service.list_all", limit=limit):
            return await self.comment_repository.find_recent(limit)

    async def approve(self, comment_id: CommentId) -> None:
        """Make a comment public.

        Raises:
            NotFoundError: If no comment has that ID
        """
        await self._set_approved(comment_id, True)

    async def hide(self, comment_id: CommentId) -> None:
        """Withdraw a comment from the public listing.

        Raises:
            NotFoundError: If no comment has that ID
        """
        await self._set_approved(comment_id, False)

    async def delete(self, comment_id: CommentId) -> None:
        """Permanently delete a comment. Replies are kept as orphans.

        Raises:
            NotFoundError: If no comment has that ID
        """
        with logfire.span("comment_service.delete", comment_id=comment_id):
            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                logfire.warn("Comment not found for delete", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=comment_id)

    async def _set_approved(self, comment_id: CommentId, approved: bool) -> None:
        with logfire.span(
            "comment_service.set_approved", comment_id=comment_id, approved=approved
        ):
            updated = await self.comment_repository.set_approved(comment_id, approved)
            if not updated:
                logfire.warn(
                    "Comment not found for moderation", comment_id=comment_id
                )
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment approval changed", comment_id=comment_id, approved=approved
            )
