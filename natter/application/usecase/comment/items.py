"""Comment response items shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from natter.domain.model import Comment
from natter.domain.service import CommentThread


class PublicCommentItem(BaseModel):
    """Comment as shown to readers.

    Email, source hash and approval flag are never included.
    """

    id: int
    post_slug: str
    parent_id: int | None
    name: str
    content: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "PublicCommentItem":
        return cls(
            id=comment.id,
            post_slug=comment.post_slug,
            parent_id=comment.parent_id,
            name=comment.name,
            content=comment.content,
            created_at=comment.created_at,
        )


class CommentThreadItem(BaseModel):
    """Reply tree node for API response.

    Recursive structure mirroring the domain model.
    """

    comment: PublicCommentItem
    orphaned: bool
    replies: list["CommentThreadItem"]

    @classmethod
    def from_domain(cls, node: CommentThread) -> "CommentThreadItem":
        """Convert domain CommentThread to response model.

        Args:
            node: Domain thread node

        Returns:
            API response model with replies recursively converted
        """
        return cls(
            comment=PublicCommentItem.from_domain(node.comment),
            orphaned=node.orphaned,
            replies=[cls.from_domain(reply) for reply in node.replies],
        )


class ModerationCommentItem(BaseModel):
    """Comment as shown to moderators, with every stored column."""

    id: int
    post_slug: str
    parent_id: int | None
    name: str
    email: str | None
    content: str
    created_at: datetime
    approved: bool
    ip_hash: str

    @classmethod
    def from_domain(cls, comment: Comment) -> "ModerationCommentItem":
        return cls(
            id=comment.id,
            post_slug=comment.post_slug,
            parent_id=comment.parent_id,
            name=comment.name,
            email=comment.email,
            content=comment.content,
            created_at=comment.created_at,
            approved=comment.approved,
            ip_hash=comment.ip_hash.root,
        )
