"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from natter.domain.model.comment import Comment, NewComment
from natter.domain.value import CommentId, IpHash


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer. Every method is a single
    statement against the store; no method relies on state kept between calls.
    """

    @abstractmethod
    async def exists_in_post(self, comment_id: CommentId, post_slug: str) -> bool:
        """Check that a comment exists and belongs to the given post.

        Args:
            comment_id: Candidate parent comment ID
            post_slug: Slug of the post the reply is for

        Returns:
            True if a comment with that ID and slug exists
        """
        pass

    @abstractmethod
    async def create(self, comment: NewComment) -> Comment:
        """Insert a new comment.

        The store assigns the ID and sets created_at to the current time.

        Args:
            comment: Sanitised comment data

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def find_approved_by_post(self, post_slug: str) -> List[Comment]:
        """Find approved comments for a post, oldest first.

        Args:
            post_slug: The post slug

        Returns:
            Approved comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int) -> List[Comment]:
        """Find the most recent comments regardless of approval.

        Args:
            limit: Maximum number of comments to return

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def set_approved(self, comment_id: CommentId, approved: bool) -> bool:
        """Set the approval flag of one comment.

        Args:
            comment_id: The comment ID
            approved: New approval state

        Returns:
            True if a row was updated, False if no comment has that ID
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete, replies are left in place).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was deleted, False if no comment has that ID
        """
        pass

    @abstractmethod
    async def count_by_ip_hash_since(self, ip_hash: IpHash, since: datetime) -> int:
        """Count comments from one source created at or after a moment.

        Args:
            ip_hash: Anonymised source token
            since: Start of the window (inclusive)

        Returns:
            Number of matching comments
        """
        pass
