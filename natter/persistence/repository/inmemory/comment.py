"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from itertools import count
from typing import Optional

from natter.domain.model.comment import Comment, NewComment
from natter.domain.repository.comment import CommentRepository
from natter.domain.value import CommentId, IpHash


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def save(self, comment: Comment) -> Comment:
        """Store a fully built comment as-is (test seeding helper)."""
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Look up a stored comment (test inspection helper)."""
        return self._comments.get(comment_id)

    async def exists_in_post(self, comment_id: CommentId, post_slug: str) -> bool:
        """Check that a comment exists on the given post."""
        comment = self._comments.get(comment_id)
        return comment is not None and comment.post_slug == post_slug

    async def create(self, comment: NewComment) -> Comment:
        """Insert a comment with the next free ID."""
        comment_id = CommentId(next(self._ids))
        while comment_id in self._comments:
            comment_id = CommentId(next(self._ids))

        stored = Comment(
            id=comment_id,
            post_slug=comment.post_slug,
            parent_id=comment.parent_id,
            name=comment.name,
            email=comment.email,
            content=comment.content,
            created_at=datetime.now(timezone.utc),
            approved=comment.approved,
            ip_hash=comment.ip_hash,
        )
        self._comments[comment_id] = stored
        return stored

    async def find_approved_by_post(self, post_slug: str) -> list[Comment]:
        """Find approved comments for a post, oldest first."""
        comments = [
            c for c in self._comments.values() if c.post_slug == post_slug and c.approved
        ]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def find_recent(self, limit: int) -> list[Comment]:
        """Find the most recent comments regardless of approval."""
        comments = sorted(
            self._comments.values(), key=lambda c: (c.created_at, c.id), reverse=True
        )
        return comments[:limit]

    async def set_approved(self, comment_id: CommentId, approved: bool) -> bool:
        """Set the approval flag of one comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return False
        # Comments are immutable, store an updated copy
        self._comments[comment_id] = comment.model_copy(update={"approved": approved})
        return True

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def count_by_ip_hash_since(self, ip_hash: IpHash, since: datetime) -> int:
        """Count comments from one source created at or after since."""
        return sum(
            1
            for c in self._comments.values()
            if c.ip_hash == ip_hash and c.created_at >= since
        )
