"""SQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import func, select

from natter.domain.model import Comment, NewComment
from natter.domain.repository import CommentRepository
from natter.domain.value import CommentId, IpHash, is_storable_comment_id
from natter.persistence.database import Database
from natter.persistence.mappers import new_comment_to_dict, row_to_comment
from natter.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy Core implementation of CommentRepository.

    Each method opens its own session, so every statement commits on its own.
    IDs outside the column range match nothing and never reach the driver.
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the shared database handle.

        Args:
            database: Database handle
        """
        self.database = database

    async def exists_in_post(self, comment_id: CommentId, post_slug: str) -> bool:
        """Check that a comment exists on the given post."""
        if not is_storable_comment_id(comment_id):
            return False
        stmt = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.post_slug == post_slug)
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            return result.first() is not None

    async def create(self, comment: NewComment) -> Comment:
        """Insert a comment; the store sets id and created_at."""
        values = new_comment_to_dict(comment, created_at=datetime.now(timezone.utc))
        stmt = comments_table.insert().values(**values).returning(comments_table)
        async with self.database.session() as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict())

    async def find_approved_by_post(self, post_slug: str) -> List[Comment]:
        """Find approved comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_slug == post_slug)
            .where(comments_table.c.approved.is_(True))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_recent(self, limit: int) -> List[Comment]:
        """Find the most recent comments regardless of approval."""
        stmt = (
            select(comments_table)
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id.desc())
            .limit(limit)
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def set_approved(self, comment_id: CommentId, approved: bool) -> bool:
        """Set the approval flag of one comment."""
        if not is_storable_comment_id(comment_id):
            return False
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(approved=approved)
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            return result.rowcount > 0

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        if not is_storable_comment_id(comment_id):
            return False
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        async with self.database.session() as session:
            result = await session.execute(stmt)
            return result.rowcount > 0

    async def count_by_ip_hash_since(self, ip_hash: IpHash, since: datetime) -> int:
        """Count comments from one source created at or after since."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.ip_hash == ip_hash.root)
            .where(comments_table.c.created_at >= since)
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            return result.scalar() or 0
