"""Row mapping for the comments table.

The store is used through SQLAlchemy Core only, so rows are turned into
frozen Comment models here. SQLite hands timestamps back without an offset;
they are always written in UTC, so UTC is attached on the way out.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from natter.domain.model import Comment, NewComment
from natter.domain.value import CommentId, IpHash


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_slug=row["post_slug"],
        parent_id=CommentId(row["parent_id"]) if row["parent_id"] is not None else None,
        name=row["name"],
        email=row.get("email"),
        content=row["content"],
        created_at=_as_utc(row["created_at"]),
        approved=bool(row["approved"]),
        ip_hash=IpHash(row["ip_hash"]),
    )


def new_comment_to_dict(comment: NewComment, created_at: datetime) -> Dict[str, Any]:
    """Convert NewComment domain model to database insert values.

    Args:
        comment: New comment
        created_at: Insert timestamp chosen by the store

    Returns:
        Dict suitable for database insertion
    """
    return {
        "post_slug": comment.post_slug,
        "parent_id": comment.parent_id,
        "name": comment.name,
        "email": comment.email,
        "content": comment.content,
        "created_at": created_at,
        "approved": comment.approved,
        "ip_hash": comment.ip_hash.root,
    }
