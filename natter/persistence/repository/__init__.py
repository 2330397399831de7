"""SQL repository implementations."""

from natter.persistence.repository.comment import SqlCommentRepository

__all__ = [
    "SqlCommentRepository",
]
