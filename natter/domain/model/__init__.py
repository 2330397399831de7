"""Domain model entities for Natter."""

from natter.domain.model.comment import (
    CONTENT_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Comment,
    NewComment,
)

__all__ = [
    "Comment",
    "NewComment",
    "NAME_MAX_LENGTH",
    "CONTENT_MAX_LENGTH",
]
