"""Strongly typed identifiers for Natter domain entities."""

import re
from typing import NewType

from natter.domain.error import InvalidCommentIdError

# Auto-incrementing integer primary key assigned by the store
CommentId = NewType("CommentId", int)

# Largest value of the 32-bit INTEGER id column
MAX_COMMENT_ID = 2**31 - 1

_POSITIVE_INT = re.compile(r"^[0-9]+$")


def is_storable_comment_id(comment_id: int) -> bool:
    """Whether the id column could hold this value at all."""
    return 1 <= comment_id <= MAX_COMMENT_ID


def parse_comment_id(raw: str | None) -> CommentId:
    """Parse a comment ID taken from a URL path segment.

    Only plain positive decimal integers are accepted. Values beyond the id
    column range are still valid IDs; they just never match a comment.

    Raises:
        InvalidCommentIdError: If the value is not a positive integer
    """
    if raw is None or not _POSITIVE_INT.match(raw.strip()):
        raise InvalidCommentIdError(raw)
    value = int(raw.strip())
    if value < 1:
        raise InvalidCommentIdError(raw)
    return CommentId(value)
