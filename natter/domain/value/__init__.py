"""Domain value objects for Natter."""

from natter.domain.value.identifiers import (
    MAX_COMMENT_ID,
    CommentId,
    is_storable_comment_id,
    parse_comment_id,
)
from natter.domain.value.types import IpHash, Username

__all__ = [
    # Identifiers
    "CommentId",
    "MAX_COMMENT_ID",
    "is_storable_comment_id",
    "parse_comment_id",
    # Types
    "IpHash",
    "Username",
]
