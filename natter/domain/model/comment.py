"""Comment entity.

Comments belong to an article identified only by its slug. Replies point at
their parent through parent_id; the tree is rebuilt at read time, so a reply
whose parent was deleted simply becomes an orphan.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from natter.domain.model.common import DomainModel
from natter.domain.value import CommentId, IpHash

NAME_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 5000


class NewComment(DomainModel):
    """A sanitised comment ready to be stored.

    All user-controlled strings are already HTML-escaped.
    """

    post_slug: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    name: str = Field(min_length=1)
    email: Optional[str] = None
    content: str = Field(min_length=1)
    ip_hash: IpHash
    approved: bool = True


class Comment(DomainModel):
    """Stored comment.

    id and created_at are assigned by the store. approved flips only through
    moderator actions.
    """

    id: CommentId
    post_slug: str
    parent_id: Optional[CommentId] = None
    name: str
    email: Optional[str] = None
    content: str
    created_at: datetime
    approved: bool = True
    ip_hash: IpHash
