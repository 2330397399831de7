"""Comment use cases."""

from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .items import CommentThreadItem, ModerationCommentItem, PublicCommentItem
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

__all__ = [
    "CommentThreadItem",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ModerationCommentItem",
    "PublicCommentItem",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
]
