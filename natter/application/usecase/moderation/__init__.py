"""Moderation use cases."""

from .base import ModerationRequest, ModerationResultResponse
from .get_moderator import GetModeratorResponse, GetModeratorUseCase
from .list_comments import (
    ListModerationCommentsRequest,
    ListModerationCommentsResponse,
    ListModerationCommentsUseCase,
)
from .moderate_comment import (
    ApproveCommentUseCase,
    DeleteCommentUseCase,
    HideCommentUseCase,
    ModerateCommentRequest,
)

__all__ = [
    "ApproveCommentUseCase",
    "DeleteCommentUseCase",
    "GetModeratorResponse",
    "GetModeratorUseCase",
    "HideCommentUseCase",
    "ListModerationCommentsRequest",
    "ListModerationCommentsResponse",
    "ListModerationCommentsUseCase",
    "ModerateCommentRequest",
    "ModerationRequest",
    "ModerationResultResponse",
]
