"""Moderation routes.

Every route requires ``Authorization: Bearer <token>`` from an allowed
moderator.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from natter.application.usecase.moderation import (
    ApproveCommentUseCase,
    DeleteCommentUseCase,
    GetModeratorResponse,
    GetModeratorUseCase,
    HideCommentUseCase,
    ListModerationCommentsRequest,
    ListModerationCommentsResponse,
    ListModerationCommentsUseCase,
    ModerateCommentRequest,
    ModerationRequest,
    ModerationResultResponse,
)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/comments", response_model=ListModerationCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListModerationCommentsUseCase],
    limit: int = 500,
    authorization: str | None = Header(default=None),
) -> ListModerationCommentsResponse:
    """List recent comments in every approval state, newest first."""
    return await list_comments_use_case.execute(
        ListModerationCommentsRequest(authorization=authorization, limit=max(limit, 1))
    )


# comment_id stays a raw string so credentials are checked before the ID.
@router.post("/comments/{comment_id}/approve", response_model=ModerationResultResponse)
async def approve_comment(
    comment_id: str,
    approve_comment_use_case: FromDishka[ApproveCommentUseCase],
    authorization: str | None = Header(default=None),
) -> ModerationResultResponse:
    """Make a comment public."""
    return await approve_comment_use_case.execute(
        ModerateCommentRequest(authorization=authorization, comment_id=comment_id)
    )


@router.post("/comments/{comment_id}/hide", response_model=ModerationResultResponse)
async def hide_comment(
    comment_id: str,
    hide_comment_use_case: FromDishka[HideCommentUseCase],
    authorization: str | None = Header(default=None),
) -> ModerationResultResponse:
    """Withdraw a comment from the public listing."""
    return await hide_comment_use_case.execute(
        ModerateCommentRequest(authorization=authorization, comment_id=comment_id)
    )


@router.delete("/comments/{comment_id}", response_model=ModerationResultResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authorization: str | None = Header(default=None),
) -> ModerationResultResponse:
    """Permanently delete a comment. Replies are kept."""
    return await delete_comment_use_case.execute(
        ModerateCommentRequest(authorization=authorization, comment_id=comment_id)
    )


@router.get("/me", response_model=GetModeratorResponse)
async def get_moderator(
    get_moderator_use_case: FromDishka[GetModeratorUseCase],
    authorization: str | None = Header(default=None),
) -> GetModeratorResponse:
    """Report which moderator the credential belongs to."""
    return await get_moderator_use_case.execute(
        ModerationRequest(authorization=authorization)
    )
