"""Public comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status

from natter.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from natter.config import Settings
from natter.domain.service import CommentSubmission
from natter.interface.error import MissingParameterError

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def client_address(request: Request, header_name: str) -> str:
    """Resolve the address a comment was sent from.

    Prefers the edge proxy header, then the socket peer, then "unknown".
    """
    forwarded = request.headers.get(header_name, "").strip()
    if forwarded:
        return forwarded
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


@router.get(
    "",
    response_model=GetCommentsResponse,
    response_model_exclude_none=True,
)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post: str | None = None,
    threaded: bool = False,
) -> GetCommentsResponse:
    """Get the approved comments of a post, oldest first.

    Args:
        get_comments_use_case: Get comments use case from DI
        post: Post slug
        threaded: Also return reply trees

    Returns:
        Public comment listing
    """
    if post is None or not post.strip():
        raise MissingParameterError("post")

    return await get_comments_use_case.execute(
        GetCommentsRequest(post_slug=post.strip(), threaded=threaded)
    )


@router.post(
    "",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    submission: CommentSubmission,
    request: Request,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
    settings: FromDishka[Settings],
) -> SubmitCommentResponse:
    """Post a comment or a reply.

    Args:
        submission: Comment fields from the request body
        request: Incoming request (for the client address)
        submit_comment_use_case: Submit comment use case from DI
        settings: Application settings

    Returns:
        Created comment ID and approval state
    """
    return await submit_comment_use_case.execute(
        SubmitCommentRequest(
            submission=submission,
            client_address=client_address(request, settings.api.client_ip_header),
        )
    )
