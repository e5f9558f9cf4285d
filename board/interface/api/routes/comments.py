"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request carrying comment text."""

    content: str = Field(min_length=1, max_length=500)


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the comment threads of a post, oldest first."""
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=str(post_id)))


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a top-level comment on a post.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id), content=request.content, user_id=user_id
        )
    )


@router.post(
    "/posts/{post_id}/comments/{parent_id}/reply",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    post_id: UUID,
    parent_id: UUID,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Reply to a top-level comment.

    Requires authentication.

    Raises:
        HTTPException: 400 if the parent is a reply or on another post,
            404 if the post or parent doesn't exist
    """
    user_id = require_user_id(jwt_service, auth_token, "reply to comments")

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            content=request.content,
            user_id=user_id,
            parent_id=str(parent_id),
        )
    )


@router.put("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Requires authentication and authorship.
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")

    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=str(comment_id), user_id=user_id, content=request.content
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and its replies.

    Requires authentication and authorship.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")

    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
    )
