"""Get my profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService, PostService, UserService
from board.domain.value import UserId


class GetMyProfileRequest(BaseModel):
    """Get my profile request."""

    user_id: str  # Authenticated user ID


class ProfilePostItem(BaseModel):
    """Post written under the user's current name."""

    post_id: str
    title: str
    created_at: datetime


class ProfileCommentItem(BaseModel):
    """Comment written under the user's current name."""

    comment_id: str
    post_id: str
    content: str
    created_at: datetime


class GetMyProfileResponse(BaseModel):
    """Get my profile response."""

    user_id: str
    username: str
    name: str
    created_at: datetime
    posts: list[ProfilePostItem]
    comments: list[ProfileCommentItem]


class GetMyProfileUseCase(BaseUseCase[GetMyProfileRequest, GetMyProfileResponse]):
    """Use case for the signed-in user's own page.

    Content is matched on the author string, so posts written under an
    earlier display name are not listed.
    """

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        self.user_service = user_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetMyProfileRequest) -> GetMyProfileResponse:
        """Load the user and their content, newest first.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        actor = await self.user_service.get_actor(user.id)

        posts = await self.post_service.find_by_author(actor.author)
        comments = await self.comment_service.find_by_author(actor.author)

        return GetMyProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name.root,
            created_at=user.created_at,
            posts=[
                ProfilePostItem(
                    post_id=str(post.id), title=post.title, created_at=post.created_at
                )
                for post in posts
            ],
            comments=[
                ProfileCommentItem(
                    comment_id=str(comment.id),
                    post_id=str(comment.post_id),
                    content=comment.content,
                    created_at=comment.created_at,
                )
                for comment in comments
            ],
        )
