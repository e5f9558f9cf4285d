"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import (
    CommentService,
    ImageService,
    PostService,
    UserService,
)
from board.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    removed_comments: int


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for deleting a post with its comments and image."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        image_service: ImageService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
            image_service: Image storage domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service
        self.image_service = image_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Count the comments that go away with the post
        2. Delete the post (checks ownership)
        3. Delete the post's comments
        4. Remove the image file, best effort

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        post_id = PostId(UUID(request.post_id))
        actor = await self.user_service.get_actor(UserId(UUID(request.user_id)))

        comment_count = await self.comment_service.count_for_post(post_id)
        post = await self.post_service.delete_post(post_id, actor)

        # No-op on PostgreSQL where ON DELETE CASCADE already ran
        await self.comment_service.delete_for_post(post_id)

        await self.image_service.delete_image(post.image_path)

        return DeletePostResponse(post_id=str(post.id), removed_comments=comment_count)
