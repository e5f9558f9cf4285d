"""Get post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.comment.get_comments import CommentThreadInfo
from board.domain.model import Post
from board.domain.service import CommentService, PostService, UserService
from board.domain.value import PostId, UserId


class PostInfo(BaseModel):
    """Post in responses."""

    post_id: str
    title: str
    content: str
    author: str
    image_path: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostInfo":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author=post.author.root,
            image_path=post.image_path,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostInfo
    threads: list[CommentThreadInfo]
    comment_count: int
    can_edit: bool  # Viewer is the author


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for the post detail view: the post and its comment threads."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request with post ID and optional viewer ID

        Returns:
            Post details with fully loaded threads

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post(post_id)

        threads = await self.comment_service.get_threads(post_id)
        comment_count = await self.comment_service.count_for_post(post_id)

        can_edit = False
        if request.viewer_id:
            actor = await self.user_service.get_actor(UserId(UUID(request.viewer_id)))
            can_edit = actor.can_modify(post.author)

        return GetPostResponse(
            post=PostInfo.from_post(post),
            threads=[CommentThreadInfo.from_thread(thread) for thread in threads],
            comment_count=comment_count,
            can_edit=can_edit,
        )
