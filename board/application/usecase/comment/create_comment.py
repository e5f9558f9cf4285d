"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService, UserService
from board.domain.value import CommentId, PostId, UserId

from .get_comments import CommentInfo


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    user_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentInfo


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a post or replying to a top-level comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the caller's current display name
        2. Create a top-level comment, or a reply when parent_id is set

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or the parent comment doesn't exist
            ValidationError: If the parent is on another post or is a reply
        """
        post_id = PostId(UUID(request.post_id))
        actor = await self.user_service.get_actor(UserId(UUID(request.user_id)))

        if request.parent_id:
            comment = await self.comment_service.create_reply(
                post_id=post_id,
                parent_id=CommentId(UUID(request.parent_id)),
                content=request.content,
                author=actor.author,
            )
        else:
            comment = await self.comment_service.create_top_level_comment(
                post_id=post_id,
                content=request.content,
                author=actor.author,
            )

        return CreateCommentResponse(comment=CommentInfo.from_comment(comment))
