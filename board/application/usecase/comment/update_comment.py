"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService, UserService
from board.domain.value import CommentId, UserId

from .get_comments import CommentInfo


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentInfo


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing a comment's content."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.user_id)))

        comment = await self.comment_service.update_comment(
            CommentId(UUID(request.comment_id)), request.content, actor
        )

        return UpdateCommentResponse(comment=CommentInfo.from_comment(comment))
