"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.model import Comment, CommentThread
from board.domain.service import CommentService, PostService
from board.domain.value import PostId


class CommentInfo(BaseModel):
    """Comment in responses."""

    comment_id: str
    post_id: str
    parent_id: str | None
    author: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentInfo":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author=comment.author.root,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentThreadInfo(BaseModel):
    """Top-level comment with its replies."""

    comment: CommentInfo
    replies: list[CommentInfo]

    @classmethod
    def from_thread(cls, thread: CommentThread) -> "CommentThreadInfo":
        return cls(
            comment=CommentInfo.from_comment(thread.comment),
            replies=[CommentInfo.from_comment(reply) for reply in thread.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    threads: list[CommentThreadInfo]
    total: int  # Top-level comments and replies


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for loading the comment threads of a post."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(UUID(request.post_id))

        # Raises NotFoundError for unknown posts
        await self.post_service.get_post(post_id)

        threads = await self.comment_service.get_threads(post_id)

        return GetCommentsResponse(
            post_id=str(post_id),
            threads=[CommentThreadInfo.from_thread(thread) for thread in threads],
            total=sum(thread.size for thread in threads),
        )
