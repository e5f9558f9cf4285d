"""List posts use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService, PostService
from board.domain.value import AuthorName


class PostListItem(BaseModel):
    """Post list item in response."""

    post_id: str
    title: str
    author: str
    has_image: bool
    comment_count: int
    created_at: datetime


class ListPostsRequest(BaseModel):
    """List posts request.

    ``title`` takes precedence over ``author`` when both are given.
    """

    title: str | None = None  # Case-insensitive title substring
    author: str | None = None  # Exact author string


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for the post list, newest first."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Optional title or author filter

        Returns:
            Matching posts with their comment counts
        """
        if request.title:
            posts = await self.post_service.search_by_title(request.title)
        elif request.author:
            posts = await self.post_service.find_by_author(AuthorName(request.author))
        else:
            posts = await self.post_service.list_posts()

        items = []
        for post in posts:
            items.append(
                PostListItem(
                    post_id=str(post.id),
                    title=post.title,
                    author=post.author.root,
                    has_image=post.image_path is not None,
                    comment_count=await self.comment_service.count_for_post(post.id),
                    created_at=post.created_at,
                )
            )

        logfire.info(
            "Posts listed",
            count=len(items),
            title=request.title,
            author=request.author,
        )
        return ListPostsResponse(posts=items)
