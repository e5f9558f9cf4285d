"""Post domain service."""

import logfire
from datetime import datetime
from typing import Optional
from uuid import uuid4

from board.domain.error import NotFoundError
from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.value import Actor, AuthorName, PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        title: str,
        content: str,
        author: AuthorName,
        image_path: Optional[str] = None,
    ) -> Post:
        """Create a post.

        Args:
            title: Post title
            content: Post body
            author: Author string to stamp on the post
            image_path: Public path of an already stored image, if any

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            title=title,
            author=author.root,
            has_image=image_path is not None,
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author=author,
                image_path=image_path,
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author=author.root)
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post found", post_id=str(post_id), title=post.title)
            return post

    async def update_post(
        self,
        post_id: PostId,
        title: str,
        content: str,
        image_path: Optional[str],
        actor: Actor,
    ) -> Post:
        """Replace title, content and image path of a post in one write.

        Args:
            post_id: Post ID
            title: New title
            content: New body
            image_path: New image path, None clears it
            actor: Caller, must be the post's author

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            title=title,
            has_image=image_path is not None,
        ):
            post = await self.get_post(post_id)
            self._require_author(actor, post.author, "post", str(post_id))

            updated_post = post.revised(
                title=title, content=content, image_path=image_path
            )

            saved = await self.post_repository.save(updated_post)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, actor: Actor) -> Post:
        """Delete a post.

        Removing the stored image file is left to the caller.

        Args:
            post_id: Post ID
            actor: Caller, must be the post's author

        Returns:
            The deleted post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            post = await self.get_post(post_id)
            self._require_author(actor, post.author, "post", str(post_id))

            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                had_image=post.image_path is not None,
            )
            return post

    async def list_posts(self) -> list[Post]:
        """List every post, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def search_by_title(self, query: str) -> list[Post]:
        """Find posts whose title contains ``query``, ignoring case.

        Args:
            query: Substring to look for

        Returns:
            Matching posts, newest first
        """
        with logfire.span("post_service.search_by_title", query=query):
            posts = await self.post_repository.search_by_title(query)
            logfire.info("Posts searched by title", query=query, count=len(posts))
            return posts

    async def find_by_author(self, author: AuthorName) -> list[Post]:
        """List posts written under an author string, newest first."""
        with logfire.span("post_service.find_by_author", author=author.root):
            posts = await self.post_repository.find_by_author(author)
            logfire.info("Posts retrieved for author", author=author.root, count=len(posts))
            return posts
