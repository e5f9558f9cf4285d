"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from board.domain.error import NotFoundError, ValidationError
from board.domain.model import Comment, CommentThread, CommentTree
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import Actor, AuthorName, CommentId, PostId

from .base import Service


class CommentService(Service):
    """Domain service for the two-level comment tree of a post."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, used for existence checks
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def _require_post(self, post_id: PostId) -> None:
        if not await self.post_repository.exists(post_id):
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def create_top_level_comment(
        self, post_id: PostId, content: str, author: AuthorName
    ) -> Comment:
        """Attach a new comment directly to a post.

        Args:
            post_id: Post ID
            content: Comment text
            author: Author string to stamp on the comment

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.create_top_level_comment",
            post_id=str(post_id),
            author=author.root,
        ):
            await self._require_post(post_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                content=content,
                author=author,
                parent_id=None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author=author.root,
            )
            return saved

    async def create_reply(
        self,
        post_id: PostId,
        parent_id: CommentId,
        content: str,
        author: AuthorName,
    ) -> Comment:
        """Reply to a top-level comment.

        The reply is appended after the parent's existing replies.

        Args:
            post_id: Post the reply is written on
            parent_id: Top-level comment being answered
            content: Reply text
            author: Author string to stamp on the reply

        Returns:
            Created reply

        Raises:
            NotFoundError: If the post or the parent comment doesn't exist
            ValidationError: If the parent belongs to another post or is
                itself a reply
        """
        with logfire.span(
            "comment_service.create_reply",
            post_id=str(post_id),
            parent_id=str(parent_id),
            author=author.root,
        ):
            await self._require_post(post_id)

            parent = await self.comment_repository.find_by_id(parent_id)
            if not parent:
                logfire.warn(
                    "Parent comment not found",
                    parent_id=str(parent_id),
                    post_id=str(post_id),
                )
                raise NotFoundError("Comment", str(parent_id))

            if parent.post_id != post_id:
                logfire.error(
                    "Parent comment does not belong to post",
                    parent_id=str(parent_id),
                    parent_post_id=str(parent.post_id),
                    target_post_id=str(post_id),
                )
                raise ValidationError("Parent comment does not belong to this post")

            if parent.is_reply:
                logfire.warn(
                    "Reply to a reply rejected",
                    parent_id=str(parent_id),
                    post_id=str(post_id),
                )
                raise ValidationError("Replies cannot be replied to")

            now = datetime.now()
            reply = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                content=content,
                author=author,
                parent_id=parent.id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(reply)
            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                post_id=str(post_id),
                author=author.root,
            )
            return saved

    async def update_comment(
        self, comment_id: CommentId, new_content: str, actor: Actor
    ) -> Comment:
        """Replace the content of a comment.

        The parent and post of the comment are never changed.

        Args:
            comment_id: Comment ID
            new_content: Replacement text
            actor: Caller, must be the comment's author

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            content_length=len(new_content),
        ):
            comment = await self.get_comment(comment_id)

            self._require_author(actor, comment.author, "comment", str(comment_id))

            updated = await self.comment_repository.update_content(
                comment_id, new_content
            )
            if not updated:
                logfire.warn(
                    "Comment disappeared during update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, actor: Actor) -> int:
        """Delete a comment together with all of its replies.

        Args:
            comment_id: Comment ID
            actor: Caller, must be the comment's author

        Returns:
            Number of comments removed, the comment itself included

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            comment = await self.get_comment(comment_id)

            self._require_author(actor, comment.author, "comment", str(comment_id))

            removed = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
                removed=removed,
            )
            return removed

    async def list_top_level(self, post_id: PostId) -> list[Comment]:
        """List the top-level comments of a post, oldest first."""
        with logfire.span("comment_service.list_top_level", post_id=str(post_id)):
            comments = await self.comment_repository.find_top_level(post_id)
            logfire.info(
                "Top-level comments retrieved", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def list_replies(self, parent_id: CommentId) -> list[Comment]:
        """List the replies of a comment, oldest first."""
        with logfire.span("comment_service.list_replies", parent_id=str(parent_id)):
            replies = await self.comment_repository.find_children(parent_id)
            logfire.info(
                "Replies retrieved", parent_id=str(parent_id), count=len(replies)
            )
            return replies

    async def get_threads(self, post_id: PostId) -> list[CommentThread]:
        """Load every thread of a post in one query.

        Args:
            post_id: Post ID

        Returns:
            One thread per top-level comment, oldest first, each with its
            replies oldest first
        """
        with logfire.span("comment_service.get_threads", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            tree = CommentTree.build(post_id, comments)
            threads = tree.threads()
            logfire.info(
                "Comment threads loaded",
                post_id=str(post_id),
                threads=len(threads),
                comments=len(tree),
            )
            return threads

    async def count_for_post(self, post_id: PostId) -> int:
        """Count all comments of a post, replies included."""
        with logfire.span("comment_service.count_for_post", post_id=str(post_id)):
            return await self.comment_repository.count_by_post(post_id)

    async def find_by_author(self, author: AuthorName) -> list[Comment]:
        """List comments written under an author string, newest first."""
        with logfire.span("comment_service.find_by_author", author=author.root):
            comments = await self.comment_repository.find_by_author(author)
            logfire.info(
                "Comments retrieved for author", author=author.root, count=len(comments)
            )
            return comments

    async def delete_for_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: Post ID

        Returns:
            Number of comments removed
        """
        with logfire.span("comment_service.delete_for_post", post_id=str(post_id)):
            removed = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Comments deleted for post", post_id=str(post_id), removed=removed)
            return removed
