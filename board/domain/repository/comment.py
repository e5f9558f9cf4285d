"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import AuthorName, CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment of a post, top-level and replies.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_top_level(self, post_id: PostId) -> List[Comment]:
        """Find the comments of a post that have no parent.

        Args:
            post_id: The post ID

        Returns:
            Top-level comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies of a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author: AuthorName) -> List[Comment]:
        """Find comments written under an author string.

        Args:
            author: Exact author string

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment and bump updated_at.

        Args:
            comment_id: ID of the comment to update
            content: New content

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and all of its replies.

        Args:
            comment_id: The comment ID to delete

        Returns:
            Number of comments removed, the comment itself included
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post, replies included.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
