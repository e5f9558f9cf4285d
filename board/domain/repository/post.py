"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.post import Post
from board.domain.value import AuthorName, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if the post exists
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts.

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def search_by_title(self, query: str) -> List[Post]:
        """Find posts whose title contains ``query``, ignoring case.

        Args:
            query: Substring to look for

        Returns:
            Matching posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author: AuthorName) -> List[Post]:
        """Find posts written under an author string.

        Args:
            author: Exact author string

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post.

        The database removes the post's comments through ON DELETE CASCADE.

        Args:
            post_id: The post ID to delete
        """
        pass
