"""In-memory post repository for testing."""

from typing import Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import AuthorName, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _newest_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return post_id in self._posts

    async def find_all(self) -> list[Post]:
        """Find every post, newest first."""
        return self._newest_first(list(self._posts.values()))

    async def search_by_title(self, query: str) -> list[Post]:
        """Case-insensitive substring search on titles, newest first."""
        needle = query.casefold()
        return self._newest_first(
            [p for p in self._posts.values() if needle in p.title.casefold()]
        )

    async def find_by_author(self, author: AuthorName) -> list[Post]:
        """Find posts by exact author string, newest first."""
        return self._newest_first(
            [p for p in self._posts.values() if p.author == author]
        )

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
