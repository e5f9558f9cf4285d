"""In-memory comment repository for testing."""

from typing import Optional

from board.domain.model.comment import Comment
from board.domain.model.comment_tree import CommentTree
from board.domain.repository.comment import CommentRepository
from board.domain.value import AuthorName, CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Comments are kept in one ``CommentTree`` per post, so deleting a comment
    drops its replies the same way the database cascade does.
    """

    def __init__(self) -> None:
        self._trees: dict[PostId, CommentTree] = {}
        self._post_of: dict[CommentId, PostId] = {}

    def _tree_of(self, comment_id: CommentId) -> Optional[CommentTree]:
        post_id = self._post_of.get(comment_id)
        return self._trees.get(post_id) if post_id is not None else None

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        tree = self._tree_of(comment_id)
        return tree.get(comment_id) if tree else None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        tree = self._trees.get(post_id)
        if not tree:
            return []
        return sorted(tree.all(), key=lambda c: c.created_at)

    async def find_top_level(self, post_id: PostId) -> list[Comment]:
        """Find comments of a post without a parent, oldest first."""
        tree = self._trees.get(post_id)
        return tree.top_level() if tree else []

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct child comments of a parent comment."""
        tree = self._tree_of(parent_id)
        return tree.replies(parent_id) if tree else []

    async def find_by_author(self, author: AuthorName) -> list[Comment]:
        """Find comments by author string, newest first."""
        comments = [
            c for tree in self._trees.values() for c in tree.all() if c.author == author
        ]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        tree = self._tree_of(comment.id)
        if tree:
            tree.replace(comment)
            return comment

        tree = self._trees.setdefault(comment.post_id, CommentTree(comment.post_id))
        tree.add(comment)
        self._post_of[comment.id] = comment.post_id
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        tree = self._tree_of(comment_id)
        if not tree:
            return None
        updated = tree.get(comment_id).revised(content=content)
        tree.replace(updated)
        return updated

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies."""
        tree = self._tree_of(comment_id)
        if not tree:
            return 0
        removed = tree.remove(comment_id)
        for removed_id in removed:
            self._post_of.pop(removed_id, None)
        return len(removed)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        tree = self._trees.pop(post_id, None)
        if not tree:
            return 0
        for comment in tree.all():
            self._post_of.pop(comment.id, None)
        return len(tree)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post, replies included."""
        tree = self._trees.get(post_id)
        return len(tree) if tree else 0
