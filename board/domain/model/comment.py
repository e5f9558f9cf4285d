"""Comment entity.

Comments form a two-level tree on a post: top-level comments and their
replies. Replies cannot be replied to.
"""

from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel, TimestampedModel
from board.domain.value import AuthorName, CommentId, PostId


class Comment(TimestampedModel):
    """Comment entity.

    Represents a top-level comment (``parent_id`` is None) or a reply to a
    top-level comment of the same post.
    """

    id: CommentId
    post_id: PostId
    content: str = Field(min_length=1, max_length=500)
    author: AuthorName
    parent_id: Optional[CommentId] = None

    @property
    def is_top_level(self) -> bool:
        """Whether this comment is attached directly to the post."""
        return self.parent_id is None

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_id is not None


class CommentThread(DomainModel):
    """A top-level comment together with its replies in creation order."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of comments in the thread, the root included."""
        return 1 + len(self.replies)
