"""Domain model entities for the board."""

from board.domain.model.comment import Comment, CommentThread
from board.domain.model.comment_tree import CommentTree
from board.domain.model.post import Post
from board.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "CommentThread",
    "CommentTree",
]
