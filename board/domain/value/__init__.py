"""Domain value objects for the board."""

from board.domain.value.identifiers import CommentId, PostId, UserId
from board.domain.value.types import Actor, AuthorName, DisplayName, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Actor",
    "AuthorName",
    "DisplayName",
    "Username",
]
