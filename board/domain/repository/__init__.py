"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.image import ImageStore
from board.domain.repository.post import PostRepository
from board.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ImageStore",
]
