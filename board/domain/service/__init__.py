"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .image_service import ImageService
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentService",
    "ImageService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
]
