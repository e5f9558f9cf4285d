"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, StorageSettings
from board.domain.repository import (
    CommentRepository,
    ImageStore,
    PostRepository,
    UserRepository,
)
from board.domain.service import (
    CommentService,
    ImageService,
    JWTService,
    PostService,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_image_service(
        self, image_store: ImageStore, storage_settings: StorageSettings
    ) -> ImageService:
        """Provide image storage domain service."""
        return ImageService(
            image_store=image_store, storage_settings=storage_settings
        )
