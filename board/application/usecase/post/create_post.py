"""Create post use case."""

import logfire
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.config import StorageSettings
from board.domain.service import ImageService, PostService, UserService
from board.domain.value import UserId

from .get_post import PostInfo


class ImageUpload(BaseModel):
    """Uploaded file as received from the client."""

    filename: str | None
    data: bytes


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    user_id: str  # User ID from authenticated user
    image: ImageUpload | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostInfo


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        image_service: ImageService,
        storage_settings: StorageSettings,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            image_service: Image storage domain service
            storage_settings: Storage settings (post image folder)
        """
        self.post_service = post_service
        self.user_service = user_service
        self.image_service = image_service
        self.storage_settings = storage_settings

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load the caller's current display name
        2. Store the image, if one was uploaded
        3. Create the post, removing the stored image if that fails

        Args:
            request: Create post request

        Returns:
            Created post

        Raises:
            ValidationError: If the image is too large or not an image
            NotFoundError: If the user doesn't exist
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.user_id)))

        image_path = None
        if request.image:
            image_path = await self.image_service.save_image(
                request.image.data,
                request.image.filename,
                self.storage_settings.post_subdirectory,
            )

        try:
            post = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                author=actor.author,
                image_path=image_path,
            )
        except Exception:
            logfire.warn("Post creation failed, removing stored image", path=image_path)
            await self.image_service.delete_image(image_path)
            raise

        return CreatePostResponse(post=PostInfo.from_post(post))
