"""Update post use case."""

import logfire
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.config import StorageSettings
from board.domain.service import ImageService, PostService, UserService
from board.domain.value import PostId, UserId

from .create_post import ImageUpload
from .get_post import PostInfo


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str
    content: str
    image: ImageUpload | None = None  # Replacement image
    remove_image: bool = False  # Drop the current image without replacing it


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostInfo


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for editing a post's title, content and image."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        image_service: ImageService,
        storage_settings: StorageSettings,
    ) -> None:
        """Initialize update post use case.

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

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        A new upload replaces the current image; ``remove_image`` clears it;
        otherwise the current image is kept. The old file is deleted only
        after the post update succeeded.

        Args:
            request: Update post request

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If the new image is too large or not an image
        """
        post_id = PostId(UUID(request.post_id))
        actor = await self.user_service.get_actor(UserId(UUID(request.user_id)))
        post = await self.post_service.get_post(post_id)

        new_image_path = None
        if request.image:
            new_image_path = await self.image_service.save_image(
                request.image.data,
                request.image.filename,
                self.storage_settings.post_subdirectory,
            )

        if new_image_path:
            image_path = new_image_path
        elif request.remove_image:
            image_path = None
        else:
            image_path = post.image_path

        try:
            updated = await self.post_service.update_post(
                post_id=post_id,
                title=request.title,
                content=request.content,
                image_path=image_path,
                actor=actor,
            )
        except Exception:
            logfire.warn(
                "Post update failed, removing stored image", path=new_image_path
            )
            await self.image_service.delete_image(new_image_path)
            raise

        if post.image_path and post.image_path != updated.image_path:
            await self.image_service.delete_image(post.image_path)

        return UpdatePostResponse(post=PostInfo.from_post(updated))
