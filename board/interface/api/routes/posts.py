"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, Form, UploadFile, status

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ImageUpload,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from board.config import StorageSettings
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


async def _read_upload(
    image: UploadFile | None, max_size: int
) -> ImageUpload | None:
    """Read an optional multipart file; browsers send an unnamed empty part.

    At most ``max_size + 1`` bytes are read, enough for the image service to
    reject an oversized file without buffering all of it.
    """
    if image is None or not image.filename:
        return None
    data = await image.read(max_size + 1)
    logfire.info("Image upload received", filename=image.filename, size=len(data))
    return ImageUpload(filename=image.filename, data=data)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    title: str | None = None,
    author: str | None = None,
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        title: Case-insensitive title substring to search for
        author: Exact author name to filter by

    Example:
        GET /posts?title=python
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(title=title, author=author)
    )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    storage_settings: FromDishka[StorageSettings],
    title: str = Form(min_length=1, max_length=200),
    content: str = Form(min_length=1),
    image: UploadFile | None = File(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post from a multipart form, optionally with an image.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the image is rejected
    """
    user_id = require_user_id(jwt_service, auth_token, "create posts")

    return await create_post_use_case.execute(
        CreatePostRequest(
            title=title,
            content=content,
            user_id=user_id,
            image=await _read_upload(image, storage_settings.max_file_size),
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a post with its comment threads.

    Authentication is optional; it only decides ``can_edit``.
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_post_use_case.execute(
        GetPostRequest(post_id=str(post_id), viewer_id=viewer_id)
    )


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    storage_settings: FromDishka[StorageSettings],
    title: str = Form(min_length=1, max_length=200),
    content: str = Form(min_length=1),
    remove_image: bool = Form(default=False),
    image: UploadFile | None = File(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Replace a post's title, content and optionally its image.

    Requires authentication and authorship.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post doesn't exist
    """
    user_id = require_user_id(jwt_service, auth_token, "edit posts")

    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id),
            user_id=user_id,
            title=title,
            content=content,
            image=await _read_upload(image, storage_settings.max_file_size),
            remove_image=remove_image,
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post with its comments and image.

    Requires authentication and authorship.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete posts")

    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=user_id)
    )
