"""Unit tests for CreatePostUseCase."""

import pytest

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ImageUpload,
)
from board.domain.error import ValidationError
from board.domain.repository import PostRepository
from board.domain.repository import ImageStore
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_text_post(self, unit_env):
        """A post without image has no image path."""
        # Arrange
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        user = await register_user(unit_env, "alice", "Alice")

        # Act
        response = await create_post_use_case.execute(
            CreatePostRequest(title="Hello", content="World", user_id=str(user.id))
        )

        # Assert
        assert response.post.author == "Alice"
        assert response.post.image_path is None
        assert len(await post_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_create_post_with_image_stores_file(self, unit_env):
        # Arrange
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        image_store = await unit_env.get(ImageStore)
        user = await register_user(unit_env)

        # Act
        response = await create_post_use_case.execute(
            CreatePostRequest(
                title="Look",
                content="A picture",
                user_id=str(user.id),
                image=ImageUpload(filename="cat.jpg", data=b"jpeg-bytes"),
            )
        )

        # Assert
        assert response.post.image_path.startswith("/posts/")
        assert response.post.image_path.endswith(".jpg")
        assert image_store.contains(response.post.image_path)

    @pytest.mark.asyncio
    async def test_oversized_image_creates_nothing(self, unit_env):
        """A 12 MB upload is rejected before any post is written."""
        # Arrange
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        image_store = await unit_env.get(ImageStore)
        user = await register_user(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await create_post_use_case.execute(
                CreatePostRequest(
                    title="Huge",
                    content="Too big",
                    user_id=str(user.id),
                    image=ImageUpload(
                        filename="huge.png", data=b"\x00" * (12 * 1024 * 1024)
                    ),
                )
            )

        assert await post_repo.find_all() == []
        assert image_store.files == {}

    @pytest.mark.asyncio
    async def test_failed_post_write_removes_image(self, unit_env):
        """An invalid title after a stored upload leaves no orphan file."""
        # Arrange
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        image_store = await unit_env.get(ImageStore)
        user = await register_user(unit_env)

        # Act & Assert
        with pytest.raises(Exception):
            await create_post_use_case.execute(
                CreatePostRequest(
                    title="x" * 201,
                    content="Body",
                    user_id=str(user.id),
                    image=ImageUpload(filename="pic.png", data=b"png-bytes"),
                )
            )

        assert image_store.files == {}
