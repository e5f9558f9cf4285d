"""Unit tests for DeletePostUseCase."""

from uuid import UUID, uuid4

import pytest

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    ImageUpload,
)
from board.domain.error import NotAuthorizedError, NotFoundError
from board.domain.repository import ImageStore, PostRepository
from board.domain.service import CommentService
from board.domain.value import AuthorName, PostId
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_post(unit_env, user, title="Post", image=None):
    create_post_use_case = await unit_env.get(CreatePostUseCase)
    response = await create_post_use_case.execute(
        CreatePostRequest(title=title, content="Body", user_id=str(user.id), image=image)
    )
    return response.post


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_comments_and_image(self, unit_env):
        """Post, comments and image file all go away."""
        # Arrange
        delete_use_case = await unit_env.get(DeletePostUseCase)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        image_store = await unit_env.get(ImageStore)
        user = await register_user(unit_env, "alice", "Alice")
        post = await _create_post(
            unit_env, user, image=ImageUpload(filename="a.png", data=b"png")
        )
        post_id = PostId(UUID(post.post_id))
        root = await comment_service.create_top_level_comment(
            post_id, "Root", AuthorName("Bob")
        )
        await comment_service.create_reply(post_id, root.id, "Reply", AuthorName("Alice"))

        # Act
        response = await delete_use_case.execute(
            DeletePostRequest(post_id=post.post_id, user_id=str(user.id))
        )

        # Assert
        assert response.removed_comments == 2
        assert not await post_repo.exists(post_id)
        assert await comment_service.count_for_post(post_id) == 0
        assert image_store.files == {}

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Comments survive a rejected delete."""
        # Arrange
        delete_use_case = await unit_env.get(DeletePostUseCase)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        alice = await register_user(unit_env, "alice", "Alice")
        bob = await register_user(unit_env, "bob", "Bob")
        post = await _create_post(unit_env, alice)
        post_id = PostId(UUID(post.post_id))
        await comment_service.create_top_level_comment(post_id, "Hi", AuthorName("Bob"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete_use_case.execute(
                DeletePostRequest(post_id=post.post_id, user_id=str(bob.id))
            )

        assert await post_repo.exists(post_id)
        assert await comment_service.count_for_post(post_id) == 1

    @pytest.mark.asyncio
    async def test_missing_post_fails(self, unit_env):
        delete_use_case = await unit_env.get(DeletePostUseCase)
        user = await register_user(unit_env)

        with pytest.raises(NotFoundError):
            await delete_use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), user_id=str(user.id))
            )
