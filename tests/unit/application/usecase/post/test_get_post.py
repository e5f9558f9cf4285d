"""Unit tests for GetPostUseCase."""

import pytest

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
)
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_post(unit_env, user, title="Post"):
    create_post_use_case = await unit_env.get(CreatePostUseCase)
    response = await create_post_use_case.execute(
        CreatePostRequest(title=title, content="Body", user_id=str(user.id))
    )
    return response.post


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_can_edit_only_for_author(self, unit_env):
        # Arrange
        get_post_use_case = await unit_env.get(GetPostUseCase)
        alice = await register_user(unit_env, "alice", "Alice")
        bob = await register_user(unit_env, "bob", "Bob")
        post = await _create_post(unit_env, alice)

        # Act
        as_author = await get_post_use_case.execute(
            GetPostRequest(post_id=post.post_id, viewer_id=str(alice.id))
        )
        as_other = await get_post_use_case.execute(
            GetPostRequest(post_id=post.post_id, viewer_id=str(bob.id))
        )
        anonymous = await get_post_use_case.execute(GetPostRequest(post_id=post.post_id))

        # Assert
        assert as_author.can_edit
        assert not as_other.can_edit
        assert not anonymous.can_edit
        assert anonymous.comment_count == 0
        assert anonymous.threads == []
