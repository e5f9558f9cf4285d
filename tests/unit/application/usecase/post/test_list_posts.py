"""Unit tests for ListPostsUseCase."""

import pytest

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
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


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_filters_by_title_then_author(self, unit_env):
        # Arrange
        list_use_case = await unit_env.get(ListPostsUseCase)
        alice = await register_user(unit_env, "alice", "Alice")
        bob = await register_user(unit_env, "bob", "Bob")
        await _create_post(unit_env, alice, title="Python tricks")
        await _create_post(unit_env, bob, title="Gardening")

        # Act
        by_title = await list_use_case.execute(ListPostsRequest(title="PYTHON"))
        by_author = await list_use_case.execute(ListPostsRequest(author="Bob"))
        everything = await list_use_case.execute(ListPostsRequest())

        # Assert
        assert [p.title for p in by_title.posts] == ["Python tricks"]
        assert [p.title for p in by_author.posts] == ["Gardening"]
        assert len(everything.posts) == 2
        assert all(p.comment_count == 0 for p in everything.posts)
