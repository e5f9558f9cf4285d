"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.repository import PostRepository
from board.domain.service import CommentService, UserService
from tests.conftest import make_post, register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _use_case(unit_env) -> CreateCommentUseCase:
    return CreateCommentUseCase(
        comment_service=await unit_env.get(CommentService),
        user_service=await unit_env.get(UserService),
    )


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_is_stamped_with_current_name(self, unit_env):
        """The author string is the caller's display name."""
        # Arrange
        create_comment_use_case = await _use_case(unit_env)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(author="Alice"))
        user = await register_user(unit_env, "bob", "Bob")

        # Act
        response = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Nice post", user_id=str(user.id)
            )
        )

        # Assert
        assert response.comment.author == "Bob"
        assert response.comment.post_id == str(post.id)
        assert response.comment.parent_id is None

    @pytest.mark.asyncio
    async def test_reply_links_to_parent(self, unit_env):
        # Arrange
        create_comment_use_case = await _use_case(unit_env)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user = await register_user(unit_env)
        parent = await create_comment_use_case.execute(
            CreateCommentRequest(post_id=str(post.id), content="Q", user_id=str(user.id))
        )

        # Act
        reply = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="A",
                user_id=str(user.id),
                parent_id=parent.comment.comment_id,
            )
        )

        # Assert
        assert reply.comment.parent_id == parent.comment.comment_id

    @pytest.mark.asyncio
    async def test_reply_across_posts_fails(self, unit_env):
        """A parent on post A cannot take a reply on post B."""
        # Arrange
        create_comment_use_case = await _use_case(unit_env)
        post_repo = await unit_env.get(PostRepository)
        post_a = await post_repo.save(make_post())
        post_b = await post_repo.save(make_post())
        user = await register_user(unit_env)
        parent = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_a.id), content="On A", user_id=str(user.id)
            )
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    post_id=str(post_b.id),
                    content="On B",
                    user_id=str(user.id),
                    parent_id=parent.comment.comment_id,
                )
            )

    @pytest.mark.asyncio
    async def test_comment_on_missing_post_fails(self, unit_env):
        create_comment_use_case = await _use_case(unit_env)
        user = await register_user(unit_env)

        with pytest.raises(NotFoundError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), content="Hello", user_id=str(user.id)
                )
            )
