"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.repository import CommentRepository, PostRepository
from board.domain.service import CommentService
from board.domain.value import AuthorName, CommentId, PostId
from tests.conftest import make_actor, make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _saved_post(unit_env, author: str = "Alice"):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(author=author))


class TestCreateTopLevelComment:
    """Tests for create_top_level_comment."""

    @pytest.mark.asyncio
    async def test_creates_comment_without_parent(self, unit_env):
        """A top-level comment has no parent and is stored."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _saved_post(unit_env)

        # Act
        comment = await comment_service.create_top_level_comment(
            post.id, "First!", AuthorName("Bob")
        )

        # Assert
        assert comment.is_top_level
        assert comment.post_id == post.id
        assert comment.author == AuthorName("Bob")
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        """Commenting on a missing post fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.create_top_level_comment(
                PostId(uuid4()), "Hello", AuthorName("Bob")
            )


class TestCreateReply:
    """Tests for create_reply."""

    @pytest.mark.asyncio
    async def test_reply_is_appended_to_parent(self, unit_env):
        """Replies come back in creation order under their parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        parent = await comment_service.create_top_level_comment(
            post.id, "Question", AuthorName("Alice")
        )

        # Act
        first = await comment_service.create_reply(
            post.id, parent.id, "Answer one", AuthorName("Bob")
        )
        second = await comment_service.create_reply(
            post.id, parent.id, "Answer two", AuthorName("Carol")
        )

        # Assert
        assert first.parent_id == parent.id
        replies = await comment_service.list_replies(parent.id)
        assert [r.id for r in replies] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_unknown_parent_raises_not_found(self, unit_env):
        """Replying to a missing comment fails."""
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.create_reply(
                post.id, CommentId(uuid4()), "Reply", AuthorName("Bob")
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises_validation_error(self, unit_env):
        """A reply must stay on its parent's post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_a = await _saved_post(unit_env)
        post_b = await _saved_post(unit_env)
        parent = await comment_service.create_top_level_comment(
            post_a.id, "On A", AuthorName("Alice")
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await comment_service.create_reply(
                post_b.id, parent.id, "On B", AuthorName("Bob")
            )

    @pytest.mark.asyncio
    async def test_reply_to_reply_raises_validation_error(self, unit_env):
        """Replies are capped at one level."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        parent = await comment_service.create_top_level_comment(
            post.id, "Root", AuthorName("Alice")
        )
        reply = await comment_service.create_reply(
            post.id, parent.id, "Reply", AuthorName("Bob")
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="Replies cannot be replied to"):
            await comment_service.create_reply(
                post.id, reply.id, "Nested", AuthorName("Carol")
            )


class TestUpdateComment:
    """Tests for update_comment."""

    @pytest.mark.asyncio
    async def test_author_can_update_content(self, unit_env):
        """Content changes, parent stays."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        parent = await comment_service.create_top_level_comment(
            post.id, "Root", AuthorName("Alice")
        )
        reply = await comment_service.create_reply(
            post.id, parent.id, "Typo", AuthorName("Bob")
        )

        # Act
        updated = await comment_service.update_comment(
            reply.id, "Fixed", make_actor("Bob")
        )

        # Assert
        assert updated.content == "Fixed"
        assert updated.parent_id == parent.id
        assert updated.updated_at >= reply.updated_at

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        """Only the author may edit."""
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        comment = await comment_service.create_top_level_comment(
            post.id, "Mine", AuthorName("Alice")
        )

        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(comment.id, "Yours", make_actor("Bob"))

        assert (await comment_service.get_comment(comment.id)).content == "Mine"

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_comment(
                CommentId(uuid4()), "Text", make_actor()
            )


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_delete_top_level_removes_replies(self, unit_env):
        """Deleting a comment with three replies removes four comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        root = await comment_service.create_top_level_comment(
            post.id, "Root", AuthorName("Alice")
        )
        for i in range(3):
            await comment_service.create_reply(
                post.id, root.id, f"Reply {i}", AuthorName("Bob")
            )
        other = await comment_service.create_top_level_comment(
            post.id, "Other", AuthorName("Bob")
        )

        # Act
        removed = await comment_service.delete_comment(root.id, make_actor("Alice"))

        # Assert
        assert removed == 4
        assert await comment_service.count_for_post(post.id) == 1
        assert [c.id for c in await comment_service.list_top_level(post.id)] == [
            other.id
        ]

    @pytest.mark.asyncio
    async def test_delete_reply_keeps_parent(self, unit_env):
        """Deleting a reply removes only that reply."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        root = await comment_service.create_top_level_comment(
            post.id, "Root", AuthorName("Alice")
        )
        reply = await comment_service.create_reply(
            post.id, root.id, "Reply", AuthorName("Bob")
        )

        # Act
        removed = await comment_service.delete_comment(reply.id, make_actor("Bob"))

        # Assert
        assert removed == 1
        assert await comment_service.list_replies(root.id) == []
        assert await comment_service.count_for_post(post.id) == 1

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        comment = await comment_service.create_top_level_comment(
            post.id, "Mine", AuthorName("Alice")
        )

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, make_actor("Mallory"))

        assert await comment_service.count_for_post(post.id) == 1


class TestQueries:
    """Tests for the read operations."""

    @pytest.mark.asyncio
    async def test_get_threads_loads_replies(self, unit_env):
        """Threads are ordered oldest first with their replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        first = await comment_service.create_top_level_comment(
            post.id, "First", AuthorName("Alice")
        )
        second = await comment_service.create_top_level_comment(
            post.id, "Second", AuthorName("Bob")
        )
        reply = await comment_service.create_reply(
            post.id, second.id, "Reply", AuthorName("Alice")
        )

        # Act
        threads = await comment_service.get_threads(post.id)

        # Assert
        assert [t.comment.id for t in threads] == [first.id, second.id]
        assert threads[0].replies == []
        assert [r.id for r in threads[1].replies] == [reply.id]
        assert await comment_service.count_for_post(post.id) == 3

    @pytest.mark.asyncio
    async def test_find_by_author_is_newest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _saved_post(unit_env)
        start = datetime(2024, 1, 1, 12, 0, 0)
        older = await comment_repo.save(
            make_comment(post.id, author="Alice", created_at=start)
        )
        await comment_repo.save(
            make_comment(post.id, author="Bob", created_at=start + timedelta(hours=1))
        )
        newer = await comment_repo.save(
            make_comment(post.id, author="Alice", created_at=start + timedelta(hours=2))
        )

        comments = await comment_service.find_by_author(AuthorName("Alice"))

        assert [c.id for c in comments] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_delete_for_post_removes_everything(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await _saved_post(unit_env)
        root = await comment_service.create_top_level_comment(
            post.id, "Root", AuthorName("Alice")
        )
        await comment_service.create_reply(post.id, root.id, "Reply", AuthorName("Bob"))

        removed = await comment_service.delete_for_post(post.id)

        assert removed == 2
        assert await comment_service.count_for_post(post.id) == 0
        assert await comment_service.get_threads(post.id) == []
