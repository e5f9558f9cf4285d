"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import logfire

# Cheapest bcrypt cost so password hashing doesn't dominate the suite
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

# Keep test runs local, nothing is sent to Logfire
logfire.configure(send_to_logfire=False, console=False)

from board.domain.model import Comment, Post  # noqa: E402
from board.domain.service import UserService  # noqa: E402
from board.domain.value import (  # noqa: E402
    Actor,
    AuthorName,
    CommentId,
    DisplayName,
    PostId,
    UserId,
    Username,
)


def make_actor(name: str = "Alice") -> Actor:
    """Build an actor with a random user ID."""
    return Actor(user_id=UserId(uuid4()), display_name=DisplayName(name))


def make_post(
    author: str = "Alice",
    title: str = "Test Post",
    created_at: datetime | None = None,
    image_path: str | None = None,
) -> Post:
    """Build a post that is not yet saved."""
    now = created_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        title=title,
        content="Test content",
        author=AuthorName(author),
        image_path=image_path,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    author: str = "Alice",
    content: str = "Test comment",
    created_at: datetime | None = None,
) -> Comment:
    """Build a comment that is not yet saved."""
    now = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        content=content,
        author=AuthorName(author),
        parent_id=parent_id,
        created_at=now,
        updated_at=now,
    )


async def register_user(container, username: str = "alice", name: str = "Alice"):
    """Register a user through the container's UserService.

    Args:
        container: Request-scoped test container
        username: Login name
        name: Display name

    Returns:
        The created user, password ``secret123``
    """
    user_service = await container.get(UserService)
    return await user_service.register(
        Username(username), "secret123", DisplayName(name)
    )


def signup_and_login(client, username: str = "alice", name: str = "Alice") -> str:
    """Create an account over HTTP and log in; the client keeps the cookie.

    Returns:
        The new user's ID
    """
    signup = client.post(
        "/auth/signup",
        json={
            "username": username,
            "password": "secret123",
            "password_confirm": "secret123",
            "name": name,
        },
    )
    assert signup.status_code == 201, signup.text

    login = client.post(
        "/auth/login", json={"username": username, "password": "secret123"}
    )
    assert login.status_code == 200, login.text
    return login.json()["user_id"]
