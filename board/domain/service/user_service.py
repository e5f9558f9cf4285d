"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.config import AuthSettings
from board.domain.error import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Actor, DisplayName, UserId, Username
from board.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost factor)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def _hash(self, password: str) -> str:
        return hash_password(password, rounds=self.auth_settings.bcrypt_rounds)

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info(
                "User found", user_id=str(user_id), username=user.username.root
            )
            return user

    async def get_actor(self, user_id: UserId) -> Actor:
        """Load the acting identity of a user for ownership checks.

        The display name is read fresh, so a renamed user can no longer
        modify content written under the old name.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.get_by_id(user_id)
        return Actor(user_id=user.id, display_name=user.name)

    async def username_exists(self, username: Username) -> bool:
        """Check whether a username is already registered."""
        with logfire.span("user_service.username_exists", username=username.root):
            user = await self.user_repository.find_by_username(username)
            return user is not None

    async def register(
        self, username: Username, password: str, display_name: DisplayName
    ) -> User:
        """Register a new user.

        Args:
            username: Requested login name
            password: Plaintext password, hashed before storage
            display_name: Name shown on posts and comments

        Returns:
            Created user

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.username_exists(username):
                logfire.warn("Username already taken", username=username.root)
                raise DuplicateUsernameError(username.root)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                password_hash=self._hash(password),
                name=display_name,
                created_at=now,
                updated_at=now,
            )

            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=username.root
            )
            return saved

    async def login(self, username: Username, password: str) -> User:
        """Check credentials and return the matching user.

        Args:
            username: Login name
            password: Plaintext password

        Returns:
            The authenticated user

        Raises:
            InvalidCredentialsError: If the username is unknown or the
                password doesn't match
        """
        with logfire.span("user_service.login", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("Login failed: unknown username", username=username.root)
                raise InvalidCredentialsError()

            if not verify_password(password, user.password_hash):
                logfire.warn("Login failed: wrong password", username=username.root)
                raise InvalidCredentialsError()

            logfire.info("User logged in", user_id=str(user.id), username=username.root)
            return user

    async def reset_password(
        self, username: Username, display_name: DisplayName, new_password: str
    ) -> User:
        """Set a new password for the user matching both username and name.

        Args:
            username: Login name
            display_name: Current display name of the same account
            new_password: Replacement plaintext password

        Returns:
            Updated user

        Raises:
            NotFoundError: If no user matches both values
        """
        with logfire.span("user_service.reset_password", username=username.root):
            user = await self.user_repository.find_by_username_and_name(
                username, display_name
            )
            if not user:
                logfire.warn(
                    "Password reset rejected: no matching user",
                    username=username.root,
                )
                raise NotFoundError("User", username.root)

            updated_user = user.revised(password_hash=self._hash(new_password))
            saved = await self.user_repository.save(updated_user)
            logfire.info("Password reset", user_id=str(saved.id))
            return saved

    async def update_display_name(
        self, user_id: UserId, new_name: DisplayName
    ) -> User:
        """Change a user's display name.

        Posts and comments keep the author string they were written with.

        Args:
            user_id: User ID
            new_name: New display name

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.update_display_name",
            user_id=str(user_id),
            new_name=new_name.root,
        ):
            user = await self.get_by_id(user_id)

            updated_user = user.revised(name=new_name)
            saved = await self.user_repository.save(updated_user)
            logfire.info(
                "Display name updated",
                user_id=str(user_id),
                old_name=user.name.root,
                new_name=new_name.root,
            )
            return saved
