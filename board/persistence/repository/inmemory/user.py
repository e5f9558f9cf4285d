"""In-memory user repository for testing."""

from typing import Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import DisplayName, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their login name."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_username_and_name(
        self, username: Username, name: DisplayName
    ) -> Optional[User]:
        """Find a user matching both login name and display name."""
        user = await self.find_by_username(username)
        if user and user.name == name:
            return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
