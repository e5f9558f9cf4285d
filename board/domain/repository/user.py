"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.user import User
from board.domain.value import DisplayName, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's login name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username_and_name(
        self, username: Username, name: DisplayName
    ) -> Optional[User]:
        """Find a user matching both username and display name.

        Args:
            username: The user's login name
            name: The user's display name

        Returns:
            The user if both match, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
