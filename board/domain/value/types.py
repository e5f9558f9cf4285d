"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
They encapsulate the length rules of the persisted columns.
"""

import re

from pydantic import field_validator

from board.domain.value.common import BoundedText, RootValueObject, ValueObject
from board.domain.value.identifiers import UserId


class Username(RootValueObject[str]):
    """Login name, unique across users.

    3-20 characters, letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length and charset."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,20}$", v):
            raise ValueError(
                "Username must be 3-20 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class DisplayName(BoundedText):
    """Human readable name shown as the author of posts and comments."""

    label = "Display name"
    max_length = 20


class AuthorName(BoundedText):
    """Author string copied onto posts and comments.

    It is a snapshot of the writer's display name at write time and is never
    rewritten when the user later changes their name.
    """

    label = "Author"
    max_length = 50


class Actor(ValueObject):
    """Authenticated caller performing a mutation.

    Services receive an actor instead of trusting a bare author string, and
    only let it modify content whose author equals its display name.
    """

    user_id: UserId
    display_name: DisplayName

    @property
    def author(self) -> AuthorName:
        """Author string to stamp on content written by this actor."""
        return AuthorName(self.display_name.root)

    def can_modify(self, author: AuthorName) -> bool:
        """Check whether this actor owns content stamped with ``author``."""
        return author.root == self.display_name.root
