"""User aggregate root.

Users register with a username and password and write under their
display name.
"""

from pydantic import Field

from board.domain.model.common import TimestampedModel
from board.domain.value import DisplayName, UserId, Username


class User(TimestampedModel):
    """User aggregate root.

    ``password_hash`` holds a bcrypt hash; plaintext passwords never reach
    this model.
    """

    id: UserId
    username: Username
    password_hash: str = Field(min_length=1, max_length=100)
    name: DisplayName
