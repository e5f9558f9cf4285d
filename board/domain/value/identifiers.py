"""Strongly typed identifiers for board entities.

NewType keeps post, comment and user ids from being mixed up at call sites.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
