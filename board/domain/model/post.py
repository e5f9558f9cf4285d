"""Post aggregate root."""

from typing import Optional

from pydantic import Field

from board.domain.model.common import TimestampedModel
from board.domain.value import AuthorName, PostId


class Post(TimestampedModel):
    """Post aggregate root.

    ``author`` is the writer's display name at creation time. ``image_path``
    is the public path returned by the image service, or None.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    author: AuthorName
    image_path: Optional[str] = Field(default=None, max_length=500)
