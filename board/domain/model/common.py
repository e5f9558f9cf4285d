"""Base models for domain entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; changes produce new instances.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


class TimestampedModel(DomainModel):
    """Entity carrying creation and last-modification times."""

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def revised(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied and ``updated_at`` bumped.

        Unlike ``model_copy(update=...)`` the new values go through field
        validation, so length limits still hold after an edit.
        """
        return self.model_validate(
            {**self.model_dump(), **changes, "updated_at": datetime.now()}
        )
