"""Base classes for value objects."""

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, field_validator


class ValueObject(BaseModel):
    """Base class for composite value objects, compared by value."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, exposed as ``.root``.

    ``model_dump()`` yields the bare primitive, so these map straight onto
    table columns.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    def __str__(self) -> str:
        return str(self.root)


class BoundedText(RootValueObject[str]):
    """Non-blank string of at most ``max_length`` characters.

    Subclasses set ``label`` (used in error messages) and ``max_length``.
    """

    label: ClassVar[str] = "Text"
    max_length: ClassVar[int] = 255

    @field_validator("root")
    @classmethod
    def validate_bounds(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(f"{cls.label} must not be blank")
        if len(v) > cls.max_length:
            raise ValueError(f"{cls.label} must be 1-{cls.max_length} characters")
        return v
