"""Strict, immutable pydantic base model."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Instances are frozen after validation, reject unknown fields and do not
    coerce between types. Every way of creating an instance runs the field
    validators, including copies and `model_construct`.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> Self:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(dict(self) | (update or {})))

    @classmethod
    def model_construct(cls, _fields_set: set[str] | None = None, **values: Any) -> Self:
        """Build an instance from `values`, validated like the constructor."""
        return cls(**values)
