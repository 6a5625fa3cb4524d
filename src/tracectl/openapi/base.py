"""Base model for platform API schemas.

Wire names are camelCase and Python attributes snake_case; both are
accepted when validating.  Serialization omits fields left as ``None``
so an absent value never shows up on the wire as a zero value.
"""

from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel

from tracectl.domain.errors import ResourceDecodeError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class ApiModel(BaseModel):
    """Common config and (de)serialization helpers for API records."""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "ignore",
        # No coercion: "true", 1 or 5.0 are not a bool or an int32.
        "strict": True,
    }

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """Parse a JSON document into this model.

        Raises:
            ResourceDecodeError: *raw* is not JSON, or does not match the schema.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Invalid {cls.__name__}: {exc.error_count()} validation error(s)"
            raise ResourceDecodeError(msg) from exc

    def to_dict(self) -> dict[str, Any]:
        """Return the wire-shaped dict (camelCase keys, unset fields dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialize to JSON with wire names, dropping unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class ResourceEnvelope(ApiModel):
    """``{"type": ..., "spec": ...}`` wrapper shared by all resources."""

    type: str | None = None
