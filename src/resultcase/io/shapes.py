"""Pydantic models for the two wire shapes of a result.

The tagged value and the facade serialize differently on purpose and are
never interchangeable:

- tagged: ``{"tag": "ok" | "err", "inner": ...}``
- facade: ``{"kind": "ok", "value": ...}`` or ``{"kind": "err", "error": ...}``
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TaggedShape(BaseModel):
    """Wire form of a ResultValue."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["ok", "err"]
    inner: Any


class OkShape(BaseModel):
    """Wire form of an Ok facade."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["ok"]
    value: Any


class ErrShape(BaseModel):
    """Wire form of an Err facade."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["err"]
    error: Any


FacadeShape = Annotated[Union[OkShape, ErrShape], Field(discriminator="kind")]

# Cached at module level, building a TypeAdapter is not free
TaggedAdapter: TypeAdapter[TaggedShape] = TypeAdapter(TaggedShape)
FacadeAdapter: TypeAdapter[OkShape | ErrShape] = TypeAdapter(FacadeShape)
