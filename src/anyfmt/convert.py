"""Conversion between typed values and the plain data codecs work on.

We lean on :class:`pydantic.TypeAdapter`: anything pydantic can validate
(dataclasses, :class:`~typing.TypedDict`, pydantic models, generic containers,
...) can be used as a target type.
"""

from __future__ import annotations

import functools
from typing import Any, Final, Type, TypeVar

import pydantic
import pydantic_core

T = TypeVar("T")

#: Errors raised when a value doesn't fit the target type, can't be turned
#: into plain data, or has a type pydantic has no schema for.
ERRORS: Final = (
    pydantic.ValidationError,
    pydantic.PydanticSchemaGenerationError,
    pydantic_core.PydanticSerializationError,
)


@functools.lru_cache(maxsize=256)
def _adapter(ty: Any) -> pydantic.TypeAdapter[Any]:
    return pydantic.TypeAdapter(ty)


def to_data(value: Any) -> Any:
    """Turn *value* into plain data"""
    return _adapter(type(value)).dump_python(value, mode="json")


def from_data(data: Any, ty: Type[T] | Any = Any) -> T:
    """Validate plain *data* into an instance of *ty*.

    *data* is returned untouched if *ty* is :data:`typing.Any`.
    """
    if ty is Any:
        return data  # type: ignore[no-any-return]
    res: T = _adapter(ty).validate_python(data)
    return res
