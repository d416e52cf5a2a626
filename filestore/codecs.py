"""
Default value codec: UTF-8 JSON through pydantic.
Works for anything pydantic can validate and dump: scalars, lists, dicts,
dataclasses, TypedDicts and BaseModel subclasses.
"""

from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .base import Codec, V


class JsonCodec(Codec[V]):
    """JSON codec for `value_type`. With value_type=Any, values come back as plain JSON types."""

    errors = (ValidationError, PydanticSerializationError)

    def __init__(self, value_type: Any = Any, indent: Optional[int] = None):
        self.value_type = value_type
        self.indent = indent
        self._adapter = TypeAdapter(value_type)

    def encode(self, value: V) -> bytes:
        return self._adapter.dump_json(value, indent=self.indent, warnings="error")

    def decode(self, data: bytes) -> V:
        return self._adapter.validate_json(data)

    def __repr__(self) -> str:
        name = getattr(self.value_type, "__name__", repr(self.value_type))
        return f"JsonCodec({name})"
