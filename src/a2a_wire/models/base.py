"""Base model for wire records — the optional-field projection contract.

* Field names are ``snake_case`` in Python and ``camelCase`` on the wire.
* An optional field (one with a ``None`` default) that holds ``None`` is left
  out of the encoded object entirely; it is never emitted as ``null``.  A
  required field is always emitted, even when its value is ``null``.
* A key that is missing, or present with ``null``, decodes as absent.
* Every string-keyed map encodes with its keys in ascending lexical order,
  so identical values always produce identical bytes.
* Records hash by their canonical encoding, so equal records hash equally
  whatever the insertion order of their maps.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    WrapSerializer,
    model_serializer,
)
from pydantic.alias_generators import to_camel

V = TypeVar("V")


def _sorted_keys(value: dict[str, Any], handler: SerializerFunctionWrapHandler) -> Any:
    encoded = handler(value)
    if isinstance(encoded, dict):
        return dict(sorted(encoded.items()))
    return encoded


SortedMap = Annotated[dict[str, V], WrapSerializer(_sorted_keys)]
"""A string-keyed map whose encoded keys are sorted."""

JsonMap = SortedMap[Any]
"""Opaque JSON values keyed by string (metadata, data parts, params)."""


class WireModel(BaseModel):
    """An immutable record with camelCase wire names and omitted absent fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def _project(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        for name, field in type(self).model_fields.items():
            if field.is_required() or getattr(self, name) is not None:
                continue
            key = (field.serialization_alias or field.alias or name) if info.by_alias else name
            data.pop(key, None)
        return self._finish_wire(data, info)

    def _finish_wire(self, data: dict[str, Any], info: SerializationInfo) -> dict[str, Any]:
        """Hook for records whose wire shape is not a plain field mapping."""
        return data

    def to_wire(self) -> dict[str, Any]:
        """Encode to a JSON-compatible mapping with wire field names."""
        return self.model_dump(mode="json", by_alias=True)

    def __hash__(self) -> int:
        # Hashes the canonical encoding, so map insertion order does not matter.
        return hash((type(self).__qualname__, json.dumps(self.to_wire(), sort_keys=True)))
