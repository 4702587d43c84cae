"""Encode and decode A2A wire payloads.

All encoding goes through the wire names and the optional-field projection of
:class:`~a2a_wire.models.base.WireModel`.  All decoding failures surface as a
:class:`~a2a_wire.errors.DecodeError`; the pydantic error is chained.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from a2a_wire.errors import DecodeError, from_validation_error
from a2a_wire.methods import JsonRpcMethod
from a2a_wire.models.jsonrpc import JsonRpcPayload, JsonRpcRequest, JsonRpcResponse
from a2a_wire.models.message import FileWith, Part
from a2a_wire.models.security import SecurityScheme
from a2a_wire.models.task import StreamEvent

logger = logging.getLogger(__name__)

_PART = TypeAdapter(Part)
_SECURITY_SCHEME = TypeAdapter(SecurityScheme)
_FILE_WITH = TypeAdapter(FileWith)
_PAYLOAD = TypeAdapter(JsonRpcPayload)
_STREAM_EVENT = TypeAdapter(StreamEvent)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode(model: BaseModel) -> dict[str, Any]:
    """Encode *model* to a JSON-compatible mapping using wire names."""
    return model.model_dump(mode="json", by_alias=True)


def encode_json(model: BaseModel, *, indent: int | None = None) -> str:
    """Encode *model* to JSON text.

    Map keys are emitted in sorted order, so equal values give equal text.
    """
    return model.model_dump_json(by_alias=True, indent=indent)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _adapter(target: Any) -> TypeAdapter[Any]:
    if isinstance(target, TypeAdapter):
        return target
    return TypeAdapter(target)


def decode(target: Any, data: Any) -> Any:
    """Decode a JSON-compatible value *data* as *target*.

    *target* is a model class or any typing form pydantic accepts, e.g.
    ``JsonRpcResponse[Task]`` or ``list[Task]``.

    Raises:
        DecodeError: If *data* does not have the shape of *target*.
    """
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate(data)
        return _adapter(target).validate_python(data)
    except ValidationError as exc:
        raise from_validation_error(exc) from exc


def decode_json(target: Any, raw: str | bytes) -> Any:
    """Decode JSON text *raw* as *target*.

    Raises:
        DecodeError: If *raw* is not JSON or not of the shape of *target*.
    """
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate_json(raw)
        return _adapter(target).validate_json(raw)
    except ValidationError as exc:
        raise from_validation_error(exc) from exc


def decode_part(data: Any) -> Any:
    """Decode one message part (tagged by ``kind``)."""
    return decode(_PART, data)


def decode_security_scheme(data: Any) -> Any:
    """Decode one security scheme (tagged by ``type``)."""
    return decode(_SECURITY_SCHEME, data)


def decode_file(data: Any) -> Any:
    """Decode a file; ``bytes`` wins over ``uri`` when both are present."""
    return decode(_FILE_WITH, data)


def decode_payload(data: Any) -> Any:
    """Decode a bare ``{"result": ...}`` or ``{"error": ...}`` payload."""
    return decode(_PAYLOAD, data)


def decode_stream_event(data: Any) -> Any:
    """Decode one item of a streaming response result."""
    return decode(_STREAM_EVENT, data)


def decode_params(request: JsonRpcRequest) -> Any:
    """Decode the ``params`` of *request* using the method catalogue.

    Methods the catalogue does not know, and methods that take no params,
    return the raw ``params`` unchanged.
    """
    method = JsonRpcMethod.lookup(request.method)
    if method is None or method.params_type is None:
        logger.debug("no params type for method %r", request.method)
        return request.params
    return decode(method.params_type, request.params)


def decode_response(method: JsonRpcMethod | str, data: Mapping[str, Any] | str | bytes) -> Any:
    """Decode a response to *method*, typing ``result`` from the catalogue.

    An unknown method decodes with an untyped result.  An error response is
    returned as data; it is never raised.
    """
    known = method if isinstance(method, JsonRpcMethod) else JsonRpcMethod.lookup(method)
    result_type = known.result_type if known is not None else Any
    target = JsonRpcResponse[result_type]  # type: ignore[valid-type]
    if isinstance(data, (str, bytes)):
        return decode_json(target, data)
    return decode(target, data)


__all__ = [
    "DecodeError",
    "decode",
    "decode_file",
    "decode_json",
    "decode_params",
    "decode_part",
    "decode_payload",
    "decode_response",
    "decode_security_scheme",
    "decode_stream_event",
    "encode",
    "encode_json",
]
