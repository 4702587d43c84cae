"""JSON-RPC 2.0 envelope.

A response carries either ``result`` or ``error`` at its top level.  There is
no tag: the payload is an untagged union tried in the order success, then
error.  In memory the payload is a separate object; it is flattened back into
the envelope on encode.  An error payload is ordinary data; decoding one never
raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Generic, TypeVar

from pydantic import SerializationInfo, Tag, model_validator

from a2a_wire.models.base import WireModel
from a2a_wire.models.unions import UntaggedUnion, Variant
from a2a_wire.registry import ErrorKind, kind_of

JSONRPC_VERSION = "2.0"

ResultT = TypeVar("ResultT")

JsonRpcId = str | int
"""Request correlation id.  A ``null`` id is treated as absent."""


class JsonRpcRequest(WireModel):
    """A JSON-RPC 2.0 request (a notification when ``id`` is absent)."""

    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: Any = None
    id: JsonRpcId | None = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcErrorObject(WireModel):
    """The ``error`` member of a failed response."""

    code: int
    message: str
    data: Any = None

    @property
    def kind(self) -> ErrorKind:
        """The registered kind for :attr:`code` (unknown codes map to a sentinel)."""
        return kind_of(self.code)

    @classmethod
    def from_kind(cls, kind: ErrorKind, data: Any = None) -> JsonRpcErrorObject:
        """Build an error object carrying *kind*'s code and description."""
        return cls(code=kind.code, message=kind.description, data=data)


class JsonRpcSuccess(WireModel, Generic[ResultT]):
    """Success payload: ``{"result": ...}``."""

    result: ResultT


class JsonRpcFailure(WireModel):
    """Error payload: ``{"error": {...}}``."""

    error: JsonRpcErrorObject


JSON_RPC_PAYLOAD = UntaggedUnion(
    "JsonRpcPayload",
    Variant("success", JsonRpcSuccess, frozenset({"result"})),
    Variant("failure", JsonRpcFailure, frozenset({"error"})),
)

JsonRpcPayload = Annotated[
    Annotated[JsonRpcSuccess, Tag("success")] | Annotated[JsonRpcFailure, Tag("failure")],
    JSON_RPC_PAYLOAD.discriminator(),
]
"""A bare payload with an untyped result."""

_PAYLOAD_KEYS = ("result", "error")


class JsonRpcResponse(WireModel, Generic[ResultT]):
    """A JSON-RPC 2.0 response; ``payload`` is flattened into the envelope."""

    jsonrpc: str = JSONRPC_VERSION
    id: JsonRpcId | None = None
    payload: Annotated[
        Annotated[JsonRpcSuccess[ResultT], Tag("success")]
        | Annotated[JsonRpcFailure, Tag("failure")],
        JSON_RPC_PAYLOAD.discriminator(),
    ]

    @model_validator(mode="before")
    @classmethod
    def _gather_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        # Constructors pass payload directly; wire responses carry result or error.
        if "payload" in data and not any(key in data for key in _PAYLOAD_KEYS):
            return data
        envelope = {key: value for key, value in data.items() if key not in _PAYLOAD_KEYS}
        envelope["payload"] = {key: data[key] for key in _PAYLOAD_KEYS if key in data}
        return envelope

    def _finish_wire(self, data: dict[str, Any], info: SerializationInfo) -> dict[str, Any]:
        payload = data.pop("payload", None)
        if isinstance(payload, dict):
            data.update(payload)
        return data

    @classmethod
    def success(cls, result: Any, id: JsonRpcId | None = None) -> JsonRpcResponse[Any]:
        return cls(id=id, payload={"result": result})

    @classmethod
    def failure(
        cls, error: JsonRpcErrorObject | ErrorKind, id: JsonRpcId | None = None
    ) -> JsonRpcResponse[Any]:
        if isinstance(error, ErrorKind):
            error = JsonRpcErrorObject.from_kind(error)
        return cls(id=id, payload={"error": error})

    @property
    def is_error(self) -> bool:
        return isinstance(self.payload, JsonRpcFailure)

    @property
    def result(self) -> ResultT | None:
        """The result, or ``None`` for an error response."""
        if isinstance(self.payload, JsonRpcSuccess):
            return self.payload.result
        return None

    @property
    def error(self) -> JsonRpcErrorObject | None:
        """The error, or ``None`` for a success response."""
        if isinstance(self.payload, JsonRpcFailure):
            return self.payload.error
        return None
