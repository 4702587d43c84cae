"""A2A wire — the JSON encoding of the Agent2Agent protocol's data model."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from a2a_wire.codec import decode as decode
    from a2a_wire.codec import decode_json as decode_json
    from a2a_wire.codec import encode as encode
    from a2a_wire.codec import encode_json as encode_json
    from a2a_wire.errors import DecodeError as DecodeError
    from a2a_wire.errors import WireError as WireError

_EXPORTS = {
    "decode": "a2a_wire.codec",
    "decode_json": "a2a_wire.codec",
    "encode": "a2a_wire.codec",
    "encode_json": "a2a_wire.codec",
    "DecodeError": "a2a_wire.errors",
    "WireError": "a2a_wire.errors",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'a2a_wire' has no attribute {name!r}")
