"""Tests for untagged union variant selection."""

from __future__ import annotations

import pytest

from a2a_wire.codec import decode
from a2a_wire.errors import NoMatchingVariantError
from a2a_wire.models.jsonrpc import (
    JSON_RPC_PAYLOAD,
    JsonRpcErrorObject,
    JsonRpcFailure,
    JsonRpcResponse,
)
from a2a_wire.models.message import FILE_WITH, FilePart, FileWithBytes, FileWithUri, Message
from a2a_wire.models.task import Task


class TestUntaggedUnion:
    def test_declared_order(self) -> None:
        assert FILE_WITH.tags == ("bytes", "uri")
        assert JSON_RPC_PAYLOAD.tags == ("success", "failure")

    def test_first_match_wins(self) -> None:
        assert FILE_WITH.select({"bytes": "", "uri": ""}) == "bytes"
        assert FILE_WITH.select({"uri": ""}) == "uri"

    def test_presence_not_value(self) -> None:
        assert JSON_RPC_PAYLOAD.select({"result": None}) == "success"

    def test_no_match(self) -> None:
        assert FILE_WITH.select({"name": "a"}) is None
        assert FILE_WITH.select("not an object") is None

    def test_instances_select_by_type(self) -> None:
        assert FILE_WITH.select(FileWithUri(uri="u")) == "uri"
        failure = JsonRpcFailure(error=JsonRpcErrorObject(code=1, message="m"))
        assert JSON_RPC_PAYLOAD.select(failure) == "failure"


class TestUnionSchemas:
    def test_file_union_builds_inside_message(self) -> None:
        msg = decode(
            Message,
            {
                "parts": [{"kind": "file", "file": {"bytes": "aGk=", "uri": "https://f"}}],
                "messageId": "m1",
            },
        )
        assert isinstance(msg.parts[0].file, FileWithBytes)

    def test_payload_union_builds_for_typed_response(self) -> None:
        resp = decode(
            JsonRpcResponse[Task],
            {"jsonrpc": "2.0", "id": 1, "error": {"code": -32001, "message": "gone"}},
        )
        assert resp.is_error

    def test_no_match_reports_union_name(self) -> None:
        with pytest.raises(NoMatchingVariantError) as exc_info:
            decode(FilePart, {"kind": "file", "file": {"name": "a"}})
        assert exc_info.value.union == "FileWith"
        assert exc_info.value.field == "file"
