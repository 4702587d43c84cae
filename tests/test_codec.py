"""Tests for the public encode/decode API."""

from __future__ import annotations

import json

import pytest

from a2a_wire.codec import (
    decode,
    decode_json,
    decode_params,
    decode_response,
    encode,
    encode_json,
)
from a2a_wire.errors import DecodeError, MalformedValueError, MissingFieldError
from a2a_wire.methods import JsonRpcMethod
from a2a_wire.models.jsonrpc import JsonRpcRequest
from a2a_wire.models.message import Message
from a2a_wire.models.push import TaskPushNotificationConfig
from a2a_wire.models.task import (
    ListTasksResult,
    MessageSendParams,
    Task,
    TaskQueryParams,
    TaskStatusUpdateEvent,
)

_TASK = {"id": "t1", "contextId": "c1", "status": {"state": "working"}, "kind": "task"}


class TestEncode:
    def test_encode_uses_wire_names(self) -> None:
        assert encode(TaskQueryParams(id="t", history_length=1)) == {
            "id": "t",
            "historyLength": 1,
        }

    def test_encode_json_compact(self) -> None:
        assert encode_json(TaskQueryParams(id="t")) == '{"id":"t"}'

    def test_encode_json_indent(self) -> None:
        assert encode_json(TaskQueryParams(id="t"), indent=2) == '{\n  "id": "t"\n}'


class TestDecode:
    def test_decode_model(self) -> None:
        assert isinstance(decode(Task, _TASK), Task)

    def test_decode_typing_form(self) -> None:
        tasks = decode(list[Task], [_TASK, _TASK])
        assert [t.id for t in tasks] == ["t1", "t1"]

    def test_decode_json_text(self) -> None:
        task = decode_json(Task, b'{"id":"t1","contextId":"c1","status":{"state":"working"}}')
        assert task.kind == "task"

    def test_invalid_json_text(self) -> None:
        with pytest.raises(DecodeError):
            decode_json(Task, "{not json")

    def test_wrong_type(self) -> None:
        with pytest.raises(MalformedValueError) as exc_info:
            decode(Task, {**_TASK, "id": ["t1"]})
        assert exc_info.value.field == "id"

    def test_error_chains_validation_error(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode(Task, {"id": "t1"})
        assert exc_info.value.__cause__ is not None


class TestDecodeParams:
    def test_known_method(self) -> None:
        req = JsonRpcRequest(
            method="message/send",
            params={"message": {"messageId": "m1", "parts": [{"kind": "text", "text": "hi"}]}},
            id=1,
        )
        params = decode_params(req)
        assert isinstance(params, MessageSendParams)
        assert isinstance(params.message, Message)

    def test_unknown_method_returns_raw(self) -> None:
        req = JsonRpcRequest(method="tasks/foo", params={"x": 1})
        assert decode_params(req) == {"x": 1}

    def test_method_without_params(self) -> None:
        req = JsonRpcRequest(method="agent/getAuthenticatedExtendedCard", id=1)
        assert decode_params(req) is None

    def test_invalid_params(self) -> None:
        req = JsonRpcRequest(method="tasks/get", params={"historyLength": 2})
        with pytest.raises(MissingFieldError):
            decode_params(req)


class TestDecodeResponse:
    def test_tasks_get(self) -> None:
        resp = decode_response(
            JsonRpcMethod.TASKS_GET, {"jsonrpc": "2.0", "id": 1, "result": _TASK}
        )
        assert isinstance(resp.result, Task)

    def test_by_method_name(self) -> None:
        resp = decode_response(
            "tasks/list",
            {
                "jsonrpc": "2.0",
                "id": 1,
                "result": {"tasks": [_TASK], "totalSize": 1, "pageSize": 10},
            },
        )
        assert isinstance(resp.result, ListTasksResult)
        assert resp.result.next_page_token == ""

    def test_stream_item(self) -> None:
        event = {
            "kind": "status-update",
            "taskId": "t1",
            "contextId": "c1",
            "status": {"state": "completed"},
            "final": True,
        }
        resp = decode_response("message/stream", {"jsonrpc": "2.0", "id": 1, "result": event})
        assert isinstance(resp.result, TaskStatusUpdateEvent)

    def test_list_push_configs(self) -> None:
        config = {"taskId": "t1", "pushNotificationConfig": {"url": "https://cb.example.com"}}
        resp = decode_response(
            JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_LIST,
            json.dumps({"jsonrpc": "2.0", "id": 1, "result": [config]}),
        )
        assert resp.result == [decode(TaskPushNotificationConfig, config)]

    def test_delete_has_null_result(self) -> None:
        resp = decode_response(
            "tasks/pushNotificationConfig/delete", {"jsonrpc": "2.0", "id": 1, "result": None}
        )
        assert not resp.is_error
        assert resp.result is None

    def test_error_response(self) -> None:
        resp = decode_response(
            "tasks/cancel",
            {"jsonrpc": "2.0", "id": 1, "error": {"code": -32002, "message": "no"}},
        )
        assert resp.is_error
        assert resp.error.code == -32002

    def test_unknown_method_untyped(self) -> None:
        resp = decode_response("x/y", {"jsonrpc": "2.0", "result": {"a": 1}})
        assert resp.result == {"a": 1}
