"""Method catalogue — the A2A JSON-RPC method names and their payload types.

Method names are opaque strings on the wire; dispatching them is the host
application's job.  The catalogue only tells a caller which params and result
types to decode for a known name.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from a2a_wire.models.agent_card import AgentCard
from a2a_wire.models.push import TaskPushNotificationConfig
from a2a_wire.models.task import (
    DeleteTaskPushNotificationConfigParams,
    GetTaskPushNotificationConfigParams,
    ListTaskPushNotificationConfigParams,
    ListTasksParams,
    ListTasksResult,
    MessageSendParams,
    SendMessageResult,
    StreamEvent,
    Task,
    TaskIdParams,
    TaskQueryParams,
)


class JsonRpcMethod(str, Enum):
    """A method defined by the A2A protocol."""

    MESSAGE_SEND = "message/send"
    MESSAGE_STREAM = "message/stream"
    TASKS_GET = "tasks/get"
    TASKS_STREAM = "tasks/stream"
    TASKS_LIST = "tasks/list"
    TASKS_CANCEL = "tasks/cancel"
    TASKS_PUSH_NOTIFICATION_CONFIG_SET = "tasks/pushNotificationConfig/set"
    TASKS_PUSH_NOTIFICATION_CONFIG_GET = "tasks/pushNotificationConfig/get"
    TASKS_PUSH_NOTIFICATION_CONFIG_LIST = "tasks/pushNotificationConfig/list"
    TASKS_PUSH_NOTIFICATION_CONFIG_DELETE = "tasks/pushNotificationConfig/delete"
    TASKS_RESUBSCRIBE = "tasks/resubscribe"
    AGENT_GET_AUTHENTICATED_EXTENDED_CARD = "agent/getAuthenticatedExtendedCard"

    @classmethod
    def lookup(cls, name: str) -> JsonRpcMethod | None:
        """Return the member named *name*, or ``None`` for an unknown method."""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def params_type(self) -> Any:
        """Type of the request ``params`` (``None`` when the method takes none)."""
        return _PARAMS[self]

    @property
    def result_type(self) -> Any:
        """Type of one response ``result`` (one stream item for streaming methods)."""
        return _RESULTS[self]

    @property
    def is_streaming(self) -> bool:
        """True when the response is a stream of JSON-RPC responses."""
        return self in _STREAMING


_STREAMING = frozenset(
    {JsonRpcMethod.MESSAGE_STREAM, JsonRpcMethod.TASKS_STREAM, JsonRpcMethod.TASKS_RESUBSCRIBE}
)

_PARAMS: dict[JsonRpcMethod, Any] = {
    JsonRpcMethod.MESSAGE_SEND: MessageSendParams,
    JsonRpcMethod.MESSAGE_STREAM: MessageSendParams,
    JsonRpcMethod.TASKS_GET: TaskQueryParams,
    JsonRpcMethod.TASKS_STREAM: TaskIdParams,
    JsonRpcMethod.TASKS_LIST: ListTasksParams,
    JsonRpcMethod.TASKS_CANCEL: TaskIdParams,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_SET: TaskPushNotificationConfig,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_GET: GetTaskPushNotificationConfigParams,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_LIST: ListTaskPushNotificationConfigParams,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_DELETE: DeleteTaskPushNotificationConfigParams,
    JsonRpcMethod.TASKS_RESUBSCRIBE: TaskIdParams,
    JsonRpcMethod.AGENT_GET_AUTHENTICATED_EXTENDED_CARD: None,
}

_RESULTS: dict[JsonRpcMethod, Any] = {
    JsonRpcMethod.MESSAGE_SEND: SendMessageResult,
    JsonRpcMethod.MESSAGE_STREAM: StreamEvent,
    JsonRpcMethod.TASKS_GET: Task,
    JsonRpcMethod.TASKS_STREAM: StreamEvent,
    JsonRpcMethod.TASKS_LIST: ListTasksResult,
    JsonRpcMethod.TASKS_CANCEL: Task,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_SET: TaskPushNotificationConfig,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_GET: TaskPushNotificationConfig,
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_LIST: list[TaskPushNotificationConfig],
    JsonRpcMethod.TASKS_PUSH_NOTIFICATION_CONFIG_DELETE: None,
    JsonRpcMethod.TASKS_RESUBSCRIBE: StreamEvent,
    JsonRpcMethod.AGENT_GET_AUTHENTICATED_EXTENDED_CARD: AgentCard,
}
