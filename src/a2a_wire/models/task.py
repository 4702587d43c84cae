"""Tasks, their status, streaming update events and task-level params."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Discriminator

from a2a_wire.enums import TaskState
from a2a_wire.models.base import JsonMap, WireModel
from a2a_wire.models.message import Artifact, Message
from a2a_wire.models.push import PushNotificationConfig

# ---------------------------------------------------------------------------
# Task and status
# ---------------------------------------------------------------------------


class TaskStatus(WireModel):
    """The current state of a task, with optional context."""

    state: TaskState
    message: Message | None = None
    timestamp: str | None = None


class Task(WireModel):
    """A unit of work tracked by an agent."""

    id: str
    context_id: str
    status: TaskStatus
    history: list[Message] | None = None
    artifacts: list[Artifact] | None = None
    metadata: JsonMap | None = None
    kind: Literal["task"] = "task"


# ---------------------------------------------------------------------------
# Streaming events
# ---------------------------------------------------------------------------


class TaskStatusUpdateEvent(WireModel):
    """A change in task status, sent while streaming."""

    task_id: str
    context_id: str
    kind: Literal["status-update"] = "status-update"
    status: TaskStatus
    final: bool
    metadata: JsonMap | None = None


class TaskArtifactUpdateEvent(WireModel):
    """A new or updated artifact (or chunk of one), sent while streaming."""

    task_id: str
    context_id: str
    kind: Literal["artifact-update"] = "artifact-update"
    artifact: Artifact
    append: bool | None = None
    last_chunk: bool | None = None
    metadata: JsonMap | None = None


StreamEvent = Annotated[
    Message | Task | TaskStatusUpdateEvent | TaskArtifactUpdateEvent,
    Discriminator("kind"),
]
"""One item of a ``message/stream``, ``tasks/stream`` or ``tasks/resubscribe`` stream."""

SendMessageResult = Annotated[Task | Message, Discriminator("kind")]
"""Result of ``message/send``."""


# ---------------------------------------------------------------------------
# Params and results
# ---------------------------------------------------------------------------


class TaskIdParams(WireModel):
    """Identifies a task; params of ``tasks/cancel`` and ``tasks/resubscribe``."""

    id: str
    metadata: JsonMap | None = None


class TaskQueryParams(TaskIdParams):
    """Params of ``tasks/get``."""

    history_length: int | None = None


class GetTaskPushNotificationConfigParams(TaskIdParams):
    push_notification_config_id: str | None = None


class ListTaskPushNotificationConfigParams(TaskIdParams):
    pass


class DeleteTaskPushNotificationConfigParams(TaskIdParams):
    push_notification_config_id: str


class MessageSendConfiguration(WireModel):
    """Options for ``message/send`` and ``message/stream``."""

    accepted_output_modes: list[str] | None = None
    history_length: int | None = None
    push_notification_config: PushNotificationConfig | None = None
    blocking: bool | None = None


class MessageSendParams(WireModel):
    """Params of ``message/send`` and ``message/stream``."""

    message: Message
    configuration: MessageSendConfiguration | None = None
    metadata: JsonMap | None = None


class ListTasksParams(WireModel):
    """Filter and pagination for ``tasks/list``.

    Range checks (``page_size`` within 1..100, non-negative
    ``history_length``) belong to the server, not to this record.
    """

    context_id: str | None = None
    status: TaskState | None = None
    page_size: int | None = None
    page_token: str | None = None
    history_length: int | None = None
    last_updated_after: int | None = None
    include_artifacts: bool | None = None
    metadata: JsonMap | None = None


def _empty_if_null(value: Any) -> Any:
    return "" if value is None else value


class ListTasksResult(WireModel):
    """One page of ``tasks/list`` results.

    ``next_page_token`` is always encoded; the empty string, never absence,
    marks the last page.
    """

    tasks: list[Task]
    total_size: int
    page_size: int
    next_page_token: Annotated[str, BeforeValidator(_empty_if_null)] = ""

    @property
    def has_more(self) -> bool:
        return self.next_page_token != ""
