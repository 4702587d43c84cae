"""Push notification configuration records."""

from __future__ import annotations

from a2a_wire.models.base import WireModel


class PushNotificationAuthenticationInfo(WireModel):
    """How the server should authenticate to the client's webhook."""

    schemes: list[str]
    credentials: str | None = None


class PushNotificationConfig(WireModel):
    """A callback the server calls with task updates."""

    id: str | None = None
    url: str
    token: str | None = None
    authentication: PushNotificationAuthenticationInfo | None = None


class TaskPushNotificationConfig(WireModel):
    """A push notification config bound to a task.

    Params of ``tasks/pushNotificationConfig/set`` and result of its ``get``.
    """

    task_id: str
    push_notification_config: PushNotificationConfig

