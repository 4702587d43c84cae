"""Tests for push notification records."""

from __future__ import annotations

import pytest

from a2a_wire.codec import decode, encode
from a2a_wire.errors import MissingFieldError
from a2a_wire.models.push import (
    PushNotificationAuthenticationInfo,
    PushNotificationConfig,
    TaskPushNotificationConfig,
)
from a2a_wire.models.task import (
    DeleteTaskPushNotificationConfigParams,
    GetTaskPushNotificationConfigParams,
    TaskIdParams,
)


class TestTaskPushNotificationConfig:
    def test_wire_shape(self) -> None:
        config = TaskPushNotificationConfig(
            task_id="t1",
            push_notification_config=PushNotificationConfig(
                id="cfg-1",
                url="https://cb.example.com/hook",
                authentication=PushNotificationAuthenticationInfo(schemes=["Bearer"]),
            ),
        )
        assert encode(config) == {
            "taskId": "t1",
            "pushNotificationConfig": {
                "id": "cfg-1",
                "url": "https://cb.example.com/hook",
                "authentication": {"schemes": ["Bearer"]},
            },
        }

    def test_decode(self) -> None:
        config = decode(
            TaskPushNotificationConfig,
            {
                "taskId": "t1",
                "pushNotificationConfig": {"url": "https://cb.example.com", "token": "tok"},
            },
        )
        assert config.push_notification_config.token == "tok"
        assert config.push_notification_config.id is None

    def test_url_required(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode(TaskPushNotificationConfig, {"taskId": "t1", "pushNotificationConfig": {}})
        assert exc_info.value.field == "pushNotificationConfig.url"


class TestPushConfigParams:
    def test_get_params_optional_id(self) -> None:
        params = decode(GetTaskPushNotificationConfigParams, {"id": "t1"})
        assert isinstance(params, TaskIdParams)
        assert encode(params) == {"id": "t1"}

    def test_delete_params_require_config_id(self) -> None:
        with pytest.raises(MissingFieldError):
            decode(DeleteTaskPushNotificationConfigParams, {"id": "t1"})

        params = decode(
            DeleteTaskPushNotificationConfigParams,
            {"id": "t1", "pushNotificationConfigId": "cfg-1"},
        )
        assert params.push_notification_config_id == "cfg-1"
