"""Wire records of the A2A protocol."""

from a2a_wire.models.agent_card import (
    AgentCapabilities,
    AgentCard,
    AgentCardSignature,
    AgentExtension,
    AgentInterface,
    AgentProvider,
    AgentSkill,
)
from a2a_wire.models.base import JsonMap, SortedMap, WireModel
from a2a_wire.models.jsonrpc import (
    JsonRpcErrorObject,
    JsonRpcFailure,
    JsonRpcId,
    JsonRpcPayload,
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcSuccess,
)
from a2a_wire.models.message import (
    Artifact,
    DataPart,
    FilePart,
    FileWith,
    FileWithBytes,
    FileWithUri,
    Message,
    Part,
    TextPart,
)
from a2a_wire.models.push import (
    PushNotificationAuthenticationInfo,
    PushNotificationConfig,
    TaskPushNotificationConfig,
)
from a2a_wire.models.security import (
    APIKeySecurityScheme,
    HTTPAuthSecurityScheme,
    MutualTLSSecurityScheme,
    OAuth2SecurityScheme,
    OAuthFlow,
    OAuthFlows,
    OpenIdConnectSecurityScheme,
    SecurityRequirement,
    SecurityScheme,
)
from a2a_wire.models.task import (
    DeleteTaskPushNotificationConfigParams,
    GetTaskPushNotificationConfigParams,
    ListTaskPushNotificationConfigParams,
    ListTasksParams,
    ListTasksResult,
    MessageSendConfiguration,
    MessageSendParams,
    SendMessageResult,
    StreamEvent,
    Task,
    TaskArtifactUpdateEvent,
    TaskIdParams,
    TaskQueryParams,
    TaskStatus,
    TaskStatusUpdateEvent,
)

__all__ = [
    "APIKeySecurityScheme",
    "AgentCapabilities",
    "AgentCard",
    "AgentCardSignature",
    "AgentExtension",
    "AgentInterface",
    "AgentProvider",
    "AgentSkill",
    "Artifact",
    "DataPart",
    "DeleteTaskPushNotificationConfigParams",
    "FilePart",
    "FileWith",
    "FileWithBytes",
    "FileWithUri",
    "GetTaskPushNotificationConfigParams",
    "HTTPAuthSecurityScheme",
    "JsonMap",
    "JsonRpcErrorObject",
    "JsonRpcFailure",
    "JsonRpcId",
    "JsonRpcPayload",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcSuccess",
    "ListTaskPushNotificationConfigParams",
    "ListTasksParams",
    "ListTasksResult",
    "Message",
    "MessageSendConfiguration",
    "MessageSendParams",
    "MutualTLSSecurityScheme",
    "OAuth2SecurityScheme",
    "OAuthFlow",
    "OAuthFlows",
    "OpenIdConnectSecurityScheme",
    "Part",
    "PushNotificationAuthenticationInfo",
    "PushNotificationConfig",
    "SecurityRequirement",
    "SecurityScheme",
    "SendMessageResult",
    "SortedMap",
    "StreamEvent",
    "Task",
    "TaskArtifactUpdateEvent",
    "TaskIdParams",
    "TaskPushNotificationConfig",
    "TaskQueryParams",
    "TaskStatus",
    "TaskStatusUpdateEvent",
    "TextPart",
    "WireModel",
]
