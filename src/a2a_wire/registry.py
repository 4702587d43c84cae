"""Error registry — protocol error kinds and their JSON-RPC codes.

Standard JSON-RPC errors occupy -32700..-32603; A2A-specific errors use the
implementation-defined server range starting at -32000.  ``kind_of`` never
fails: a code outside the registry maps to
:attr:`ErrorKind.UNKNOWN_ERROR_ENCOUNTERED`.
"""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class ErrorKind(IntEnum):
    """A protocol-level error, valued by its JSON-RPC code."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    TASK_NOT_FOUND = -32001
    TASK_NOT_CANCELABLE = -32002
    PUSH_NOTIFICATION_NOT_SUPPORTED = -32003
    UNSUPPORTED_OPERATION = -32004
    CONTENT_TYPE_NOT_SUPPORTED = -32005
    INVALID_AGENT_RESPONSE = -32006
    AUTHENTICATED_EXTENDED_CARD_NOT_CONFIGURED = -32007
    UNKNOWN_ERROR_ENCOUNTERED = -32000

    @classmethod
    def _missing_(cls, value: object) -> ErrorKind:
        logger.debug("unregistered error code %r", value)
        return cls.UNKNOWN_ERROR_ENCOUNTERED

    @property
    def code(self) -> int:
        return int(self)

    @property
    def description(self) -> str:
        """Fixed human-readable description of this kind."""
        return _DESCRIPTIONS[self]

    @property
    def is_standard(self) -> bool:
        """True for the errors defined by JSON-RPC 2.0 itself."""
        return ErrorKind.PARSE_ERROR <= self <= ErrorKind.INVALID_REQUEST


_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.PARSE_ERROR: "Server received JSON that was not well-formed.",
    ErrorKind.INVALID_REQUEST: (
        "The JSON payload was valid JSON, but not a valid JSON-RPC Request object."
    ),
    ErrorKind.METHOD_NOT_FOUND: (
        "The requested A2A RPC method (e.g., `tasks/foo`) does not exist or is not supported."
    ),
    ErrorKind.INVALID_PARAMS: (
        "The params provided for the method are invalid "
        "(e.g., wrong type, missing required field)."
    ),
    ErrorKind.INTERNAL_ERROR: "An unexpected error occurred on the server during processing.",
    ErrorKind.TASK_NOT_FOUND: (
        "The specified task id does not correspond to an existing or active task. "
        "It might be invalid, expired, or already completed and purged."
    ),
    ErrorKind.TASK_NOT_CANCELABLE: (
        "An attempt was made to cancel a task that is not in a cancelable state "
        "(e.g., it has already reached a terminal state like completed, failed, or canceled)."
    ),
    ErrorKind.PUSH_NOTIFICATION_NOT_SUPPORTED: (
        "Client attempted to use push notification features "
        "(e.g., tasks/pushNotificationConfig/set) but the server agent does not support them "
        "(i.e., AgentCard.capabilities.pushNotifications is false)."
    ),
    ErrorKind.UNSUPPORTED_OPERATION: (
        "The requested operation or a specific aspect of it (perhaps implied by parameters) "
        "is not supported by this server agent implementation. "
        "Broader than just method not found."
    ),
    ErrorKind.CONTENT_TYPE_NOT_SUPPORTED: (
        "A Media Type provided in the request's message.parts (or implied for an artifact) "
        "is not supported by the agent or the specific skill being invoked."
    ),
    ErrorKind.INVALID_AGENT_RESPONSE: (
        "Agent generated an invalid response for the requested method"
    ),
    ErrorKind.AUTHENTICATED_EXTENDED_CARD_NOT_CONFIGURED: (
        "The agent does not have an Authenticated Extended Card configured."
    ),
    ErrorKind.UNKNOWN_ERROR_ENCOUNTERED: (
        "An unknown error was parsed. "
        "If this error is valid then open an issue on the repository"
    ),
}


def code_of(kind: ErrorKind) -> int:
    """Return the JSON-RPC code for *kind*."""
    return kind.code


def kind_of(code: int) -> ErrorKind:
    """Return the kind registered for *code*, or the unknown-error sentinel."""
    return ErrorKind(code)


def describe(code: int) -> str:
    """Return the fixed description for *code*."""
    return kind_of(code).description
