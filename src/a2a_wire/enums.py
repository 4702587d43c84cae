"""Enum codec — closed enumerations and their wire tokens.

Encoding is exhaustive: every member has exactly one token (its ``value``).
Decoding is total: an unrecognised token falls back to a designated member
instead of failing the payload, so peers speaking a newer protocol revision
still decode.  The fallback lives in ``_missing_`` which pydantic also honours,
so field validation and direct construction behave identically.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class TransportProtocol(str, Enum):
    """Transport bound to an agent endpoint."""

    JSONRPC = "JSONRPC"
    GRPC = "GRPC"
    HTTP_JSON = "HTTP+JSON"

    @classmethod
    def _missing_(cls, value: object) -> TransportProtocol:
        logger.debug("unrecognised transport %r, using %s", value, cls.JSONRPC.value)
        return cls.JSONRPC


class TaskState(str, Enum):
    """Lifecycle state of a task."""

    SUBMITTED = "submitted"
    WORKING = "working"
    INPUT_REQUIRED = "input-required"
    COMPLETED = "completed"
    CANCELED = "canceled"
    FAILED = "failed"
    REJECTED = "rejected"
    AUTH_REQUIRED = "auth-required"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> TaskState:
        logger.debug("unrecognised task state %r, using %s", value, cls.UNKNOWN.value)
        return cls.UNKNOWN

    @property
    def is_terminal(self) -> bool:
        """True once the task can make no further progress."""
        return self in _TERMINAL_STATES

    @property
    def is_interrupted(self) -> bool:
        """True while the task is paused waiting on the client."""
        return self in (TaskState.INPUT_REQUIRED, TaskState.AUTH_REQUIRED)


_TERMINAL_STATES = frozenset(
    {TaskState.COMPLETED, TaskState.CANCELED, TaskState.FAILED, TaskState.REJECTED}
)


class MessageRole(str, Enum):
    """Sender of a message."""

    USER = "user"
    AGENT = "agent"

    @classmethod
    def _missing_(cls, value: object) -> MessageRole:
        logger.debug("unrecognised message role %r, using %s", value, cls.USER.value)
        return cls.USER


def to_wire(member: Enum) -> Any:
    """Return the wire token for *member*."""
    return member.value


def from_wire(enum_cls: type[E], token: Any) -> E:
    """Decode *token* into a member of *enum_cls*, falling back where defined."""
    return enum_cls(token)
