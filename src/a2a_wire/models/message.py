"""Messages, parts and artifacts.

``Part`` is tagged by ``kind``; the file a ``FilePart`` carries is an untagged
union told apart only by whether ``bytes`` or ``uri`` is present.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Discriminator, Tag

from a2a_wire.enums import MessageRole
from a2a_wire.models.base import JsonMap, WireModel
from a2a_wire.models.unions import UntaggedUnion, Variant

# ---------------------------------------------------------------------------
# File content
# ---------------------------------------------------------------------------


class FileBase(WireModel):
    """Properties shared by both file representations."""

    name: str | None = None
    mime_type: str | None = None


class FileWithBytes(FileBase):
    """A file inlined as base64-encoded content."""

    bytes: str


class FileWithUri(FileBase):
    """A file referenced by URI."""

    uri: str


FILE_WITH = UntaggedUnion(
    "FileWith",
    Variant("bytes", FileWithBytes, frozenset({"bytes"})),
    Variant("uri", FileWithUri, frozenset({"uri"})),
)

FileWith = Annotated[
    Annotated[FileWithBytes, Tag("bytes")] | Annotated[FileWithUri, Tag("uri")],
    FILE_WITH.discriminator(),
]


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------


class PartBase(WireModel):
    """Properties shared by every part."""

    metadata: JsonMap | None = None


class TextPart(PartBase):
    """A text segment."""

    kind: Literal["text"] = "text"
    text: str


class FilePart(PartBase):
    """A file segment."""

    kind: Literal["file"] = "file"
    file: FileWith


class DataPart(PartBase):
    """A structured JSON segment."""

    kind: Literal["data"] = "data"
    data: JsonMap


Part = Annotated[TextPart | FilePart | DataPart, Discriminator("kind")]


# ---------------------------------------------------------------------------
# Message and artifact
# ---------------------------------------------------------------------------


class Message(WireModel):
    """One conversational turn between a client and an agent."""

    role: MessageRole = MessageRole.USER
    parts: list[Part]
    metadata: JsonMap | None = None
    extensions: list[str] | None = None
    reference_task_ids: list[str] | None = None
    message_id: str
    task_id: str | None = None
    context_id: str | None = None
    kind: Literal["message"] = "message"

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "".join(part.text for part in self.parts if isinstance(part, TextPart))


class Artifact(WireModel):
    """An output produced by a task."""

    artifact_id: str
    name: str | None = None
    description: str | None = None
    parts: list[Part]
    metadata: JsonMap | None = None
    extensions: list[str] | None = None
