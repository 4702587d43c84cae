"""Tests for messages, parts and files."""

from __future__ import annotations

import pytest

from a2a_wire.codec import decode, decode_file, decode_part, encode
from a2a_wire.enums import MessageRole
from a2a_wire.errors import NoMatchingVariantError, UnknownDiscriminatorError
from a2a_wire.models.message import (
    Artifact,
    DataPart,
    FilePart,
    FileWithBytes,
    FileWithUri,
    Message,
    TextPart,
)


class TestFileWith:
    def test_bytes_only(self) -> None:
        file = decode_file({"bytes": "aGk=", "mimeType": "text/plain"})
        assert isinstance(file, FileWithBytes)
        assert file.mime_type == "text/plain"

    def test_uri_only(self) -> None:
        file = decode_file({"uri": "https://example.com/a.pdf"})
        assert isinstance(file, FileWithUri)
        assert file.uri == "https://example.com/a.pdf"

    def test_bytes_wins_over_uri(self) -> None:
        file = decode_file({"bytes": "aGk=", "uri": "https://example.com/a"})
        assert isinstance(file, FileWithBytes)
        assert "uri" not in encode(file)

    def test_neither_present(self) -> None:
        with pytest.raises(NoMatchingVariantError) as exc_info:
            decode_file({"name": "a.txt"})
        assert exc_info.value.variants == ("bytes", "uri")

    def test_encode_has_no_tag(self) -> None:
        part = FilePart(file=FileWithUri(uri="https://example.com/x", name="x"))
        assert encode(part) == {
            "kind": "file",
            "file": {"name": "x", "uri": "https://example.com/x"},
        }


class TestPart:
    def test_text(self) -> None:
        part = decode_part({"kind": "text", "text": "hello"})
        assert isinstance(part, TextPart)

    def test_data(self) -> None:
        part = decode_part({"kind": "data", "data": {"k": [1, 2]}, "metadata": {"m": 1}})
        assert isinstance(part, DataPart)
        assert part.data == {"k": [1, 2]}
        assert part.metadata == {"m": 1}

    def test_file(self) -> None:
        part = decode_part({"kind": "file", "file": {"uri": "https://example.com"}})
        assert isinstance(part, FilePart)
        assert isinstance(part.file, FileWithUri)

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownDiscriminatorError) as exc_info:
            decode_part({"kind": "video"})
        assert exc_info.value.tag_field == "kind"

    def test_text_part_wire_shape(self) -> None:
        assert encode(TextPart(text="hi")) == {"kind": "text", "text": "hi"}


class TestMessage:
    def test_decode(self) -> None:
        msg = decode(
            Message,
            {
                "role": "agent",
                "parts": [{"kind": "text", "text": "Hello "}, {"kind": "text", "text": "world"}],
                "messageId": "m1",
                "contextId": "c1",
                "kind": "message",
            },
        )
        assert msg.role is MessageRole.AGENT
        assert msg.text == "Hello world"
        assert msg.context_id == "c1"

    def test_unknown_role_falls_back(self) -> None:
        msg = decode(Message, {"role": "system", "parts": [], "messageId": "m1"})
        assert msg.role is MessageRole.USER

    def test_encode_minimal(self) -> None:
        msg = Message(message_id="m1", parts=[TextPart(text="hi")])
        assert encode(msg) == {
            "role": "user",
            "parts": [{"kind": "text", "text": "hi"}],
            "messageId": "m1",
            "kind": "message",
        }

    def test_reference_task_ids(self) -> None:
        msg = Message(message_id="m1", parts=[], reference_task_ids=["t0"])
        assert encode(msg)["referenceTaskIds"] == ["t0"]

    def test_round_trip(self) -> None:
        msg = Message(
            role=MessageRole.AGENT,
            message_id="m2",
            parts=[
                TextPart(text="see file"),
                FilePart(file=FileWithBytes(bytes="aGk=", name="hi.txt")),
                DataPart(data={"b": 1, "a": 2}),
            ],
            metadata={"trace": "x"},
        )
        assert decode(Message, encode(msg)) == msg


class TestArtifact:
    def test_round_trip(self) -> None:
        artifact = Artifact(
            artifact_id="a1", name="report", parts=[TextPart(text="done")]
        )
        wire = encode(artifact)
        assert wire == {
            "artifactId": "a1",
            "name": "report",
            "parts": [{"kind": "text", "text": "done"}],
        }
        assert decode(Artifact, wire) == artifact
