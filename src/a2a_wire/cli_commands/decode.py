"""``a2a-wire decode`` — decode and validate a payload file."""

from __future__ import annotations

import sys
from typing import Any

import click
from rich.markup import escape

from a2a_wire.cli_commands._output import console, print_decoded
from a2a_wire.codec import decode, decode_response
from a2a_wire.errors import WireError
from a2a_wire.loader import PayloadLoader
from a2a_wire.methods import JsonRpcMethod
from a2a_wire.models.agent_card import AgentCard
from a2a_wire.models.jsonrpc import JsonRpcRequest
from a2a_wire.models.message import FileWith, Message, Part
from a2a_wire.models.push import TaskPushNotificationConfig
from a2a_wire.models.security import SecurityScheme
from a2a_wire.models.task import ListTasksResult, StreamEvent, Task

DECODE_TARGETS: dict[str, Any] = {
    "agent-card": AgentCard,
    "message": Message,
    "task": Task,
    "part": Part,
    "file": FileWith,
    "security-scheme": SecurityScheme,
    "stream-event": StreamEvent,
    "list-tasks-result": ListTasksResult,
    "push-config": TaskPushNotificationConfig,
    "request": JsonRpcRequest,
    "response": None,
}


@click.command("decode")
@click.argument("payload_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--as",
    "target",
    type=click.Choice(sorted(DECODE_TARGETS)),
    required=True,
    help="Wire type to decode the payload as.",
)
@click.option(
    "--method",
    default=None,
    help="For responses: the JSON-RPC method whose result type to expect.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the canonical re-encoded JSON.")
def decode_cmd(payload_file: str, target: str, method: str | None, as_json: bool) -> None:
    """Decode PAYLOAD_FILE as an A2A wire type.

    PAYLOAD_FILE is a JSON (or YAML) document.  Decoding failures exit with
    status 1.
    """
    if method is not None and JsonRpcMethod.lookup(method) is None:
        console.print(f"[yellow]Unknown method {method!r}; result left untyped.[/yellow]")

    try:
        data = PayloadLoader(payload_file).load()
        if target == "response":
            value = decode_response(method or "", data)
        else:
            value = decode(DECODE_TARGETS[target], data)
    except WireError as exc:
        console.print(f"[red]Decode error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_decoded(value, as_json=as_json)
