"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, get_args, get_origin

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from a2a_wire.codec import encode, encode_json
from a2a_wire.models.jsonrpc import JsonRpcResponse
from a2a_wire.models.task import SendMessageResult, StreamEvent

if TYPE_CHECKING:
    from pydantic import BaseModel

    from a2a_wire.methods import JsonRpcMethod
    from a2a_wire.registry import ErrorKind

console = Console()

_NAMED_ALIASES = (("StreamEvent", StreamEvent), ("SendMessageResult", SendMessageResult))


def print_decoded(value: BaseModel, *, as_json: bool = False) -> None:
    """Print a decoded record as its canonical JSON or as a summary."""
    if as_json:
        console.print_json(encode_json(value))
        return

    console.print(f"\n[bold]{escape(type(value).__name__)}[/bold]")
    if isinstance(value, JsonRpcResponse):
        if value.error is not None:
            console.print(
                f"  Outcome: [red]error {value.error.code}[/red] "
                f"({escape(value.error.kind.description)})"
            )
        else:
            console.print("  Outcome: [green]success[/green]")

    for key, val in encode(value).items():
        console.print(f"  {key}: {escape(_truncate(json.dumps(val)))}")


def print_codes_table(kinds: list[ErrorKind], *, as_json: bool = False) -> None:
    """Pretty-print the error registry."""
    if as_json:
        rows = [
            {
                "code": k.code,
                "kind": k.name,
                "description": k.description,
                "standard": k.is_standard,
            }
            for k in kinds
        ]
        console.print_json(json.dumps(rows))
        return

    table = Table(title="A2A Error Codes")
    table.add_column("Code", style="cyan", justify="right")
    table.add_column("Kind")
    table.add_column("Description")
    table.add_column("Standard")

    for kind in kinds:
        table.add_row(
            str(kind.code),
            kind.name,
            _truncate(kind.description),
            "yes" if kind.is_standard else "-",
        )

    console.print(table)


def print_methods_table(methods: list[JsonRpcMethod], *, as_json: bool = False) -> None:
    """Pretty-print the method catalogue."""
    if as_json:
        rows = [
            {
                "method": m.value,
                "params": _type_name(m.params_type),
                "result": _type_name(m.result_type),
                "streaming": m.is_streaming,
            }
            for m in methods
        ]
        console.print_json(json.dumps(rows))
        return

    table = Table(title="A2A JSON-RPC Methods")
    table.add_column("Method", style="cyan")
    table.add_column("Params")
    table.add_column("Result")
    table.add_column("Streaming")

    for method in methods:
        table.add_row(
            method.value,
            _type_name(method.params_type),
            escape(_type_name(method.result_type)),
            "yes" if method.is_streaming else "-",
        )

    console.print(table)


def _type_name(tp: Any) -> str:
    if tp is None:
        return "-"
    for name, alias in _NAMED_ALIASES:
        if tp == alias:
            return name
    if get_origin(tp) is list:
        return f"list[{_type_name(get_args(tp)[0])}]"
    return getattr(tp, "__name__", repr(tp))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."

