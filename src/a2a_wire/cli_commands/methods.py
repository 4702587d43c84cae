"""``a2a-wire methods`` — list the JSON-RPC method catalogue."""

from __future__ import annotations

import click

from a2a_wire.cli_commands._output import print_methods_table
from a2a_wire.methods import JsonRpcMethod


@click.command("methods")
@click.option("--streaming", is_flag=True, help="Only list streaming methods.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def methods(streaming: bool, as_json: bool) -> None:
    """List the A2A JSON-RPC methods with their params and result types."""
    selected = [m for m in JsonRpcMethod if m.is_streaming or not streaming]
    print_methods_table(selected, as_json=as_json)
