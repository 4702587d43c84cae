"""``a2a-wire codes`` — list the protocol error registry."""

from __future__ import annotations

import click

from a2a_wire.cli_commands._output import print_codes_table
from a2a_wire.registry import ErrorKind


@click.command("codes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def codes(as_json: bool) -> None:
    """List every registered error kind with its JSON-RPC code."""
    print_codes_table(list(ErrorKind), as_json=as_json)
