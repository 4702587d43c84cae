"""Subcommands of the ``a2a-wire`` CLI: ``decode``, ``codes`` and ``methods``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the payload decoder and the two catalogue listings to *cli*."""
    from a2a_wire.cli_commands.codes import codes
    from a2a_wire.cli_commands.decode import decode_cmd
    from a2a_wire.cli_commands.methods import methods

    for command in (decode_cmd, codes, methods):
        cli.add_command(command)
