"""Command-line entrypoint for inspecting A2A wire payloads.

Installed as the ``a2a-wire`` console script.  Subcommands live in
:mod:`a2a_wire.cli_commands`.
"""

from __future__ import annotations

import click

from a2a_wire import __version__


@click.group()
@click.version_option(version=__version__, prog_name="a2a-wire")
def main() -> None:
    """Decode A2A payloads and browse the error codes and method catalogue."""


from a2a_wire.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
