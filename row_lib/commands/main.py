# -*- coding: utf-8 -*-
"""`row` command line dispatcher.

Sub-commands are discovered through the ``row_lib.actions`` entry point
group, so ``row polygon ...`` runs ``row_lib.commands.polygon:polygon``
with the remaining arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import entry_points

import row_lib

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    """Parse the sub-command name and hand the remaining arguments to it."""
    registered_commands = entry_points(group="row_lib.actions")

    parser = argparse.ArgumentParser(
        prog="row",
        description="Right-of-way corridor tools",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version: {row_lib.__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    parser.add_argument(
        "command",
        choices=sorted(registered_commands.names),
        help="Action to run",
    )
    parser.add_argument(
        "args",
        help=argparse.SUPPRESS,
        nargs=argparse.REMAINDER,
    )

    parsed_args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    command_fn = registered_commands[parsed_args.command].load()
    return command_fn(parsed_args.args)


if __name__ == "__main__":
    sys.exit(main())
