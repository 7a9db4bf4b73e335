"""envperm CLI.

    envperm check DUMMY 1              # export DUMMY=1 unless DUMMY is set
    envperm append PATH '$HOME/bin'    # export PATH="$HOME/bin:$PATH"
    envperm set DUMMY '"/something"'   # export DUMMY="/something"
"""

from __future__ import annotations

import argparse
import os
import sys

from .. import __version__
from ..config import Backend
from ..errors import EnvPermError
from ..persister import append, check_or_set, select_store, set as set_var


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envperm",
        description="Permanently set environment variables in your shell profile (or with setx on Windows)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    parser.add_argument(
        "--backend",
        choices=[b.value for b in Backend],
        default=None,
        help="Where to persist (default: from config, else by OS)",
    )

    subparsers = parser.add_subparsers(dest="command")

    check = subparsers.add_parser("check", help="Set NAME to VALUE only if NAME is not already set")
    check.add_argument("name")
    check.add_argument("value")

    set_cmd = subparsers.add_parser("set", help="Set NAME to VALUE without checking if it exists")
    set_cmd.add_argument("name")
    set_cmd.add_argument("value")

    append_cmd = subparsers.add_parser("append", help="Prefix VALUE onto NAME (e.g. PATH)")
    append_cmd.add_argument("name")
    append_cmd.add_argument("value")

    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.debug:
        os.environ["ENVPERM_DEBUG"] = "1"

    if not parsed.command:
        parser.print_help()
        return 1

    try:
        backend = Backend(parsed.backend) if parsed.backend else None
        store = select_store(backend)
        if parsed.command == "check":
            check_or_set(parsed.name, parsed.value, store=store)
        elif parsed.command == "set":
            set_var(parsed.name, parsed.value, store=store)
        elif parsed.command == "append":
            append(parsed.name, parsed.value, store=store)
    except EnvPermError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
