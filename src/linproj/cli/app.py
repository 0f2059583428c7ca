"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import asyncio
import logging
import sys

from linproj.cli.commands.edit import run_edit
from linproj.cli.common import print_error
from linproj.cli.parser import build_parser
from linproj.contracts.exceptions import LinprojError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    if args.command == "issues" and args.issues_command == "edit":
        try:
            return asyncio.run(run_edit(args))
        except LinprojError as exc:
            print_error(str(exc))
            return 1
        except KeyboardInterrupt:
            return 130

    print_error(f"unsupported command: {args.command}")  # pragma: no cover
    return 2  # pragma: no cover


__all__ = ["main"]
