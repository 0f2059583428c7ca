"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("linproj")
    except PackageNotFoundError:
        return "0.0.0"


def _add_edit_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    edit_parser = subparsers.add_parser("edit", help="Edit an existing issue")
    edit_parser.add_argument("identifier", help="Issue identifier (e.g., PROJ-123)")
    edit_parser.add_argument("--title", help="New title")
    edit_parser.add_argument("--state", help="New state name")
    edit_parser.add_argument("--priority", help="Priority: urgent, high, medium, low, or none")
    edit_parser.add_argument("--assignee", help='Assignee: email, "me", or "none"')
    edit_parser.add_argument(
        "--label",
        action="append",
        default=None,
        help='Set labels (repeatable, replaces all; --label "" clears them)',
    )
    edit_parser.add_argument("--project", help='Project name or "none"')
    edit_parser.add_argument("--team", help="Move to team (team key)")
    edit_parser.add_argument("--due-date", dest="due_date", help='Due date (YYYY-MM-DD) or "none"')
    edit_parser.add_argument("--estimate", help="Story points estimate")
    edit_parser.add_argument("--interactive", "-i", action="store_true", help="Open in editor")
    edit_parser.add_argument("--recover", metavar="FILE", help="Recover from a previous failed edit")
    edit_parser.add_argument("--json", dest="json_output", action="store_true", help="Output as JSON")
    edit_parser.add_argument("--quiet", action="store_true", help="Suppress output on success")
    edit_parser.add_argument("--workspace", default=None, help="Workspace name to use instead of the current one")
    edit_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linproj")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    issues_parser = subparsers.add_parser("issues", help="Issue operations")
    issues_subparsers = issues_parser.add_subparsers(dest="issues_command", required=True)
    _add_edit_parser(issues_subparsers)

    return parser


__all__ = ["build_parser"]
