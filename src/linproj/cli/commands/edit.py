"""Edit command runner and output formatting."""

from __future__ import annotations

import argparse
import json
import sys

from linproj.auth import create_token_resolver
from linproj.cli.common import print_error, stderr_is_terminal
from linproj.cli.progress.rich import RichEditProgress
from linproj.contracts.edit import (
    Changes,
    EditCancelled,
    EditFailure,
    EditNoChanges,
    EditOptions,
    EditResult,
    EditSuccess,
)
from linproj.edit.pipeline import EditDeps, execute_edit
from linproj.providers.linear import LinearProvider


def options_from_args(args: argparse.Namespace) -> EditOptions:
    return EditOptions(
        title=args.title,
        state=args.state,
        priority=args.priority,
        assignee=args.assignee,
        label=args.label,
        project=args.project,
        team=args.team,
        due_date=args.due_date,
        estimate=args.estimate,
        interactive=args.interactive,
        recover=args.recover,
        json_output=args.json_output,
        quiet=args.quiet,
    )


def format_changes(identifier: str, url: str, changes: Changes) -> str:
    lines = [f"Updated {identifier}", ""]
    for field_name, change in changes.items():
        lines.append(f"  {field_name}: {change.to} (was: {change.from_})")
    lines.append("")
    lines.append(url)
    return "\n".join(lines)


def format_json_result(result: EditSuccess) -> str:
    payload = {
        "success": True,
        "issue": result.issue.model_dump(mode="json", by_alias=True),
        "changes": {name: change.model_dump(mode="json", by_alias=True) for name, change in result.changes.items()},
    }
    return json.dumps(payload, indent=2)


def format_recovery_instructions(identifier: str, recovery_path: str) -> str:
    return "\n".join(
        [
            "",
            "Your input has been saved. To retry:",
            f"  linproj issues edit {identifier} --recover {recovery_path}",
        ]
    )


def report_result(identifier: str, result: EditResult, options: EditOptions) -> int:
    """Print *result* and return the process exit code."""
    if isinstance(result, EditFailure):
        print_error(result.error)
        if result.recovery_path:
            print(format_recovery_instructions(identifier, result.recovery_path), file=sys.stderr)
        return 1

    if isinstance(result, EditCancelled):
        print("Edit cancelled, no changes made")
        return 0

    if isinstance(result, EditNoChanges):
        if not options.quiet:
            print("No changes to apply")
        return 0

    if options.quiet:
        return 0
    if options.json_output:
        print(format_json_result(result))
    else:
        print(format_changes(result.issue.identifier, result.issue.url, result.changes))
    return 0


async def run_edit(args: argparse.Namespace) -> int:
    options = options_from_args(args)
    resolver = create_token_resolver(workspace=args.workspace)
    auth = await resolver.resolve()

    show_progress = not (args.verbose or options.json_output or options.quiet) and stderr_is_terminal()

    async with LinearProvider(auth=auth) as provider:
        issue = await provider.get_issue(args.identifier)
        if issue is None:
            print_error(f"Issue '{args.identifier}' not found")
            return 1

        if show_progress:
            with RichEditProgress() as progress:
                result = await execute_edit(provider, args.identifier, issue, options, EditDeps(progress=progress))
        else:
            result = await execute_edit(provider, args.identifier, issue, options)

    return report_result(args.identifier, result, options)


__all__ = ["format_changes", "format_json_result", "options_from_args", "report_result", "run_edit"]
