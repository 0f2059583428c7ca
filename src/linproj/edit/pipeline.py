"""Issue edit pipeline: pick the input source, reconcile, apply."""

from __future__ import annotations

import logging
import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from linproj.contracts.edit import (
    EditCancelled,
    EditFailure,
    EditFields,
    EditNoChanges,
    EditOptions,
    EditResult,
    EditSuccess,
)
from linproj.contracts.exceptions import (
    EditValidationError,
    FrontmatterError,
    InputConflictError,
    LinprojError,
)
from linproj.contracts.issue import Issue
from linproj.contracts.provider import Provider
from linproj.edit.changeset import build_update_input
from linproj.edit.editor import open_editor
from linproj.edit.frontmatter import parse_frontmatter, render_frontmatter, validate_field
from linproj.edit.progress import APPLY_PHASE, RESOLVE_PHASE, EditProgress, NullEditProgress
from linproj.edit.recovery import RecoveryStore
from linproj.edit.terminal import has_piped_input, is_interactive, read_stdin

_LOG = logging.getLogger(__name__)

EditorFn = Callable[[str, str], Awaitable[str]]

NO_CHANGES_MESSAGE = "No changes specified. Use flags (--title, --state, etc.) or pipe input via stdin"
STDIN_CONFLICT_MESSAGE = "Cannot combine stdin input with mutation flags."
RECOVER_CONFLICT_MESSAGE = "Cannot combine flags with --recover."


@dataclass
class EditDeps:
    """I/O primitives used by :func:`execute_edit`.

    Defaults talk to the real process; tests inject their own.
    """

    open_editor: EditorFn = open_editor
    read_stdin: Callable[[], Awaitable[str]] = read_stdin
    has_stdin_data: Callable[[], bool] = has_piped_input
    is_tty: bool = field(default_factory=is_interactive)
    recovery_store: RecoveryStore = field(default_factory=RecoveryStore)
    progress: EditProgress = field(default_factory=NullEditProgress)


def fields_from_options(options: EditOptions) -> EditFields:
    """Build edit fields from command-line flags.

    ``--label ""`` on its own clears every label.

    Raises:
        EditValidationError: If a flag value is malformed.
    """
    fields = EditFields()
    if options.title:
        fields["title"] = _validated("title", options.title)
    if options.state:
        fields["state"] = options.state
    if options.priority:
        fields["priority"] = _validated("priority", options.priority)
    if options.assignee:
        fields["assignee"] = options.assignee
    if options.label:
        fields["labels"] = [] if options.label == [""] else list(options.label)
    if options.project:
        fields["project"] = options.project
    if options.team:
        fields["team"] = options.team
    if options.due_date:
        fields["dueDate"] = _validated("dueDate", options.due_date)
    if options.estimate:
        fields["estimate"] = _parse_estimate(options.estimate)
    return fields


def _validated(key: str, value: str) -> str:
    try:
        return validate_field(key, value)
    except FrontmatterError as exc:
        raise EditValidationError(str(exc)) from exc


def _parse_estimate(value: str) -> float:
    try:
        estimate = float(value)
    except ValueError:
        estimate = math.nan
    if not math.isfinite(estimate):
        raise EditValidationError(f"Invalid estimate '{value}'. Must be a number")
    return int(estimate) if estimate.is_integer() else estimate


async def execute_edit(
    provider: Provider,
    identifier: str,
    issue: Issue,
    options: EditOptions,
    deps: EditDeps | None = None,
) -> EditResult:
    """Run one edit of *issue* and report the outcome as a result variant.

    Input comes from exactly one source, in priority order: a recovery file,
    piped stdin, the interactive editor, or mutation flags. Once raw input has
    been obtained, any later failure saves it to a recovery file whose path is
    returned with the failure. Errors never propagate out of this function;
    every one of them becomes an :class:`EditFailure`.
    """
    deps = deps if deps is not None else EditDeps()
    has_flags = options.has_mutation_flags()
    has_recover = bool(options.recover)
    has_stdin = not options.interactive and not has_recover and deps.has_stdin_data()
    raw_input: str | None = None
    fields = EditFields()

    try:
        if has_recover and has_flags:
            raise InputConflictError(RECOVER_CONFLICT_MESSAGE)
        if has_stdin and has_flags:
            raise InputConflictError(STDIN_CONFLICT_MESSAGE)

        if has_recover:
            seed = deps.recovery_store.load(options.recover or "")
            edited = await deps.open_editor(seed, identifier)
            if not edited.strip():
                return EditCancelled()
            raw_input = edited
        elif has_stdin:
            raw_input = await deps.read_stdin()
        elif options.interactive or (not has_flags and deps.is_tty):
            original = render_frontmatter(issue)
            edited = await deps.open_editor(original, identifier)
            if not edited.strip() or edited == original:
                return EditCancelled()
            raw_input = edited
        elif has_flags:
            fields = fields_from_options(options)
        else:
            return EditFailure(error=NO_CHANGES_MESSAGE)
    except LinprojError as exc:
        _LOG.debug("Edit input rejected: %s", exc)
        return EditFailure(error=str(exc))
    except Exception as exc:
        _LOG.debug("Reading edit input failed", exc_info=True)
        return EditFailure(error=_describe(exc))

    phase: str | None = None
    try:
        description: str | None = None
        if raw_input is not None:
            parsed = parse_frontmatter(raw_input)
            fields, description = parsed.fields, parsed.description

        phase = RESOLVE_PHASE
        deps.progress.phase_start(phase)
        change_set = await build_update_input(provider, issue, fields, description)
        deps.progress.phase_done(phase)
        phase = None

        if change_set.input.is_empty():
            return EditNoChanges()

        phase = APPLY_PHASE
        deps.progress.phase_start(phase)
        updated = await provider.update_issue(issue.id, change_set.input)
        deps.progress.phase_done(phase)
    except LinprojError as exc:
        if phase is not None:
            deps.progress.phase_error(phase, exc)
        return EditFailure(error=str(exc), recovery_path=_save_recovery(deps, identifier, raw_input))
    except Exception as exc:
        _LOG.debug("Edit failed unexpectedly", exc_info=True)
        if phase is not None:
            deps.progress.phase_error(phase, exc)
        return EditFailure(error=_describe(exc), recovery_path=_save_recovery(deps, identifier, raw_input))

    return EditSuccess(issue=updated, changes=change_set.changes)


def _save_recovery(deps: EditDeps, identifier: str, raw_input: str | None) -> str | None:
    if raw_input is None:
        return None
    try:
        path: Path = deps.recovery_store.save(identifier, raw_input)
    except OSError as exc:
        _LOG.warning("Could not write recovery file: %s", exc)
        return None
    return str(path)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__
