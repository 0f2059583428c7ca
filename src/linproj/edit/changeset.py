"""Build the issue update payload and its before/after diff."""

from __future__ import annotations

import logging
from typing import Any

from linproj.contracts.edit import ChangeSet, EditFields, FieldChange
from linproj.contracts.exceptions import EditValidationError
from linproj.contracts.issue import Issue, IssueUpdateInput
from linproj.contracts.provider import Provider
from linproj.edit.frontmatter import priority_name
from linproj.edit.resolve import (
    NONE_VALUE,
    resolve_assignee,
    resolve_labels,
    resolve_priority,
    resolve_project,
    resolve_state,
    resolve_team,
)
from linproj.edit.team_move import validate_team_move

_LOG = logging.getLogger(__name__)


def _display_priority(priority: int) -> str:
    return priority_name(priority).capitalize()


def _display_names(names: list[str]) -> str:
    return ", ".join(names) or NONE_VALUE


async def build_update_input(
    provider: Provider,
    issue: Issue,
    fields: EditFields,
    description: str | None = None,
) -> ChangeSet:
    """Reconcile requested *fields* and *description* against *issue*.

    Only values that differ from the snapshot end up in the payload, and every
    payload field has a matching entry in ``changes``. A team move is validated
    before anything else is resolved.

    Raises:
        EditValidationError: If the issue has no team.
        ResolutionError: If a name does not resolve, or the team move is rejected.
    """
    if issue.team is None:
        raise EditValidationError("Issue has no team")
    team_key = issue.team.key

    moved_to = await validate_team_move(provider, issue, fields)
    effective_team_id = moved_to

    async def effective_team() -> str:
        nonlocal effective_team_id
        if effective_team_id is None:
            effective_team_id = await resolve_team(provider, fields.get("team") or team_key)
        return effective_team_id

    payload: dict[str, Any] = {}
    changes: dict[str, FieldChange] = {}

    def record(field: str, key: str, value: Any, before: Any, after: Any) -> None:
        payload[key] = value
        changes[field] = FieldChange(**{"from": before, "to": after})

    if "title" in fields:
        title = fields["title"]
        if title != issue.title:
            record("title", "title", title, issue.title, title)

    if "state" in fields:
        state = fields["state"]
        state_id = await resolve_state(provider, await effective_team(), state)
        if state.lower() != issue.state.name.lower():
            record("state", "stateId", state_id, issue.state.name, state)

    if "priority" in fields:
        priority = resolve_priority(fields["priority"])
        if priority != issue.priority:
            record("priority", "priority", priority, _display_priority(issue.priority), _display_priority(priority))

    if "assignee" in fields:
        assignee = fields["assignee"]
        assignee_id = await resolve_assignee(provider, assignee)
        current_id = issue.assignee.id if issue.assignee is not None else None
        if assignee_id != current_id:
            before = issue.assignee.email if issue.assignee is not None else NONE_VALUE
            record("assignee", "assigneeId", assignee_id, before, assignee or NONE_VALUE)

    if "labels" in fields:
        labels = fields["labels"]
        label_ids = await resolve_labels(provider, await effective_team(), labels)
        current = issue.label_names
        if {name.lower() for name in labels} != {name.lower() for name in current}:
            record("labels", "labelIds", label_ids, _display_names(current), _display_names(labels))

    if "project" in fields:
        project = fields["project"]
        project_id = await resolve_project(provider, project)
        current_project = issue.project.name if issue.project is not None else None
        if project_id is None:
            changed = current_project is not None
        else:
            changed = current_project is None or project.lower() != current_project.lower()
        if changed:
            record("project", "projectId", project_id, current_project or NONE_VALUE, project or NONE_VALUE)

    if "team" in fields and moved_to is not None:
        record("team", "teamId", moved_to, issue.team.key, fields["team"])

    if "dueDate" in fields:
        due_date = fields["dueDate"]
        new_due = None if due_date == NONE_VALUE else due_date
        if new_due != issue.due_date:
            record("dueDate", "dueDate", new_due, issue.due_date or NONE_VALUE, due_date)

    if "estimate" in fields:
        estimate = fields["estimate"]
        if issue.estimate is None or float(estimate) != float(issue.estimate):
            before = issue.estimate if issue.estimate is not None else NONE_VALUE
            record("estimate", "estimate", estimate, before, estimate)

    if description is not None and description != (issue.description or ""):
        record(
            "description",
            "description",
            description,
            "(has description)" if issue.description else "(empty)",
            "(updated)" if description else "(cleared)",
        )

    _LOG.debug("Computed %d change(s) for %s", len(changes), issue.identifier)
    return ChangeSet(input=IssueUpdateInput.model_validate(payload), changes=changes)
