"""Cross-team constraints for moving an issue between teams."""

from __future__ import annotations

import logging

from linproj.contracts.edit import EditFields
from linproj.contracts.exceptions import TeamMoveError
from linproj.contracts.issue import Issue
from linproj.contracts.provider import Provider
from linproj.edit.resolve import resolve_team

_LOG = logging.getLogger(__name__)


def is_team_move(issue: Issue, fields: EditFields) -> bool:
    target = fields.get("team")
    if target is None:
        return False
    current = issue.team.key if issue.team is not None else ""
    return target.lower() != current.lower()


async def validate_team_move(provider: Provider, issue: Issue, fields: EditFields) -> str | None:
    """Check that *issue* can keep its state and labels in the target team.

    A new ``state`` or ``labels`` value in *fields* replaces the current one, so
    the matching check is skipped. Returns the target team ID, or ``None`` when
    *fields* does not move the issue.

    Raises:
        ResolutionError: If the target team does not exist.
        TeamMoveError: If the current state or a current label is missing in
            the target team.
    """
    if not is_team_move(issue, fields):
        return None

    target_key = fields["team"]
    team_id = await resolve_team(provider, target_key)
    _LOG.debug("Validating move of %s to team %s", issue.identifier, target_key)

    if "state" not in fields:
        states = await provider.get_workflow_states(team_id)
        state_names = [state.name for state in states]
        if issue.state.name.lower() not in {name.lower() for name in state_names}:
            raise TeamMoveError(
                f"State '{issue.state.name}' does not exist in team '{target_key}'. "
                f"Available: {', '.join(state_names)}",
                missing=issue.state.name,
                available=state_names,
            )

    if "labels" not in fields and issue.labels:
        labels = await provider.get_labels(team_id)
        label_names = [label.name for label in labels]
        known = {name.lower() for name in label_names}
        for current in issue.label_names:
            if current.lower() not in known:
                raise TeamMoveError(
                    f"Label '{current}' does not exist in team '{target_key}'. "
                    f"Available: {', '.join(label_names)}",
                    missing=current,
                    available=label_names,
                )

    return team_id
