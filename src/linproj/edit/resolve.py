"""Resolve human-readable field values to Linear entity IDs."""

from __future__ import annotations

from collections.abc import Sequence

from linproj.contracts.exceptions import EditValidationError, ResolutionError
from linproj.contracts.provider import Provider
from linproj.edit.frontmatter import PRIORITY_VALUES

NONE_VALUE = "none"
ME_VALUE = "me"


def _available(names: Sequence[str]) -> str:
    return ", ".join(names)


async def resolve_team(provider: Provider, team_key: str) -> str:
    teams = await provider.get_teams()
    wanted = team_key.lower()
    for team in teams:
        if team.key.lower() == wanted:
            return team.id
    raise ResolutionError(f"Team '{team_key}' not found. Available: {_available([t.key for t in teams])}")


async def resolve_state(provider: Provider, team_id: str, state_name: str) -> str:
    states = await provider.get_workflow_states(team_id)
    wanted = state_name.lower()
    for state in states:
        if state.name.lower() == wanted:
            return state.id
    raise ResolutionError(f"State '{state_name}' not found. Available: {_available([s.name for s in states])}")


async def resolve_labels(provider: Provider, team_id: str, label_names: Sequence[str]) -> list[str]:
    if not label_names:
        return []

    labels = await provider.get_labels(team_id)
    by_name = {label.name.lower(): label.id for label in labels}
    label_ids: list[str] = []
    for name in label_names:
        label_id = by_name.get(name.lower())
        if label_id is None:
            raise ResolutionError(f"Label '{name}' not found. Available: {_available([label.name for label in labels])}")
        label_ids.append(label_id)
    return label_ids


async def resolve_assignee(provider: Provider, assignee: str) -> str | None:
    """Map ``none``/empty to ``None``, ``me`` to the viewer, anything else to a user by email."""
    if assignee in ("", NONE_VALUE):
        return None
    if assignee == ME_VALUE:
        viewer = await provider.get_viewer()
        return viewer.id
    user = await provider.get_user_by_email(assignee)
    if user is None:
        raise ResolutionError(f"User '{assignee}' not found")
    return user.id


async def resolve_project(provider: Provider, project_name: str) -> str | None:
    if project_name in ("", NONE_VALUE):
        return None
    projects = await provider.get_projects()
    wanted = project_name.lower()
    for project in projects:
        if project.name.lower() == wanted:
            return project.id
    raise ResolutionError(
        f"Project '{project_name}' not found. Available: {_available([p.name for p in projects])}"
    )


def resolve_priority(priority: str) -> int:
    lowered = priority.lower()
    if lowered not in PRIORITY_VALUES:
        raise EditValidationError(f"Invalid priority '{priority}'. Use: none, urgent, high, medium, low")
    return PRIORITY_VALUES[lowered]
