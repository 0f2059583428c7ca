from __future__ import annotations

import pytest

from linproj.contracts.edit import ChangeSet, EditFields
from linproj.contracts.exceptions import EditValidationError, ResolutionError, TeamMoveError
from linproj.contracts.issue import Issue
from linproj.edit.changeset import build_update_input
from tests.fakes.issues import make_issue
from tests.fakes.provider import FakeProvider


def _diff(change_set: ChangeSet) -> dict[str, tuple[object, object]]:
    return {name: (change.from_, change.to) for name, change in change_set.changes.items()}


@pytest.mark.asyncio
async def test_fields_equal_to_snapshot_produce_no_changes(provider: FakeProvider, issue: Issue) -> None:
    fields = EditFields(
        title="Fix login redirect",
        state="in progress",
        priority="high",
        assignee="alice@example.com",
        labels=["BACKEND", "bug"],
        project="apollo",
        team="eng",
    )

    change_set = await build_update_input(provider, issue, fields, "Users land on /home.")

    assert change_set.changes == {}
    assert change_set.input.is_empty()
    assert change_set.input.to_variables() == {}


@pytest.mark.asyncio
async def test_state_in_any_case_is_no_change(provider: FakeProvider) -> None:
    issue = make_issue(state={"name": "Backlog", "type": "backlog"})

    change_set = await build_update_input(provider, issue, EditFields(state="BACKLOG"))

    assert change_set.input.is_empty()


@pytest.mark.asyncio
async def test_changed_fields_are_in_payload_and_diff(provider: FakeProvider, issue: Issue) -> None:
    fields = EditFields(
        title="Fix login redirect for SSO",
        state="Done",
        priority="urgent",
        assignee="me",
        labels=["frontend"],
        project="Zephyr",
    )

    change_set = await build_update_input(provider, issue, fields, "New body")

    assert change_set.input.to_variables() == {
        "title": "Fix login redirect for SSO",
        "stateId": "eng-done",
        "priority": 1,
        "assigneeId": "user-bob",
        "labelIds": ["eng-frontend"],
        "projectId": "proj-zephyr",
        "description": "New body",
    }
    assert _diff(change_set) == {
        "title": ("Fix login redirect", "Fix login redirect for SSO"),
        "state": ("In Progress", "Done"),
        "priority": ("High", "Urgent"),
        "assignee": ("alice@example.com", "me"),
        "labels": ("bug, backend", "frontend"),
        "project": ("Apollo", "Zephyr"),
        "description": ("(has description)", "(updated)"),
    }


@pytest.mark.asyncio
async def test_payload_keys_match_diff_keys(provider: FakeProvider, issue: Issue) -> None:
    fields = EditFields(title="Fix login redirect", state="Done", priority="high", labels=[])

    change_set = await build_update_input(provider, issue, fields)

    assert set(change_set.changes) == {"state", "labels"}
    assert set(change_set.input.to_variables()) == {"stateId", "labelIds"}
    assert change_set.changes["labels"].to == "none"


@pytest.mark.asyncio
async def test_clearing_assignee_and_project_sends_nulls(provider: FakeProvider, issue: Issue) -> None:
    change_set = await build_update_input(provider, issue, EditFields(assignee="none", project="none"))

    assert change_set.input.to_variables() == {"assigneeId": None, "projectId": None}
    assert _diff(change_set) == {"assignee": ("alice@example.com", "none"), "project": ("Apollo", "none")}


@pytest.mark.asyncio
async def test_assigning_unassigned_issue(provider: FakeProvider) -> None:
    issue = make_issue(assignee=None, project=None)

    change_set = await build_update_input(
        provider, issue, EditFields(assignee="carol@example.com", project="Apollo")
    )

    assert change_set.input.to_variables() == {"assigneeId": "user-carol", "projectId": "proj-apollo"}
    assert _diff(change_set) == {
        "assignee": ("none", "carol@example.com"),
        "project": ("none", "Apollo"),
    }


@pytest.mark.asyncio
async def test_unassigning_unassigned_issue_is_no_change(provider: FakeProvider) -> None:
    issue = make_issue(assignee=None, project=None)

    change_set = await build_update_input(provider, issue, EditFields(assignee="none", project="none"))

    assert change_set.input.is_empty()


@pytest.mark.asyncio
async def test_due_date_and_estimate_compare_against_snapshot(provider: FakeProvider) -> None:
    issue = make_issue(dueDate="2024-05-01", estimate=3.0)

    unchanged = await build_update_input(provider, issue, EditFields(dueDate="2024-05-01", estimate=3))
    changed = await build_update_input(provider, issue, EditFields(dueDate="none", estimate=5))

    assert unchanged.input.is_empty()
    assert changed.input.to_variables() == {"dueDate": None, "estimate": 5.0}
    assert _diff(changed) == {"dueDate": ("2024-05-01", "none"), "estimate": (3.0, 5)}


@pytest.mark.asyncio
async def test_setting_due_date_and_estimate_on_empty_snapshot(provider: FakeProvider, issue: Issue) -> None:
    change_set = await build_update_input(provider, issue, EditFields(dueDate="2024-06-30", estimate=2))

    assert _diff(change_set) == {"dueDate": ("none", "2024-06-30"), "estimate": ("none", 2)}


@pytest.mark.asyncio
async def test_clearing_description(provider: FakeProvider, issue: Issue) -> None:
    change_set = await build_update_input(provider, issue, EditFields(), "")

    assert change_set.input.to_variables() == {"description": ""}
    assert _diff(change_set) == {"description": ("(has description)", "(cleared)")}


@pytest.mark.asyncio
async def test_description_on_empty_snapshot(provider: FakeProvider) -> None:
    issue = make_issue(description=None)

    empty = await build_update_input(provider, issue, EditFields(), "")
    added = await build_update_input(provider, issue, EditFields(), "Now with details")

    assert empty.input.is_empty()
    assert _diff(added) == {"description": ("(empty)", "(updated)")}


@pytest.mark.asyncio
async def test_issue_without_team_is_rejected(provider: FakeProvider) -> None:
    issue = make_issue(team=None)

    with pytest.raises(EditValidationError, match="Issue has no team"):
        await build_update_input(provider, issue, EditFields(title="New"))


@pytest.mark.asyncio
async def test_unknown_state_enumerates_options(provider: FakeProvider, issue: Issue) -> None:
    with pytest.raises(ResolutionError, match="State 'Shipped' not found. Available: Backlog, Todo, In Progress, Done"):
        await build_update_input(provider, issue, EditFields(state="Shipped"))


@pytest.mark.asyncio
async def test_team_move_resolves_state_and_labels_in_new_team(provider: FakeProvider, issue: Issue) -> None:
    fields = EditFields(team="OPS", state="Done", labels=["infra"])

    change_set = await build_update_input(provider, issue, fields)

    assert change_set.input.to_variables() == {"stateId": "ops-done", "labelIds": ["ops-infra"], "teamId": "team-ops"}
    assert _diff(change_set)["team"] == ("ENG", "OPS")


@pytest.mark.asyncio
async def test_rejected_team_move_resolves_nothing_else(provider: FakeProvider, issue: Issue) -> None:
    fields = EditFields(team="OPS", title="Renamed", project="Zephyr", assignee="me")

    with pytest.raises(TeamMoveError):
        await build_update_input(provider, issue, fields)

    assert "get_projects" not in provider.calls
    assert "get_viewer" not in provider.calls


@pytest.mark.asyncio
async def test_same_team_in_other_case_is_not_a_move(provider: FakeProvider, issue: Issue) -> None:
    change_set = await build_update_input(provider, issue, EditFields(team="eng", state="Todo"))

    assert change_set.input.to_variables() == {"stateId": "eng-todo"}
    assert "team" not in change_set.changes
