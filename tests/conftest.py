"""Shared test fixtures for linproj tests."""

from __future__ import annotations

import pytest

from linproj.contracts.issue import Issue, Label, Project, Team, User, WorkflowState
from tests.fakes.issues import make_issue
from tests.fakes.provider import FakeProvider

ENG_TEAM = Team(id="team-eng", key="ENG", name="Engineering")
OPS_TEAM = Team(id="team-ops", key="OPS", name="Operations")


@pytest.fixture
def issue() -> Issue:
    return make_issue()


@pytest.fixture
def provider(issue: Issue) -> FakeProvider:
    """Two teams: OPS lacks the ``backend`` label and the ``Todo`` state."""
    return FakeProvider(
        teams=[ENG_TEAM, OPS_TEAM],
        states={
            "team-eng": [
                WorkflowState(id="eng-backlog", name="Backlog", type="backlog"),
                WorkflowState(id="eng-todo", name="Todo", type="unstarted"),
                WorkflowState(id="eng-progress", name="In Progress", type="started"),
                WorkflowState(id="eng-done", name="Done", type="completed"),
            ],
            "team-ops": [
                WorkflowState(id="ops-backlog", name="Backlog", type="backlog"),
                WorkflowState(id="ops-progress", name="in progress", type="started"),
                WorkflowState(id="ops-done", name="Done", type="completed"),
            ],
        },
        labels={
            "team-eng": [
                Label(id="eng-bug", name="bug"),
                Label(id="eng-backend", name="backend"),
                Label(id="eng-frontend", name="frontend"),
            ],
            "team-ops": [
                Label(id="ops-bug", name="Bug"),
                Label(id="ops-infra", name="infra"),
            ],
        },
        users=[
            User(id="user-alice", name="Alice", email="alice@example.com"),
            User(id="user-carol", name="Carol", email="carol@example.com"),
        ],
        viewer=User(id="user-bob", name="Bob", email="bob@example.com"),
        projects=[Project(id="proj-apollo", name="Apollo"), Project(id="proj-zephyr", name="Zephyr")],
        issues=[issue],
    )
