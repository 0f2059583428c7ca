from __future__ import annotations

import pytest

from linproj.contracts.exceptions import EditValidationError, ResolutionError
from linproj.edit.resolve import (
    resolve_assignee,
    resolve_labels,
    resolve_priority,
    resolve_project,
    resolve_state,
    resolve_team,
)
from tests.fakes.provider import FakeProvider


@pytest.mark.asyncio
async def test_resolve_team_is_case_insensitive(provider: FakeProvider) -> None:
    assert await resolve_team(provider, "ops") == "team-ops"


@pytest.mark.asyncio
async def test_resolve_team_lists_available_keys(provider: FakeProvider) -> None:
    with pytest.raises(ResolutionError, match="Team 'XYZ' not found. Available: ENG, OPS"):
        await resolve_team(provider, "XYZ")


@pytest.mark.asyncio
async def test_resolve_state_scoped_to_team(provider: FakeProvider) -> None:
    assert await resolve_state(provider, "team-eng", "todo") == "eng-todo"

    with pytest.raises(ResolutionError, match="State 'Todo' not found. Available: Backlog, in progress, Done"):
        await resolve_state(provider, "team-ops", "Todo")


@pytest.mark.asyncio
async def test_resolve_labels_preserves_order(provider: FakeProvider) -> None:
    assert await resolve_labels(provider, "team-eng", ["Frontend", "bug"]) == ["eng-frontend", "eng-bug"]


@pytest.mark.asyncio
async def test_resolve_labels_empty_list_skips_remote_call(provider: FakeProvider) -> None:
    assert await resolve_labels(provider, "team-eng", []) == []
    assert provider.calls == []


@pytest.mark.asyncio
async def test_resolve_labels_unknown_label(provider: FakeProvider) -> None:
    with pytest.raises(ResolutionError, match="Label 'backend' not found. Available: Bug, infra"):
        await resolve_labels(provider, "team-ops", ["bug", "backend"])


@pytest.mark.asyncio
@pytest.mark.parametrize(("value", "expected"), [("none", None), ("", None), ("me", "user-bob")])
async def test_resolve_assignee_keywords(provider: FakeProvider, value: str, expected: str | None) -> None:
    assert await resolve_assignee(provider, value) == expected


@pytest.mark.asyncio
async def test_resolve_assignee_by_email(provider: FakeProvider) -> None:
    assert await resolve_assignee(provider, "carol@example.com") == "user-carol"

    with pytest.raises(ResolutionError, match="User 'nobody@example.com' not found"):
        await resolve_assignee(provider, "nobody@example.com")


@pytest.mark.asyncio
async def test_resolve_project(provider: FakeProvider) -> None:
    assert await resolve_project(provider, "zephyr") == "proj-zephyr"
    assert await resolve_project(provider, "none") is None

    with pytest.raises(ResolutionError, match="Project 'Hermes' not found. Available: Apollo, Zephyr"):
        await resolve_project(provider, "Hermes")


@pytest.mark.parametrize(("value", "expected"), [("none", 0), ("Urgent", 1), ("high", 2), ("MEDIUM", 3), ("low", 4)])
def test_resolve_priority(value: str, expected: int) -> None:
    assert resolve_priority(value) == expected


@pytest.mark.parametrize("value", ["7", "3", "", "p1"])
def test_resolve_priority_accepts_names_only(value: str) -> None:
    with pytest.raises(EditValidationError, match=f"Invalid priority '{value}'"):
        resolve_priority(value)
