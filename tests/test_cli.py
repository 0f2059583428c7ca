from __future__ import annotations

import argparse
import io
import json
import sys

import pytest

from linproj.auth.base import TokenResolver
from linproj.cli import build_parser, main
from linproj.cli.commands import edit as edit_command
from linproj.cli.commands.edit import format_changes, options_from_args, report_result, run_edit
from linproj.contracts.config import ApiKeyAuth
from linproj.contracts.edit import EditCancelled, EditFailure, EditNoChanges, EditOptions, EditSuccess, FieldChange
from linproj.contracts.exceptions import ConfigError
from tests.fakes.issues import make_issue
from tests.fakes.provider import FakeProvider


def _parse(*argv: str) -> argparse.Namespace:
    return build_parser().parse_args(["issues", "edit", *argv])


def test_parser_collects_edit_flags() -> None:
    args = _parse(
        "ENG-1",
        "--title",
        "New",
        "--label",
        "bug",
        "--label",
        "ui",
        "--due-date",
        "2024-03-01",
        "--estimate",
        "2",
        "--json",
        "--workspace",
        "Acme",
    )

    assert args.command == "issues"
    assert args.issues_command == "edit"
    assert args.identifier == "ENG-1"
    assert args.label == ["bug", "ui"]
    assert args.workspace == "Acme"

    options = options_from_args(args)
    assert options.title == "New"
    assert options.due_date == "2024-03-01"
    assert options.estimate == "2"
    assert options.json_output is True
    assert options.has_mutation_flags()


def test_parser_defaults_have_no_mutation_flags() -> None:
    options = options_from_args(_parse("ENG-1"))

    assert not options.has_mutation_flags()
    assert options.interactive is False
    assert options.recover is None


def test_parser_accepts_empty_label_and_recover() -> None:
    assert options_from_args(_parse("ENG-1", "--label", "")).label == [""]
    assert options_from_args(_parse("ENG-1", "--recover", "/tmp/x.md")).recover == "/tmp/x.md"
    assert options_from_args(_parse("ENG-1", "-i")).interactive is True


def test_parser_requires_identifier() -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["issues", "edit"])
    assert exc_info.value.code == 2


def test_format_changes_lists_each_field() -> None:
    text = format_changes(
        "ENG-1",
        "https://linear.app/acme/issue/ENG-1",
        {
            "title": FieldChange(**{"from": "Old", "to": "New"}),
            "priority": FieldChange(**{"from": "High", "to": "Low"}),
        },
    )

    assert text.splitlines() == [
        "Updated ENG-1",
        "",
        "  title: New (was: Old)",
        "  priority: Low (was: High)",
        "",
        "https://linear.app/acme/issue/ENG-1",
    ]


def _success() -> EditSuccess:
    return EditSuccess(
        issue=make_issue(title="New"),
        changes={"title": FieldChange(**{"from": "Fix login redirect", "to": "New"})},
    )


def test_report_success_prints_changes(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_result("ENG-1", _success(), EditOptions()) == 0

    out = capsys.readouterr().out
    assert out.startswith("Updated ENG-1\n")
    assert "  title: New (was: Fix login redirect)" in out


def test_report_success_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_result("ENG-1", _success(), EditOptions(json_output=True)) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert payload["issue"]["identifier"] == "ENG-1"
    assert payload["issue"]["title"] == "New"
    assert payload["changes"] == {"title": {"from": "Fix login redirect", "to": "New"}}


def test_report_success_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_result("ENG-1", _success(), EditOptions(quiet=True, json_output=True)) == 0
    assert capsys.readouterr().out == ""


def test_report_no_changes(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_result("ENG-1", EditNoChanges(), EditOptions()) == 0
    assert capsys.readouterr().out == "No changes to apply\n"

    assert report_result("ENG-1", EditNoChanges(), EditOptions(quiet=True)) == 0
    assert capsys.readouterr().out == ""


def test_report_cancelled(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_result("ENG-1", EditCancelled(), EditOptions()) == 0
    assert capsys.readouterr().out == "Edit cancelled, no changes made\n"


def test_report_failure_with_recovery_path(capsys: pytest.CaptureFixture[str]) -> None:
    result = EditFailure(error="State 'Nope' not found", recovery_path="/tmp/linproj-ENG-1-1.md")

    assert report_result("ENG-1", result, EditOptions()) == 1

    err = capsys.readouterr().err
    assert "Error: State 'Nope' not found" in err
    assert "linproj issues edit ENG-1 --recover /tmp/linproj-ENG-1-1.md" in err


def test_report_failure_without_recovery_path(capsys: pytest.CaptureFixture[str]) -> None:
    assert report_result("ENG-1", EditFailure(error="boom"), EditOptions()) == 1

    err = capsys.readouterr().err
    assert err == "Error: boom\n"


class _ApiKeyResolver(TokenResolver):
    async def resolve(self) -> ApiKeyAuth:
        return ApiKeyAuth(api_key="lin_api_test")


@pytest.fixture
def cli_provider(monkeypatch: pytest.MonkeyPatch, provider: FakeProvider) -> FakeProvider:
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    monkeypatch.setattr(edit_command, "create_token_resolver", lambda **kwargs: _ApiKeyResolver())
    monkeypatch.setattr(edit_command, "LinearProvider", lambda **kwargs: provider)
    monkeypatch.setattr(edit_command, "stderr_is_terminal", lambda: False)
    return provider


@pytest.mark.asyncio
async def test_run_edit_applies_flag_changes(
    cli_provider: FakeProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    code = await run_edit(_parse("ENG-1", "--title", "Renamed"))

    assert code == 0
    assert len(cli_provider.update_calls) == 1
    assert cli_provider.update_calls[0][1].to_variables() == {"title": "Renamed"}
    assert "  title: Renamed (was: Fix login redirect)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_edit_unknown_issue(cli_provider: FakeProvider, capsys: pytest.CaptureFixture[str]) -> None:
    code = await run_edit(_parse("ENG-404", "--title", "Renamed"))

    assert code == 1
    assert "Error: Issue 'ENG-404' not found" in capsys.readouterr().err
    assert cli_provider.update_calls == []


@pytest.mark.asyncio
async def test_run_edit_without_input_fails(cli_provider: FakeProvider, capsys: pytest.CaptureFixture[str]) -> None:
    code = await run_edit(_parse("ENG-1"))

    assert code == 1
    assert "No changes specified" in capsys.readouterr().err


def test_main_maps_linproj_errors_to_exit_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    async def failing_run_edit(args: argparse.Namespace) -> int:
        raise ConfigError("Not authenticated.")

    monkeypatch.setattr("linproj.cli.app.run_edit", failing_run_edit)

    assert main(["issues", "edit", "ENG-1", "--title", "x"]) == 1
    assert "Error: Not authenticated." in capsys.readouterr().err


def test_main_returns_command_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    async def fake_run_edit(args: argparse.Namespace) -> int:
        seen.append(args.identifier)
        return 0

    monkeypatch.setattr("linproj.cli.app.run_edit", fake_run_edit)

    assert main(["issues", "edit", "ENG-7", "--state", "Done"]) == 0
    assert seen == ["ENG-7"]


def test_main_interrupted(monkeypatch: pytest.MonkeyPatch) -> None:
    async def interrupted(args: argparse.Namespace) -> int:
        raise KeyboardInterrupt

    monkeypatch.setattr("linproj.cli.app.run_edit", interrupted)

    assert main(["issues", "edit", "ENG-1", "--title", "x"]) == 130
