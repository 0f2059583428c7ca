"""Frontmatter codec for the issue edit document.

An edit document is a YAML header between two ``---`` lines followed by a
free-text body that becomes the issue description::

    ---
    title: 'Fix login redirect'
    priority: high
    labels:
      - 'bug'
    ---

    Users land on /home instead of the page they asked for.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, cast

import yaml

from linproj.contracts.edit import ALLOWED_FIELDS, EditFields, ParsedInput
from linproj.contracts.exceptions import FrontmatterError
from linproj.contracts.issue import Issue

DELIMITER = "---"

PRIORITY_VALUES: dict[str, int] = {
    "none": 0,
    "urgent": 1,
    "high": 2,
    "medium": 3,
    "low": 4,
}
_PRIORITY_NAMES = {value: name for name, value in PRIORITY_VALUES.items()}

_DUE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_STRING_FIELDS = frozenset({"state", "assignee", "project", "team"})


def priority_name(priority: int) -> str:
    """Return the lower-case frontmatter name for a numeric priority."""
    return _PRIORITY_NAMES.get(priority, "none")


def parse_frontmatter(raw: str) -> ParsedInput:
    trimmed = raw.strip()
    lines = trimmed.splitlines()
    if not lines or lines[0].rstrip() != DELIMITER:
        return ParsedInput(fields=EditFields(), description=trimmed or None)

    closing = next((i for i, line in enumerate(lines[1:], start=1) if line.rstrip() == DELIMITER), None)
    if closing is None:
        return ParsedInput(fields=_parse_header("\n".join(lines[1:])))

    body = "\n".join(lines[closing + 1 :]).strip()
    return ParsedInput(
        fields=_parse_header("\n".join(lines[1:closing])),
        description=body or None,
    )


def _parse_header(header: str) -> EditFields:
    if not header.strip():
        return EditFields()

    try:
        parsed = yaml.safe_load(header)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterError(f"Invalid YAML in frontmatter: {exc}") from exc

    if parsed is None:
        return EditFields()
    if not isinstance(parsed, dict):
        raise FrontmatterError("Frontmatter must be a YAML object")

    fields: dict[str, Any] = {}
    for key, value in parsed.items():
        if key == "description":
            raise FrontmatterError("Use the body for description, not the 'description' field")
        if key not in ALLOWED_FIELDS:
            raise FrontmatterError(f"Unknown field '{key}'. Valid fields: {', '.join(ALLOWED_FIELDS)}")
        fields[key] = validate_field(key, value)
    return cast(EditFields, fields)


def validate_field(key: str, value: Any) -> Any:
    """Validate one header value and return its normalized form.

    Raises:
        FrontmatterError: If *value* is not acceptable for *key*.
    """
    if key == "title":
        _require_str(key, value)
        if not value.strip():
            raise FrontmatterError("Title cannot be empty")
        return value

    if key in _STRING_FIELDS:
        _require_str(key, value)
        return value

    if key == "priority":
        _require_str(key, value)
        lowered = value.lower()
        if lowered not in PRIORITY_VALUES:
            raise FrontmatterError(f"Invalid priority '{value}'. Valid values: urgent, high, medium, low, none")
        return lowered

    if key == "labels":
        if not isinstance(value, list):
            raise FrontmatterError("Field 'labels' must be an array")
        for label in value:
            if not isinstance(label, str):
                raise FrontmatterError("Each label must be a string")
        return list(value)

    if key == "dueDate":
        # An unquoted YAML date loads as datetime.date.
        if isinstance(value, date) and not isinstance(value, datetime):
            return value.isoformat()
        _require_str(key, value)
        if value == "none":
            return value
        if not _DUE_DATE_PATTERN.match(value) or not _is_calendar_date(value):
            raise FrontmatterError(f"Invalid dueDate '{value}'. Use ISO format (YYYY-MM-DD) or 'none'")
        return value

    if key == "estimate":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FrontmatterError("Field 'estimate' must be a number")
        return value

    raise FrontmatterError(f"Unknown field '{key}'. Valid fields: {', '.join(ALLOWED_FIELDS)}")


def _require_str(key: str, value: Any) -> None:
    if not isinstance(value, str):
        raise FrontmatterError(f"Field '{key}' must be a string")


def _is_calendar_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def render_frontmatter(issue: Issue) -> str:
    """Render *issue* as the document used to seed the editor."""
    lines = [
        DELIMITER,
        f"# Editing {issue.identifier}",
        "# Delete fields you don't want to change",
        "# Save and close to apply changes",
        "# To cancel: delete all content, or leave unchanged",
        "",
        f"title: {_quote(issue.title)}",
        f"state: {_quote(issue.state.name)}",
        f"priority: {priority_name(issue.priority)}",
    ]
    # No email means no value that resolves back to this user; leave it unchanged.
    if issue.assignee is None:
        lines.append("assignee: none")
    elif issue.assignee.email:
        lines.append(f"assignee: {_quote(issue.assignee.email)}")

    if issue.labels:
        lines.append("labels:")
        lines.extend(f"  - {_quote(label.name)}" for label in issue.labels)
    else:
        lines.append("labels: []")

    if issue.project is not None:
        lines.append(f"project: {_quote(issue.project.name)}")
    if issue.team is not None:
        lines.append(f"team: {_quote(issue.team.key)}")
    if issue.due_date:
        lines.append(f"dueDate: {_quote(issue.due_date)}")
    if issue.estimate is not None:
        lines.append(f"estimate: {_format_number(issue.estimate)}")

    lines.append(DELIMITER)

    if issue.description:
        lines.append("")
        lines.append(issue.description)

    return "\n".join(lines)
