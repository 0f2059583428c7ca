"""Edit pipeline contracts: options, parsed documents, diffs, and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field

from linproj.contracts.issue import Issue, IssueUpdateInput

ALLOWED_FIELDS: tuple[str, ...] = (
    "title",
    "state",
    "priority",
    "assignee",
    "labels",
    "project",
    "team",
    "dueDate",
    "estimate",
)


class EditFields(TypedDict, total=False):
    """Requested field values. An absent key means "do not change"."""

    title: str
    state: str
    priority: str
    assignee: str
    labels: list[str]
    project: str
    team: str
    dueDate: str
    estimate: float


@dataclass(frozen=True)
class ParsedInput:
    fields: EditFields = field(default_factory=lambda: EditFields())
    description: str | None = None


class EditOptions(BaseModel):
    """Options for one ``issues edit`` invocation, as given on the command line."""

    title: str | None = None
    state: str | None = None
    priority: str | None = None
    assignee: str | None = None
    label: list[str] | None = None
    project: str | None = None
    team: str | None = None
    due_date: str | None = None
    estimate: str | None = None
    interactive: bool = False
    recover: str | None = None
    json_output: bool = False
    quiet: bool = False

    def has_mutation_flags(self) -> bool:
        return any(
            (
                self.title,
                self.state,
                self.priority,
                self.assignee,
                self.label,
                self.project,
                self.team,
                self.due_date,
                self.estimate,
            )
        )


class FieldChange(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: Any = Field(alias="from")
    to: Any


Changes = dict[str, FieldChange]


class ChangeSet(BaseModel):
    input: IssueUpdateInput
    changes: Changes = Field(default_factory=dict)


class EditCancelled(BaseModel):
    kind: Literal["cancelled"] = "cancelled"


class EditNoChanges(BaseModel):
    kind: Literal["no_changes"] = "no_changes"


class EditSuccess(BaseModel):
    kind: Literal["success"] = "success"
    issue: Issue
    changes: Changes = Field(default_factory=dict)


class EditFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    error: str
    recovery_path: str | None = None


EditResult = EditCancelled | EditNoChanges | EditSuccess | EditFailure
