"""Remote issue-store entity contracts.

Models accept the camelCase payloads returned by the Linear GraphQL API and
expose snake_case attributes. Connection wrappers (``{"nodes": [...]}``) are
unwrapped on validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ENTITY_CONFIG = ConfigDict(populate_by_name=True, frozen=True)


def _unwrap_nodes(value: Any) -> Any:
    if isinstance(value, dict) and "nodes" in value:
        return value["nodes"]
    return value


class User(BaseModel):
    model_config = _ENTITY_CONFIG

    id: str
    name: str = ""
    email: str = ""


class Team(BaseModel):
    model_config = _ENTITY_CONFIG

    id: str
    key: str
    name: str = ""


class WorkflowState(BaseModel):
    model_config = _ENTITY_CONFIG

    id: str
    name: str
    type: str = ""


class Label(BaseModel):
    model_config = _ENTITY_CONFIG

    id: str
    name: str
    color: str = ""


class Project(BaseModel):
    model_config = _ENTITY_CONFIG

    id: str
    name: str


class IssueState(BaseModel):
    model_config = _ENTITY_CONFIG

    name: str
    type: str = ""


class IssueTeam(BaseModel):
    model_config = _ENTITY_CONFIG

    key: str
    name: str = ""


class IssueAssignee(BaseModel):
    model_config = _ENTITY_CONFIG

    id: str
    name: str = ""
    email: str = ""


class IssueLabel(BaseModel):
    model_config = _ENTITY_CONFIG

    name: str
    color: str = ""


class IssueProject(BaseModel):
    model_config = _ENTITY_CONFIG

    name: str


class Issue(BaseModel):
    """Snapshot of a remote issue, fetched immediately before an edit."""

    model_config = _ENTITY_CONFIG

    id: str
    identifier: str
    title: str
    description: str | None = None
    url: str = ""
    state: IssueState
    priority: int = 0
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    due_date: str | None = Field(default=None, alias="dueDate")
    estimate: float | None = None
    team: IssueTeam | None = None
    assignee: IssueAssignee | None = None
    labels: list[IssueLabel] = Field(default_factory=list)
    project: IssueProject | None = None

    @field_validator("labels", mode="before")
    @classmethod
    def _labels_from_connection(cls, value: Any) -> Any:
        value = _unwrap_nodes(value)
        return [] if value is None else value

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]


class IssueUpdateInput(BaseModel):
    """Payload for the ``issueUpdate`` mutation.

    Only explicitly set fields are sent; an explicit ``None`` clears the remote
    value (assignee, project, due date).
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    state_id: str | None = Field(default=None, alias="stateId")
    priority: int | None = None
    assignee_id: str | None = Field(default=None, alias="assigneeId")
    label_ids: list[str] | None = Field(default=None, alias="labelIds")
    project_id: str | None = Field(default=None, alias="projectId")
    team_id: str | None = Field(default=None, alias="teamId")
    due_date: str | None = Field(default=None, alias="dueDate")
    estimate: float | None = None

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def to_variables(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
