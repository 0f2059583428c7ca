"""Remote issue store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from linproj.contracts.issue import Issue, IssueUpdateInput, Label, Project, Team, User, WorkflowState


class Provider(ABC):
    @abstractmethod
    async def __aenter__(self) -> Provider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def get_issue(self, identifier: str) -> Issue | None: ...  # pragma: no cover

    @abstractmethod
    async def get_teams(self) -> list[Team]: ...  # pragma: no cover

    @abstractmethod
    async def get_workflow_states(self, team_id: str) -> list[WorkflowState]: ...  # pragma: no cover

    @abstractmethod
    async def get_labels(self, team_id: str) -> list[Label]: ...  # pragma: no cover

    @abstractmethod
    async def get_viewer(self) -> User: ...  # pragma: no cover

    @abstractmethod
    async def get_user_by_email(self, email: str) -> User | None: ...  # pragma: no cover

    @abstractmethod
    async def get_projects(self) -> list[Project]: ...  # pragma: no cover

    @abstractmethod
    async def update_issue(self, issue_id: str, input: IssueUpdateInput) -> Issue: ...  # pragma: no cover
