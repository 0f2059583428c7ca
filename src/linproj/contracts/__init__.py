"""Contracts shared across linproj layers."""

from linproj.contracts.config import ApiKeyAuth, Auth, GlobalConfig, OAuthAuth, WorkspaceProfile
from linproj.contracts.edit import (
    ALLOWED_FIELDS,
    Changes,
    ChangeSet,
    EditCancelled,
    EditFailure,
    EditFields,
    EditNoChanges,
    EditOptions,
    EditResult,
    EditSuccess,
    FieldChange,
    ParsedInput,
)
from linproj.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    EditError,
    EditorError,
    EditValidationError,
    FrontmatterError,
    InputConflictError,
    LinprojError,
    ProviderError,
    RecoveryFileError,
    ResolutionError,
    TeamMoveError,
)
from linproj.contracts.issue import (
    Issue,
    IssueAssignee,
    IssueLabel,
    IssueProject,
    IssueState,
    IssueTeam,
    IssueUpdateInput,
    Label,
    Project,
    Team,
    User,
    WorkflowState,
)
from linproj.contracts.provider import Provider

__all__ = [
    "ALLOWED_FIELDS",
    "ApiKeyAuth",
    "Auth",
    "AuthenticationError",
    "ChangeSet",
    "Changes",
    "ConfigError",
    "EditCancelled",
    "EditError",
    "EditFailure",
    "EditFields",
    "EditNoChanges",
    "EditOptions",
    "EditResult",
    "EditSuccess",
    "EditValidationError",
    "EditorError",
    "FieldChange",
    "FrontmatterError",
    "GlobalConfig",
    "InputConflictError",
    "Issue",
    "IssueAssignee",
    "IssueLabel",
    "IssueProject",
    "IssueState",
    "IssueTeam",
    "IssueUpdateInput",
    "Label",
    "LinprojError",
    "OAuthAuth",
    "ParsedInput",
    "Project",
    "Provider",
    "ProviderError",
    "RecoveryFileError",
    "ResolutionError",
    "Team",
    "TeamMoveError",
    "User",
    "WorkflowState",
    "WorkspaceProfile",
]
