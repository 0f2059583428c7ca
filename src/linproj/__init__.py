"""Public API surface for linproj."""

__version__ = "0.1.0"

from linproj.auth import TokenResolver, create_token_resolver
from linproj.contracts import (
    AuthenticationError,
    ChangeSet,
    ConfigError,
    EditCancelled,
    EditError,
    EditFailure,
    EditNoChanges,
    EditOptions,
    EditResult,
    EditSuccess,
    Issue,
    IssueUpdateInput,
    LinprojError,
    Provider,
    ProviderError,
)
from linproj.edit import EditDeps, RecoveryStore, build_update_input, execute_edit, parse_frontmatter, render_frontmatter
from linproj.providers import LinearProvider

__all__ = [
    "AuthenticationError",
    "ChangeSet",
    "ConfigError",
    "EditCancelled",
    "EditDeps",
    "EditError",
    "EditFailure",
    "EditNoChanges",
    "EditOptions",
    "EditResult",
    "EditSuccess",
    "Issue",
    "IssueUpdateInput",
    "LinearProvider",
    "LinprojError",
    "Provider",
    "ProviderError",
    "RecoveryStore",
    "TokenResolver",
    "__version__",
    "build_update_input",
    "create_token_resolver",
    "execute_edit",
    "parse_frontmatter",
    "render_frontmatter",
]
