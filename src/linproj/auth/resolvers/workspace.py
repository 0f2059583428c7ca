"""Workspace-profile token resolver."""

from __future__ import annotations

from pathlib import Path

from linproj.auth.base import TokenResolver
from linproj.config.loader import find_workspace_by_name, load_current_workspace, load_global_config
from linproj.contracts.config import ApiKeyAuth, OAuthAuth
from linproj.contracts.exceptions import ConfigError

_NOT_AUTHENTICATED = "Not authenticated.\n\nRun `linproj auth login` first."


class WorkspaceTokenResolver(TokenResolver):
    """Reads credentials from the stored config.

    A named workspace wins; otherwise a legacy v1 config supplies inline auth
    and a v2 config supplies the current workspace's auth.
    """

    def __init__(self, *, workspace: str | None = None, base_dir: Path | None = None) -> None:
        self._workspace = workspace
        self._base_dir = base_dir

    async def resolve(self) -> ApiKeyAuth | OAuthAuth:
        if self._workspace:
            profile = find_workspace_by_name(self._workspace, self._base_dir)
            if profile is None:
                raise ConfigError(f"Workspace '{self._workspace}' not found.")
            return profile.auth

        config = load_global_config(self._base_dir)
        if config.version != 2:
            if config.auth is None:
                raise ConfigError(_NOT_AUTHENTICATED)
            return config.auth

        return load_current_workspace(self._base_dir).auth
