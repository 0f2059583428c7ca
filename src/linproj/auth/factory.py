"""Token resolver factory."""

from __future__ import annotations

import os
from pathlib import Path

from linproj.auth.base import TokenResolver
from linproj.auth.resolvers.env import LINEAR_API_KEY_ENV, EnvTokenResolver
from linproj.auth.resolvers.workspace import WorkspaceTokenResolver


def using_env_auth() -> bool:
    return bool((os.getenv(LINEAR_API_KEY_ENV) or "").strip())


def create_token_resolver(*, workspace: str | None = None, base_dir: Path | None = None) -> TokenResolver:
    """Pick the resolver for this invocation.

    ``LINEAR_API_KEY`` overrides every stored credential, including an
    explicitly named workspace.
    """
    if using_env_auth():
        return EnvTokenResolver()
    return WorkspaceTokenResolver(workspace=workspace, base_dir=base_dir)
