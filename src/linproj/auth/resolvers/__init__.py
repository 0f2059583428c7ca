"""Concrete token resolvers."""

from linproj.auth.resolvers.env import LINEAR_API_KEY_ENV, EnvTokenResolver
from linproj.auth.resolvers.workspace import WorkspaceTokenResolver

__all__ = ["LINEAR_API_KEY_ENV", "EnvTokenResolver", "WorkspaceTokenResolver"]
