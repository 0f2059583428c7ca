"""Configuration loading."""

from linproj.config.loader import (
    find_workspace_by_name,
    list_workspaces,
    load_current_workspace,
    load_global_config,
    load_workspace,
)
from linproj.config.paths import config_dir, config_file, workspaces_dir

__all__ = [
    "config_dir",
    "config_file",
    "find_workspace_by_name",
    "list_workspaces",
    "load_current_workspace",
    "load_global_config",
    "load_workspace",
    "workspaces_dir",
]
