"""Read-only access to the global config and workspace profiles."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from linproj.config.paths import config_file, workspaces_dir
from linproj.contracts.config import GlobalConfig, WorkspaceProfile
from linproj.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

_LOGIN_HINT = "Run `linproj auth login` to set up a workspace."


def _read_json(path: Path) -> Any | None:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {path}") from exc


def load_global_config(base_dir: Path | None = None) -> GlobalConfig:
    path = config_file(base_dir)
    payload = _read_json(path)
    if payload is None:
        _LOG.debug("No config file at %s", path)
        return GlobalConfig()
    try:
        return GlobalConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def load_workspace(organization_id: str, base_dir: Path | None = None) -> WorkspaceProfile | None:
    path = workspaces_dir(base_dir) / f"{organization_id}.json"
    payload = _read_json(path)
    if payload is None:
        return None
    try:
        return WorkspaceProfile.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid workspace profile {path}: {exc}") from exc


def list_workspaces(base_dir: Path | None = None) -> list[WorkspaceProfile]:
    directory = workspaces_dir(base_dir)
    if not directory.is_dir():
        return []
    profiles: list[WorkspaceProfile] = []
    for path in sorted(directory.glob("*.json")):
        profile = load_workspace(path.stem, base_dir)
        if profile is not None:
            profiles.append(profile)
    return profiles


def find_workspace_by_name(name: str, base_dir: Path | None = None) -> WorkspaceProfile | None:
    wanted = name.lower()
    for profile in list_workspaces(base_dir):
        if profile.organization_name.lower() == wanted:
            return profile
    return None


def load_current_workspace(base_dir: Path | None = None) -> WorkspaceProfile:
    config = load_global_config(base_dir)
    if config.version != 2:
        raise ConfigError(
            "Config migration required.\n\n"
            "Your configuration uses an older format. Run:\n"
            "  linproj config migrate"
        )
    if not config.current_workspace:
        raise ConfigError(f"No workspace configured.\n\n{_LOGIN_HINT}")

    profile = load_workspace(config.current_workspace, base_dir)
    if profile is None:
        raise ConfigError(f"Workspace '{config.current_workspace}' not found.\n\n{_LOGIN_HINT}")
    return profile
