"""Filesystem locations for linproj configuration."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_DIRNAME = "linproj"
CONFIG_FILENAME = "config.json"
WORKSPACES_DIRNAME = "workspaces"


def config_dir() -> Path:
    """Return the configuration directory.

    Follows ``$XDG_CONFIG_HOME`` when set, ``%APPDATA%`` on Windows, and
    ``~/.config/linproj`` otherwise.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / APP_DIRNAME

    app_data = os.environ.get("APPDATA")
    if app_data and sys.platform == "win32":
        return Path(app_data) / APP_DIRNAME

    return Path.home() / ".config" / APP_DIRNAME


def config_file(base_dir: Path | None = None) -> Path:
    return (base_dir or config_dir()) / CONFIG_FILENAME


def workspaces_dir(base_dir: Path | None = None) -> Path:
    return (base_dir or config_dir()) / WORKSPACES_DIRNAME
