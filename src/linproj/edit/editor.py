"""Launch the user's editor on a temporary edit document."""

from __future__ import annotations

import asyncio
import logging
import os
import secrets
import shlex
import shutil
import tempfile
from pathlib import Path

from linproj.contracts.exceptions import EditorError

_LOG = logging.getLogger(__name__)

FALLBACK_EDITORS = ("vim", "nano")


def resolve_editor_command() -> list[str] | None:
    """Return the editor command, preferring ``$EDITOR`` over discovered fallbacks."""
    env_editor = os.environ.get("EDITOR", "").strip()
    if env_editor:
        return shlex.split(env_editor)
    for name in FALLBACK_EDITORS:
        found = shutil.which(name)
        if found:
            return [found]
    return None


def _temp_path(identifier: str, directory: Path | None) -> Path:
    suffix = secrets.token_hex(3)
    return (directory or Path(tempfile.gettempdir())) / f"linproj-edit-{identifier}-{suffix}.md"


async def open_editor(content: str, identifier: str, *, directory: Path | None = None) -> str:
    """Open *content* in an editor and return the saved result.

    The temporary file is removed on every exit path.

    Raises:
        EditorError: If no editor is available, it cannot be started, it
            exits non-zero, or the edited file cannot be read back.
    """
    path = _temp_path(identifier, directory)
    path.write_text(content, encoding="utf-8")
    try:
        command = resolve_editor_command()
        if not command:
            raise EditorError("No editor found. Set $EDITOR or install vim/nano")

        _LOG.debug("Launching editor %s on %s", command, path)
        try:
            process = await asyncio.create_subprocess_exec(*command, str(path))
        except OSError as exc:
            raise EditorError(f"Failed to start editor: {exc}") from exc

        returncode = await process.wait()
        if returncode != 0:
            raise EditorError(f"Editor exited with status {returncode}")

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise EditorError(f"Failed to read edited file: {exc}") from exc
    finally:
        path.unlink(missing_ok=True)
