"""Recovery files: raw edit input preserved after a failed edit."""

from __future__ import annotations

import logging
import tempfile
import time
from pathlib import Path

from linproj.contracts.exceptions import RecoveryFileError

_LOG = logging.getLogger(__name__)


class RecoveryStore:
    """Writes and reads recovery files in a single directory.

    Files are named ``linproj-recovery-<identifier>-<unix-seconds>.md`` and are
    never removed by linproj; the user owns their cleanup.
    """

    def __init__(self, directory: Path | None = None) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory or Path(tempfile.gettempdir())

    def path_for(self, identifier: str, timestamp: int | None = None) -> Path:
        seconds = int(time.time()) if timestamp is None else timestamp
        return self.directory / f"linproj-recovery-{identifier}-{seconds}.md"

    def save(self, identifier: str, content: str) -> Path:
        path = self.path_for(identifier)
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the content byte-identical on every platform.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        _LOG.debug("Saved recovery file %s", path)
        return path

    def load(self, path: str | Path) -> str:
        try:
            with Path(path).open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise RecoveryFileError(f"Could not read recovery file '{path}'") from exc
