"""Exception hierarchy for linproj.

All linproj exceptions inherit from :class:`LinprojError`, so callers can catch
any library error with a single ``except`` clause while still handling the
specific failure modes of the edit pipeline.
"""

from __future__ import annotations


class LinprojError(Exception):
    """Base exception for all linproj errors."""


class ConfigError(LinprojError):
    """Configuration loading or validation failure."""


class EditError(LinprojError):
    """Base failure raised while preparing or applying an issue edit."""


class InputConflictError(EditError):
    """Two mutually exclusive input sources were supplied together."""


class FrontmatterError(EditError):
    """The edit document header is malformed or contains an invalid field."""


class EditValidationError(EditError):
    """A field value is invalid, or the issue cannot accept the edit."""


class ResolutionError(EditError):
    """A human-readable name could not be resolved to a remote entity."""


class TeamMoveError(ResolutionError):
    """The issue's current state or labels do not exist in the destination team.

    Attributes:
        missing: The state or label name absent from the target team.
        available: Names the target team does offer.
    """

    def __init__(self, message: str, *, missing: str, available: list[str]) -> None:
        super().__init__(message)
        self.missing = missing
        self.available = available


class EditorError(EditError):
    """The external editor could not be started or exited unsuccessfully."""


class RecoveryFileError(EditError):
    """A recovery file reference could not be read."""


class ProviderError(LinprojError):
    """Base remote issue store failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""
