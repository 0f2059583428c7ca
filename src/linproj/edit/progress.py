"""Progress reporting protocol for the edit pipeline.

The pipeline reports its remote phases (resolving names, applying the update)
so a front end can show feedback while it waits on the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

RESOLVE_PHASE = "Resolve"
APPLY_PHASE = "Apply"


class EditProgress(ABC):
    """Observer interface for edit pipeline phases."""

    @abstractmethod
    def phase_start(self, phase: str) -> None:
        """A remote phase is starting."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* was interrupted by *error*."""
        ...  # pragma: no cover


class NullEditProgress(EditProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
