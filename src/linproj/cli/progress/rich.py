"""Rich-based edit progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from linproj.edit.progress import APPLY_PHASE, RESOLVE_PHASE, EditProgress


class RichEditProgress(EditProgress):
    """Spinner display for the remote phases of an edit, drawn on stderr.

    The live display starts with the first phase rather than on ``__enter__``
    so it never overlaps a terminal editor launched earlier in the pipeline::

        with RichEditProgress() as progress:
            result = await execute_edit(provider, identifier, issue, options, EditDeps(progress=progress))
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        RESOLVE_PHASE: "[cyan]Resolve[/]",
        APPLY_PHASE: "[green]Apply[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>10}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._task_ids: dict[str, RichTaskID] = {}
        self._started = False

    def __enter__(self) -> RichEditProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._started:
            self._progress.stop()
            self._started = False

    def phase_start(self, phase: str) -> None:
        if not self._started:
            self._progress.start()
            self._started = True
        self._task_ids[phase] = self._progress.add_task(self._PHASE_LABELS.get(phase, phase), total=None)

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, total=1, completed=1)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, description=f"[red]✗[/red] {phase:>8}")
