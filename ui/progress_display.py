"""
Progress reporting for reading the project files.

The corpus builder reports through `ProgressDisplay` so that it never depends
on Rich directly; tests pass `NoOpProgressDisplay`.
"""

from pathlib import Path
from types import TracebackType
from typing import Protocol

from rich.progress import Progress, TaskID
from ui.progress import ProgressState, create_progress, create_task, set_task_state


class ProgressDisplay(Protocol):
    """
    Protocol for the read-files progress bar.

    Lifecycle: enter the context, call `on_start()` once, `on_file_read()` per
    file, then either `on_complete()` or `on_error()`, then exit the context.
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, total: int) -> None:
        """Start reading `total` project files."""

    def on_file_read(self) -> None:
        """Record one more file read."""

    def on_complete(self) -> None:
        """Mark every file as read."""

    def on_error(self, file_path: Path) -> None:
        """Show that reading `file_path` failed and the scan stops."""


class RichProgressDisplay:
    """
    ProgressDisplay backed by a Rich progress bar.
    """

    def __init__(self) -> None:
        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self.files_read = 0

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress()
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def _require_task(self) -> tuple[Progress, TaskID]:
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        if self._task is None:
            raise RuntimeError("on_start() must be called first")
        return self._progress, self._task

    def on_start(self, total: int) -> None:
        """
        Create the Rich task.

        Raises:
            RuntimeError: If not used as a context manager.
        """
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        self.files_read = 0
        self._task = create_task(
            self._progress, f"Reading {total} project files...", total=total
        )

    def on_file_read(self) -> None:
        progress, task = self._require_task()
        self.files_read += 1
        progress.advance(task)

    def on_complete(self) -> None:
        progress, task = self._require_task()
        set_task_state(
            progress,
            task,
            ProgressState.COMPLETE,
            f"✅ Read {self.files_read} project files.",
            completed=self.files_read,
        )

    def on_error(self, file_path: Path) -> None:
        progress, task = self._require_task()
        set_task_state(
            progress,
            task,
            ProgressState.ERROR,
            f"❌ Failed to read {file_path} after {self.files_read} files.",
        )


class NoOpProgressDisplay:
    """
    ProgressDisplay that does nothing, for tests.
    """

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        """No-op."""

    def on_start(self, total: int) -> None:
        """No-op."""

    def on_file_read(self) -> None:
        """No-op."""

    def on_complete(self) -> None:
        """No-op."""

    def on_error(self, file_path: Path) -> None:
        """No-op."""
