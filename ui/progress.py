"""
Rich progress bar helpers.

The scan reads every file of the project once; these helpers build the bar
shown while that happens, colored by the state of the task.
"""

from enum import StrEnum
from typing import Optional

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressState(StrEnum):
    """
    Color of a progress task description for each task state.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    ERROR = "red"


def create_progress() -> Progress:
    """
    Create a Rich Progress with a spinner, description, bar and `done/total` counter.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
    )


def create_task(progress: Progress, description: str, total: int) -> TaskID:
    """
    Add a task styled as in progress.

    Returns:
        TaskID: Identifier used for later updates.
    """
    return progress.add_task(f"[{ProgressState.IN_PROGRESS}]{description}", total=total)


def set_task_state(
    progress: Progress,
    task: TaskID,
    state: ProgressState,
    description: str,
    completed: Optional[int] = None,
) -> None:
    """
    Recolor a task's description for `state`, optionally setting its completed count.
    """
    progress.update(task, completed=completed, description=f"[{state}]{description}")
