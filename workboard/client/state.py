"""
Client-side mirror of the board.

``BoardState`` is immutable; every change goes through ``reduce`` as one of
the action classes below, dispatched by a ``BoardStore``.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple, Union

from workboard.schemas import ColumnResponse, TaskResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardState:
    columns: Tuple[ColumnResponse, ...] = ()
    tasks: Tuple[TaskResponse, ...] = ()
    active_column: Optional[ColumnResponse] = None
    active_task: Optional[TaskResponse] = None

    def column_ids(self) -> List[int]:
        return [column.id for column in self.columns]

    def tasks_for_column(self, column_id: int) -> List[TaskResponse]:
        return [task for task in self.tasks if task.column_id == column_id]

    def find_column(self, column_id: int) -> Optional[ColumnResponse]:
        return next((column for column in self.columns if column.id == column_id), None)

    def find_task(self, task_id: int) -> Optional[TaskResponse]:
        return next((task for task in self.tasks if task.id == task_id), None)


# Actions


@dataclass(frozen=True)
class SetColumns:
    columns: Tuple[ColumnResponse, ...]


@dataclass(frozen=True)
class SetTasks:
    tasks: Tuple[TaskResponse, ...]


@dataclass(frozen=True)
class SetActiveColumn:
    column: Optional[ColumnResponse]


@dataclass(frozen=True)
class SetActiveTask:
    task: Optional[TaskResponse]


@dataclass(frozen=True)
class AddColumn:
    column: ColumnResponse


@dataclass(frozen=True)
class UpdateColumn:
    column: ColumnResponse


@dataclass(frozen=True)
class DeleteColumn:
    column_id: int


@dataclass(frozen=True)
class AddTask:
    task: TaskResponse


@dataclass(frozen=True)
class UpdateTask:
    task: TaskResponse


@dataclass(frozen=True)
class DeleteTask:
    task_id: int


@dataclass(frozen=True)
class DeleteTasksByColumn:
    """Drop a deleted column's tasks locally; the server keeps them."""

    column_id: int


Action = Union[
    SetColumns,
    SetTasks,
    SetActiveColumn,
    SetActiveTask,
    AddColumn,
    UpdateColumn,
    DeleteColumn,
    AddTask,
    UpdateTask,
    DeleteTask,
    DeleteTasksByColumn,
]


def reduce(state: BoardState, action: Action) -> BoardState:
    """Return the state after ``action``. ``state`` is never modified."""
    if isinstance(action, SetColumns):
        return replace(state, columns=tuple(action.columns))
    if isinstance(action, SetTasks):
        return replace(state, tasks=tuple(action.tasks))
    if isinstance(action, SetActiveColumn):
        return replace(state, active_column=action.column)
    if isinstance(action, SetActiveTask):
        return replace(state, active_task=action.task)
    if isinstance(action, AddColumn):
        return replace(state, columns=state.columns + (action.column,))
    if isinstance(action, UpdateColumn):
        columns = tuple(
            action.column if column.id == action.column.id else column for column in state.columns
        )
        return replace(state, columns=columns)
    if isinstance(action, DeleteColumn):
        columns = tuple(column for column in state.columns if column.id != action.column_id)
        return replace(state, columns=columns)
    if isinstance(action, AddTask):
        return replace(state, tasks=state.tasks + (action.task,))
    if isinstance(action, UpdateTask):
        tasks = tuple(action.task if task.id == action.task.id else task for task in state.tasks)
        return replace(state, tasks=tasks)
    if isinstance(action, DeleteTask):
        return replace(state, tasks=tuple(task for task in state.tasks if task.id != action.task_id))
    if isinstance(action, DeleteTasksByColumn):
        tasks = tuple(task for task in state.tasks if task.column_id != action.column_id)
        return replace(state, tasks=tasks)

    logger.warning("Ignoring unknown action %r", action)
    return state


Listener = Callable[[BoardState, Action], None]


@dataclass
class BoardStore:
    """Holds the current ``BoardState`` and applies dispatched actions."""

    state: BoardState = field(default_factory=BoardState)
    listeners: List[Listener] = field(default_factory=list)

    def dispatch(self, action: Action) -> BoardState:
        self.state = reduce(self.state, action)
        for listener in self.listeners:
            listener(self.state, action)
        return self.state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every dispatch; returns an unsubscribe function."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe
