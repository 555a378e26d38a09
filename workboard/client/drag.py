"""
Drag-and-drop controller for the board.

Drag start/over/end events move columns and tasks around in the local
``BoardStore``. Hovering only changes local state; a completed gesture is
persisted with a single reorder request, and the server's answer replaces the
optimistic local order. If that request fails, or the drag ends over nothing,
the board goes back to how it looked when the drag started.
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

from workboard.client.api import BoardApiClient, BoardApiError
from workboard.client.state import (
    BoardStore,
    SetActiveColumn,
    SetActiveTask,
    SetColumns,
    SetTasks,
)
from workboard.schemas import ColumnResponse, TaskResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItemKind(str, enum.Enum):
    COLUMN = "Column"
    TASK = "Task"


class DragPhase(str, enum.Enum):
    IDLE = "idle"
    DRAGGING_COLUMN = "dragging-column"
    DRAGGING_TASK = "dragging-task"


@dataclass(frozen=True)
class DragItem:
    """A draggable element or drop target: what it is and its id."""

    kind: ItemKind
    id: int

    @classmethod
    def column(cls, column_id: int) -> "DragItem":
        return cls(ItemKind.COLUMN, column_id)

    @classmethod
    def task(cls, task_id: int) -> "DragItem":
        return cls(ItemKind.TASK, task_id)


def array_move(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """Return a copy of ``items`` with the item at ``from_index`` moved to ``to_index``.

    Relative order of every other item is kept.
    """
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return moved


def _index_of(items: Sequence, item_id: int) -> int:
    return next((index for index, item in enumerate(items) if item.id == item_id), -1)


def _placements(tasks: Sequence[TaskResponse]) -> List[Tuple[int, int]]:
    return [(task.id, task.column_id) for task in tasks]


class DragController:
    """Turns drag lifecycle events into board state changes."""

    def __init__(self, store: BoardStore, api: BoardApiClient):
        self.store = store
        self.api = api
        self.phase = DragPhase.IDLE
        self._snapshot: Optional[Tuple[Tuple[ColumnResponse, ...], Tuple[TaskResponse, ...]]] = None

    def start(self, active: DragItem) -> None:
        state = self.store.state
        self._snapshot = (state.columns, state.tasks)

        if active.kind is ItemKind.COLUMN:
            column = state.find_column(active.id)
            if column is None:
                logger.warning("Drag started on unknown column %s", active.id)
                return
            self.store.dispatch(SetActiveColumn(column))
            self.phase = DragPhase.DRAGGING_COLUMN
        elif active.kind is ItemKind.TASK:
            task = state.find_task(active.id)
            if task is None:
                logger.warning("Drag started on unknown task %s", active.id)
                return
            self.store.dispatch(SetActiveTask(task))
            self.phase = DragPhase.DRAGGING_TASK

    def over(self, active: DragItem, over: Optional[DragItem]) -> None:
        """Preview a task's new place while it hovers another task or a column."""
        if over is None or over == active:
            return
        if active.kind is not ItemKind.TASK:
            return

        tasks = list(self.store.state.tasks)
        active_index = _index_of(tasks, active.id)
        if active_index < 0:
            return

        if over.kind is ItemKind.TASK:
            over_index = _index_of(tasks, over.id)
            if over_index < 0:
                return
            over_column_id = tasks[over_index].column_id
            if tasks[active_index].column_id != over_column_id:
                tasks[active_index] = tasks[active_index].model_copy(update={"column_id": over_column_id})
                tasks = array_move(tasks, active_index, max(over_index - 1, 0))
            else:
                tasks = array_move(tasks, active_index, over_index)
            self.store.dispatch(SetTasks(tuple(tasks)))

        elif over.kind is ItemKind.COLUMN:
            if tasks[active_index].column_id == over.id:
                return
            tasks[active_index] = tasks[active_index].model_copy(update={"column_id": over.id})
            self.store.dispatch(SetTasks(tuple(tasks)))

    def end(self, active: DragItem, over: Optional[DragItem]) -> Optional[list]:
        """Finish the gesture.

        Returns the rows the server acknowledged, or ``None`` when nothing was
        persisted.
        """
        snapshot = self._snapshot or (self.store.state.columns, self.store.state.tasks)
        self._snapshot = None
        self.phase = DragPhase.IDLE
        self.store.dispatch(SetActiveColumn(None))
        self.store.dispatch(SetActiveTask(None))

        if over is None:
            self._restore(snapshot)
            return None

        if active.kind is ItemKind.COLUMN:
            if over.kind is not ItemKind.COLUMN or over == active:
                return None
            return self._drop_column(active, over, snapshot)

        if active.kind is ItemKind.TASK:
            return self._drop_task(active, over, snapshot)

        return None

    def cancel(self) -> None:
        """Abort the gesture and put the board back as it was at drag start."""
        if self._snapshot is not None:
            self._restore(self._snapshot)
        self._snapshot = None
        self.phase = DragPhase.IDLE
        self.store.dispatch(SetActiveColumn(None))
        self.store.dispatch(SetActiveTask(None))

    def _drop_column(self, active: DragItem, over: DragItem, snapshot) -> Optional[List[ColumnResponse]]:
        columns = list(self.store.state.columns)
        active_index = _index_of(columns, active.id)
        over_index = _index_of(columns, over.id)
        if active_index < 0 or over_index < 0:
            self._restore(snapshot)
            return None

        reordered = [
            column.model_copy(update={"position": index})
            for index, column in enumerate(array_move(columns, active_index, over_index))
        ]
        self.store.dispatch(SetColumns(tuple(reordered)))

        try:
            acknowledged = self.api.reorder_columns([column.id for column in reordered])
        except BoardApiError as exc:
            logger.error("Column reorder was not saved, reverting: %s", exc)
            self._restore(snapshot)
            return None

        self.store.dispatch(SetColumns(tuple(acknowledged)))
        return acknowledged

    def _drop_task(self, active: DragItem, over: DragItem, snapshot) -> Optional[List[TaskResponse]]:
        tasks = list(self.store.state.tasks)
        active_index = _index_of(tasks, active.id)
        if active_index < 0:
            self._restore(snapshot)
            return None

        if over.kind is ItemKind.TASK and over != active:
            over_index = _index_of(tasks, over.id)
            if over_index < 0:
                self._restore(snapshot)
                return None
            over_column_id = tasks[over_index].column_id
            if tasks[active_index].column_id != over_column_id:
                tasks[active_index] = tasks[active_index].model_copy(update={"column_id": over_column_id})
            tasks = array_move(tasks, active_index, over_index)
        elif over.kind is ItemKind.COLUMN and tasks[active_index].column_id != over.id:
            tasks[active_index] = tasks[active_index].model_copy(update={"column_id": over.id})

        _, original_tasks = snapshot
        if _placements(tasks) == _placements(original_tasks):
            self.store.dispatch(SetTasks(tuple(original_tasks)))
            return None

        reordered = [task.model_copy(update={"position": index}) for index, task in enumerate(tasks)]
        self.store.dispatch(SetTasks(tuple(reordered)))

        try:
            acknowledged = self.api.reorder_tasks(reordered)
        except BoardApiError as exc:
            logger.error("Task move was not saved, reverting: %s", exc)
            self._restore(snapshot)
            return None

        self.store.dispatch(SetTasks(tuple(acknowledged)))
        return acknowledged

    def _restore(self, snapshot) -> None:
        columns, tasks = snapshot
        self.store.dispatch(SetColumns(columns))
        self.store.dispatch(SetTasks(tasks))
