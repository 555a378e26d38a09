"""Board session: CRUD actions that call the API and update the local mirror."""
import logging
from typing import Optional

from workboard.client.api import BoardApiClient, BoardApiError
from workboard.client.drag import DragController
from workboard.client.state import (
    AddColumn,
    AddTask,
    BoardState,
    BoardStore,
    DeleteColumn,
    DeleteTask,
    DeleteTasksByColumn,
    SetColumns,
    SetTasks,
    UpdateColumn,
    UpdateTask,
)
from workboard.schemas import ColumnResponse, TaskDifficulty, TaskPriority, TaskResponse

logger = logging.getLogger(__name__)


class Board:
    """One client's view of the board.

    Failed calls are logged and leave the local state as it was.
    """

    def __init__(self, api: Optional[BoardApiClient] = None, store: Optional[BoardStore] = None):
        self.api = api or BoardApiClient()
        self.store = store or BoardStore()
        self.drag = DragController(self.store, self.api)

    def __enter__(self) -> "Board":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.api.close()

    @property
    def state(self) -> BoardState:
        return self.store.state

    def load(self) -> BoardState:
        """Fetch columns and tasks independently; a failure leaves that part empty."""
        try:
            self.store.dispatch(SetColumns(tuple(self.api.list_columns())))
        except BoardApiError as exc:
            logger.error("Could not load columns: %s", exc)
        try:
            self.store.dispatch(SetTasks(tuple(self.api.list_tasks())))
        except BoardApiError as exc:
            logger.error("Could not load tasks: %s", exc)
        return self.state

    # Columns

    def create_column(self) -> Optional[ColumnResponse]:
        count = len(self.state.columns)
        try:
            column = self.api.create_column(title=f"Column {count + 1}", position=count)
        except BoardApiError as exc:
            logger.error("There was a problem creating a column: %s", exc)
            return None
        self.store.dispatch(AddColumn(column))
        return column

    def update_column(self, column_id: int, title: str) -> Optional[ColumnResponse]:
        column = self.state.find_column(column_id)
        if column is None:
            return None
        try:
            updated = self.api.update_column(column.model_copy(update={"title": title}))
        except BoardApiError as exc:
            logger.error("Error updating column %s: %s", column_id, exc)
            return None
        if updated is not None:
            self.store.dispatch(UpdateColumn(updated))
        return updated

    def delete_column(self, column_id: int) -> bool:
        """Delete a column and, locally, the tasks it held."""
        try:
            self.api.delete_column(column_id)
        except BoardApiError as exc:
            logger.error("Error deleting column %s: %s", column_id, exc)
            return False
        self.store.dispatch(DeleteColumn(column_id))
        self.store.dispatch(DeleteTasksByColumn(column_id))
        return True

    # Tasks

    def create_task(self, column_id: int) -> Optional[TaskResponse]:
        count = len(self.state.tasks)
        fields = {
            "columnId": column_id,
            "content": f"Task {count + 1}",
            "description": "Description",
            "priority": TaskPriority.LOW.value,
            "difficulty": TaskDifficulty.EASY.value,
            "position": count,
        }
        try:
            task = self.api.create_task(fields)
        except BoardApiError as exc:
            logger.error("There was a problem creating a task: %s", exc)
            return None
        self.store.dispatch(AddTask(task))
        return task

    def update_task(
        self,
        task_id: int,
        content: str,
        description: str,
        priority: str,
        difficulty: str,
    ) -> Optional[TaskResponse]:
        task = self.state.find_task(task_id)
        if task is None:
            return None
        changed = task.model_copy(
            update={
                "content": content,
                "description": description,
                "priority": priority,
                "difficulty": difficulty,
            }
        )
        try:
            updated = self.api.update_task(changed)
        except BoardApiError as exc:
            logger.error("Error updating task %s: %s", task_id, exc)
            return None
        if updated is not None:
            self.store.dispatch(UpdateTask(updated))
        return updated

    def delete_task(self, task_id: int) -> bool:
        try:
            self.api.delete_task(task_id)
        except BoardApiError as exc:
            logger.error("Error deleting task %s: %s", task_id, exc)
            return False
        self.store.dispatch(DeleteTask(task_id))
        return True
