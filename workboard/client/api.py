"""
HTTP client for the WorkBoard API.

Wraps an ``httpx.Client``; any ``httpx.Client`` works, including
``fastapi.testclient.TestClient``.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from workboard.config import settings
from workboard.schemas import ColumnResponse, TaskResponse

logger = logging.getLogger(__name__)


class BoardApiError(Exception):
    """A request to the board API failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BoardApiClient:
    """Client for the columns and tasks endpoints"""

    def __init__(self, http: Optional[httpx.Client] = None, base_url: Optional[str] = None):
        if http is None:
            http = httpx.Client(
                base_url=base_url or settings.API_BASE_URL,
                timeout=httpx.Timeout(settings.HTTP_TIMEOUT),
            )
        self.http = http

    def close(self) -> None:
        self.http.close()

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            response = self.http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise BoardApiError(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            raise BoardApiError(
                f"{method} {path} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        if not response.content:
            return None
        return response.json()

    # Columns

    def list_columns(self) -> List[ColumnResponse]:
        return [ColumnResponse.model_validate(row) for row in self._request("GET", "/columns")]

    def create_column(self, title: str, position: Optional[int] = None) -> ColumnResponse:
        body = self._request("POST", "/columns", json={"title": title, "position": position})
        return ColumnResponse.model_validate(body)

    def update_column(self, column: ColumnResponse) -> Optional[ColumnResponse]:
        body = self._request("PUT", f"/columns/{column.id}", json=column.model_dump(exclude={"id"}))
        return ColumnResponse.model_validate(body) if body is not None else None

    def delete_column(self, column_id: int) -> Optional[ColumnResponse]:
        body = self._request("DELETE", f"/columns/{column_id}")
        return ColumnResponse.model_validate(body) if body is not None else None

    def reorder_columns(self, column_ids: Sequence[int]) -> List[ColumnResponse]:
        rows = self._request("PUT", "/columns/reorder", json={"ids": list(column_ids)})
        return [ColumnResponse.model_validate(row) for row in rows]

    # Tasks

    def list_tasks(self) -> List[TaskResponse]:
        return [TaskResponse.model_validate(row) for row in self._request("GET", "/tasks")]

    def create_task(self, fields: Dict[str, Any]) -> TaskResponse:
        """Create a task from wire-format fields (``columnId``, ``content``, ...)."""
        return TaskResponse.model_validate(self._request("POST", "/tasks", json=fields))

    def update_task(self, task: TaskResponse) -> Optional[TaskResponse]:
        payload = task.model_dump(by_alias=True, exclude={"id"})
        body = self._request("PUT", f"/tasks/{task.id}", json=payload)
        return TaskResponse.model_validate(body) if body is not None else None

    def delete_task(self, task_id: int) -> Optional[TaskResponse]:
        body = self._request("DELETE", f"/tasks/{task_id}")
        return TaskResponse.model_validate(body) if body is not None else None

    def reorder_tasks(self, tasks: Sequence[TaskResponse]) -> List[TaskResponse]:
        placements = [{"id": task.id, "columnId": task.column_id} for task in tasks]
        rows = self._request("PUT", "/tasks/reorder", json={"tasks": placements})
        return [TaskResponse.model_validate(row) for row in rows]
