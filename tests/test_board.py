import logging

import httpx
import pytest

from workboard.client import Board, BoardApiClient, BoardApiError, BoardState
from workboard.schemas import ColumnResponse


def _failing_api(status_code: int = 500) -> BoardApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"error": "Internal Server Error"})

    return BoardApiClient(httpx.Client(base_url="http://board.test", transport=httpx.MockTransport(handler)))


def _unreachable_api() -> BoardApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return BoardApiClient(httpx.Client(base_url="http://board.test", transport=httpx.MockTransport(handler)))


def test_load_mirrors_server_rows(client, board: Board):
    column = client.post("/columns", json={"title": "Todo", "position": 0}).json()
    client.post(
        "/tasks",
        json={"columnId": column["id"], "content": "Task 1", "description": "", "priority": "Low", "difficulty": "Easy"},
    )

    state = board.load()

    assert state.column_ids() == [column["id"]]
    assert [t.content for t in state.tasks_for_column(column["id"])] == ["Task 1"]


def test_create_column_uses_next_title_and_position(board: Board):
    first = board.create_column()
    second = board.create_column()

    assert (first.title, first.position) == ("Column 1", 0)
    assert (second.title, second.position) == ("Column 2", 1)
    assert board.state.column_ids() == [first.id, second.id]


def test_update_column_title(client, board: Board):
    column = board.create_column()

    updated = board.update_column(column.id, "Backlog")

    assert updated.title == "Backlog"
    assert board.state.find_column(column.id).title == "Backlog"
    assert client.get("/columns").json()[0]["title"] == "Backlog"


def test_update_unknown_column_is_ignored(board: Board):
    assert board.update_column(404, "Nope") is None


def test_create_task_uses_defaults(board: Board):
    column = board.create_column()

    task = board.create_task(column.id)

    assert task.column_id == column.id
    assert task.content == "Task 1"
    assert task.description == "Description"
    assert task.priority == "Low"
    assert task.difficulty == "Easy"
    assert task.position == 0
    assert board.state.tasks == (task,)


def test_update_task_fields(client, board: Board):
    column = board.create_column()
    task = board.create_task(column.id)

    updated = board.update_task(task.id, "Write docs", "All of them", "High", "Hard")

    assert updated.id == task.id
    assert (updated.content, updated.priority, updated.difficulty) == ("Write docs", "High", "Hard")
    assert updated.column_id == column.id
    assert board.state.find_task(task.id).description == "All of them"
    assert client.get("/tasks").json()[0]["content"] == "Write docs"


def test_delete_task(client, board: Board):
    column = board.create_column()
    task = board.create_task(column.id)

    assert board.delete_task(task.id) is True

    assert board.state.tasks == ()
    assert client.get("/tasks").json() == []


def test_delete_column_drops_its_tasks_locally_only(client, board: Board):
    todo = board.create_column()
    done = board.create_column()
    board.create_task(todo.id)
    kept = board.create_task(done.id)

    assert board.delete_column(todo.id) is True

    assert board.state.column_ids() == [done.id]
    assert board.state.tasks == (kept,)
    # the server does not cascade
    assert len(client.get("/tasks").json()) == 2


def test_failed_load_leaves_state_empty_and_logs(caplog):
    board = Board(_failing_api())

    with caplog.at_level(logging.ERROR, logger="workboard.client.board"):
        state = board.load()

    assert state.columns == ()
    assert state.tasks == ()
    assert "Could not load columns" in caplog.text
    assert "Could not load tasks" in caplog.text


def test_failed_mutations_leave_state_unmodified():
    board = Board(_unreachable_api())
    column = ColumnResponse(id=1, title="Todo", position=0)
    board.store.state = BoardState(columns=(column,))

    assert board.create_column() is None
    assert board.create_task(column.id) is None
    assert board.update_column(column.id, "Renamed") is None
    assert board.delete_column(column.id) is False
    assert board.state.columns == (column,)


def test_api_error_carries_status_code():
    with pytest.raises(BoardApiError) as exc:
        _failing_api(status_code=503).list_columns()
    assert exc.value.status_code == 503


def test_board_closes_its_http_client():
    api = _failing_api()

    with Board(api) as board:
        board.load()

    assert api.http.is_closed
