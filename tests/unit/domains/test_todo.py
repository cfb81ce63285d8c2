"""Unit tests for the todo domain."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from eventfold.application.event_sourcing import InMemoryEventStore
from eventfold.bootstrap import Services
from eventfold.domains.todo import ListStatus, TodoListState
from eventfold.kernel.errors import AggregateAlreadyExistsError, AggregateNotFoundError
from eventfold.kernel.time import FrozenClock


def _task(command_type: str, task_id: str = "t1", **extra: Any) -> tuple[str, dict[str, Any]]:
    return command_type, {"listId": "l1", "taskId": task_id, **extra}


CREATE = ("create-list", {"listId": "l1", "name": "Chores"})


def _run(services: Services, *commands: tuple[str, dict[str, Any]]) -> TodoListState:
    async def run() -> TodoListState | None:
        for command_type, data in commands:
            await services.registry.dispatch(command_type, data)
        return await services.projections["lists"].get("l1")

    state = asyncio.run(run())
    assert state is not None
    return state


class TestTodoCommands:
    def test_add_and_complete(self, services: Services) -> None:
        todo = _run(
            services,
            CREATE,
            _task("add-task", title="Dishes"),
            _task("add-task", task_id="t2", title="Laundry"),
            _task("complete-task"),
        )
        assert todo.name == "Chores"
        assert todo.total_tasks == 2
        assert todo.completed_tasks == 1
        first = todo.find_task("t1")
        assert first is not None
        assert first.completed is True
        assert first.completed_at == "2026-01-01T12:00:00+00:00"

    def test_uncomplete_clears_timestamp(self, services: Services) -> None:
        todo = _run(
            services,
            CREATE,
            _task("add-task", title="Dishes"),
            _task("complete-task"),
            _task("uncomplete-task"),
        )
        task = todo.find_task("t1")
        assert task is not None
        assert task.completed is False
        assert task.completed_at is None
        assert todo.completed_tasks == 0

    def test_rename(self, services: Services) -> None:
        todo = _run(services, CREATE, _task("add-task", title="Dishes"), _task("rename-task", title="Pots"))
        assert [t.title for t in todo.tasks] == ["Pots"]

    def test_delete_keeps_history(self, services: Services, store: InMemoryEventStore) -> None:
        todo = _run(
            services,
            CREATE,
            _task("add-task", title="Dishes"),
            _task("complete-task"),
            _task("delete-task"),
        )
        assert todo.tasks == []
        assert todo.total_tasks == 0
        assert todo.completed_tasks == 0
        history = asyncio.run(services.projections["lists"].history("l1"))
        assert [h.type.rsplit(".", 1)[-1] for h in history] == [
            "list-created",
            "task-added",
            "task-completed",
            "task-deleted",
        ]
        assert store.stream_length("/todo/l1") == 4

    def test_archive(self, services: Services) -> None:
        todo = _run(services, CREATE, ("archive-list", {"listId": "l1"}))
        assert todo.status is ListStatus.ARCHIVED
        assert todo.archived_at == "2026-01-01T12:00:00+00:00"

    def test_completion_of_missing_task_is_noop(self, services: Services) -> None:
        todo = _run(
            services,
            CREATE,
            _task("complete-task", task_id="ghost"),
            _task("rename-task", task_id="ghost", title="x"),
        )
        assert todo.tasks == []
        assert todo.completed_tasks == 0

    def test_list_preconditions(self, services: Services) -> None:
        with pytest.raises(AggregateAlreadyExistsError):
            _run(services, CREATE, CREATE)
        with pytest.raises(AggregateNotFoundError):
            asyncio.run(
                services.registry.dispatch("add-task", {"listId": "l2", "taskId": "t", "title": "x"})
            )

    def test_list_all_newest_first(self, services: Services, clock: FrozenClock) -> None:
        async def run() -> list[TodoListState]:
            await services.registry.dispatch("create-list", {"listId": "old", "name": "Old"})
            clock.advance(seconds=5)
            await services.registry.dispatch("create-list", {"listId": "new", "name": "New"})
            return await services.projections["lists"].list_all()

        assert [t.list_id for t in asyncio.run(run())] == ["new", "old"]
