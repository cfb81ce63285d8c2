"""Todo – task list state and the list fold."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Mapping

from eventfold.application.event_sourcing import EventContext, EventStore, Fold, Projection
from eventfold.domains.todo import events


class ListStatus(enum.StrEnum):
    ACTIVE = "active"
    ARCHIVED = "archived"


@dataclasses.dataclass
class Task:
    task_id: str
    title: str
    added_at: str
    completed: bool = False
    completed_at: str | None = None


@dataclasses.dataclass
class TodoListState:
    list_id: str
    name: str = ""
    tasks: list[Task] = dataclasses.field(default_factory=list)
    total_tasks: int = 0
    completed_tasks: int = 0
    status: ListStatus = ListStatus.ACTIVE
    created_at: str = ""
    archived_at: str | None = None

    def find_task(self, task_id: str) -> Task | None:
        return next((t for t in self.tasks if t.task_id == task_id), None)


def _created(state: TodoListState, data: Mapping[str, Any]) -> None:
    state.name = data["name"]
    state.created_at = data["createdAt"]


def _task_added(state: TodoListState, data: Mapping[str, Any]) -> None:
    state.tasks.append(Task(task_id=data["taskId"], title=data["title"], added_at=data["addedAt"]))


def _completed(state: TodoListState, data: Mapping[str, Any]) -> None:
    task = state.find_task(data["taskId"])
    if task is not None:
        task.completed = True
        task.completed_at = data["completedAt"]


def _uncompleted(state: TodoListState, data: Mapping[str, Any]) -> None:
    task = state.find_task(data["taskId"])
    if task is not None:
        task.completed = False
        task.completed_at = None


def _deleted(state: TodoListState, data: Mapping[str, Any]) -> None:
    state.tasks = [t for t in state.tasks if t.task_id != data["taskId"]]


def _renamed(state: TodoListState, data: Mapping[str, Any]) -> None:
    task = state.find_task(data["taskId"])
    if task is not None:
        task.title = data["title"]


def _archived(state: TodoListState, data: Mapping[str, Any]) -> None:
    state.status = ListStatus.ARCHIVED
    state.archived_at = data["archivedAt"]


def _totals(state: TodoListState) -> None:
    state.total_tasks = len(state.tasks)
    state.completed_tasks = sum(1 for t in state.tasks if t.completed)


TODO_FOLD: Fold[TodoListState] = Fold(
    initial=lambda list_id: TodoListState(list_id=list_id),
    reducers={
        events.LIST_CREATED: _created,
        events.TASK_ADDED: _task_added,
        events.TASK_COMPLETED: _completed,
        events.TASK_UNCOMPLETED: _uncompleted,
        events.TASK_DELETED: _deleted,
        events.TASK_RENAMED: _renamed,
        events.LIST_ARCHIVED: _archived,
    },
    finalize=_totals,
)


def todo_projection(store: EventStore, context: EventContext) -> Projection[TodoListState]:
    return Projection(
        store,
        context,
        domain=events.DOMAIN,
        id_field=events.ID_FIELD,
        created_fact=events.LIST_CREATED,
        fold=TODO_FOLD,
    )


__all__ = ["ListStatus", "TODO_FOLD", "Task", "TodoListState", "todo_projection"]
