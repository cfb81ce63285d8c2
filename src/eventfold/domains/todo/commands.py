"""Todo – command payloads and handlers."""
from __future__ import annotations

from typing import Any

from eventfold.application.cqrs import CommandHandler, CommandSchema, Identifier, bounded
from eventfold.application.event_sourcing import EventContext, EventStore
from eventfold.config import AppSettings
from eventfold.domains.todo import events

ListName = bounded(1, 100)
Title = bounded(1, 200)


class CreateList(CommandSchema):
    list_id: Identifier
    name: ListName


class AddTask(CommandSchema):
    list_id: Identifier
    task_id: Identifier
    title: Title


class TaskRef(CommandSchema):
    """Payload shared by the commands that only point at a task."""

    list_id: Identifier
    task_id: Identifier


class RenameTask(CommandSchema):
    list_id: Identifier
    task_id: Identifier
    title: Title


class ArchiveList(CommandSchema):
    list_id: Identifier


class _TodoHandler(CommandHandler[Any]):
    domain = events.DOMAIN
    id_field = "list_id"

    def log_fields(self, payload: Any) -> dict[str, Any]:
        fields = super().log_fields(payload)
        task_id = getattr(payload, "task_id", None)
        if task_id is not None:
            fields["task_id"] = task_id
        return fields


class CreateListHandler(_TodoHandler):
    command_type = "create-list"
    schema = CreateList
    fact = events.LIST_CREATED
    timestamp_field = "createdAt"
    log_event = "list_created"
    creates = True


class AddTaskHandler(_TodoHandler):
    command_type = "add-task"
    schema = AddTask
    fact = events.TASK_ADDED
    timestamp_field = "addedAt"
    log_event = "task_added"


class CompleteTaskHandler(_TodoHandler):
    command_type = "complete-task"
    schema = TaskRef
    fact = events.TASK_COMPLETED
    timestamp_field = "completedAt"
    log_event = "task_completed"


class UncompleteTaskHandler(_TodoHandler):
    command_type = "uncomplete-task"
    schema = TaskRef
    fact = events.TASK_UNCOMPLETED
    timestamp_field = "uncompletedAt"
    log_event = "task_uncompleted"


class DeleteTaskHandler(_TodoHandler):
    command_type = "delete-task"
    schema = TaskRef
    fact = events.TASK_DELETED
    timestamp_field = "deletedAt"
    log_event = "task_deleted"


class RenameTaskHandler(_TodoHandler):
    command_type = "rename-task"
    schema = RenameTask
    fact = events.TASK_RENAMED
    timestamp_field = "renamedAt"
    log_event = "task_renamed"


class ArchiveListHandler(_TodoHandler):
    command_type = "archive-list"
    schema = ArchiveList
    fact = events.LIST_ARCHIVED
    timestamp_field = "archivedAt"
    log_event = "list_archived"


HANDLERS: tuple[type[_TodoHandler], ...] = (
    CreateListHandler,
    AddTaskHandler,
    CompleteTaskHandler,
    UncompleteTaskHandler,
    DeleteTaskHandler,
    RenameTaskHandler,
    ArchiveListHandler,
)


def command_handlers(
    store: EventStore,
    context: EventContext,
    settings: AppSettings,  # noqa: ARG001
) -> list[CommandHandler[Any]]:
    return [cls(store, context) for cls in HANDLERS]


__all__ = [
    "AddTask",
    "ArchiveList",
    "CreateList",
    "HANDLERS",
    "RenameTask",
    "TaskRef",
    "command_handlers",
]
