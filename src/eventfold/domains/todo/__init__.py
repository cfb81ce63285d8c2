"""Todo domain – task lists."""
from eventfold.domains.todo.commands import HANDLERS, command_handlers
from eventfold.domains.todo.projection import (
    TODO_FOLD,
    ListStatus,
    Task,
    TodoListState,
    todo_projection,
)

__all__ = [
    "HANDLERS",
    "ListStatus",
    "TODO_FOLD",
    "Task",
    "TodoListState",
    "command_handlers",
    "todo_projection",
]
