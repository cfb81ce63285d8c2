"""Todo – subject prefix and event facts."""
from typing import Final

DOMAIN: Final = "todo"
ID_FIELD: Final = "listId"

LIST_CREATED: Final = "list-created"
TASK_ADDED: Final = "task-added"
TASK_COMPLETED: Final = "task-completed"
TASK_UNCOMPLETED: Final = "task-uncompleted"
TASK_DELETED: Final = "task-deleted"
TASK_RENAMED: Final = "task-renamed"
LIST_ARCHIVED: Final = "list-archived"
