"""
List and todo mutators.

Every operation takes the visitor's ``TodoSession`` explicitly. Operations
that validate input return the validation error (and leave state untouched)
or ``None`` on success. Index lookups raise ``NotFound`` before anything is
changed.
"""

from typing import Optional

from todolists.logger import get_logger
from todolists.models import Todo, TodoList
from todolists.session import TodoSession
from todolists.validation import (
    NotFound,
    ValidationError,
    validate_list_name,
    validate_todo_name,
)

logger = get_logger(__name__)


def get_list(session: TodoSession, index: int) -> TodoList:
    """Return the list at ``index`` or raise ``NotFound``."""
    if not 0 <= index < len(session.lists):
        raise NotFound("The specified list was not found.")
    return session.lists[index]


def get_todo(session: TodoSession, list_index: int, todo_index: int) -> Todo:
    """Return a todo by position or raise ``NotFound``."""
    todo_list = get_list(session, list_index)
    if not 0 <= todo_index < len(todo_list.todos):
        raise NotFound("The specified todo was not found.")
    return todo_list.todos[todo_index]


# ─── Lists ───────────────────────────────────────────────────────────


def create_list(session: TodoSession, name: str) -> Optional[ValidationError]:
    """Append a new empty list named ``name``."""
    error = validate_list_name(name, session.lists)
    if error:
        return error

    session.lists.append(TodoList(name=name))
    logger.debug(f"Created list {len(session.lists) - 1}: {name!r}")
    return None


def rename_list(
    session: TodoSession, index: int, new_name: str
) -> Optional[ValidationError]:
    """
    Rename the list at ``index`` in place.

    The uniqueness check covers the list's own name as well, so renaming a
    list to the name it already has is rejected as a duplicate.
    """
    todo_list = get_list(session, index)
    error = validate_list_name(new_name, session.lists)
    if error:
        return error

    todo_list.name = new_name
    logger.debug(f"Renamed list {index} to {new_name!r}")
    return None


def delete_list(session: TodoSession, index: int) -> TodoList:
    """Remove the list at ``index``; later lists shift down by one."""
    get_list(session, index)
    removed = session.lists.pop(index)
    logger.debug(f"Deleted list {index}: {removed.name!r}")
    return removed


# ─── Todos ───────────────────────────────────────────────────────────


def add_todo(
    session: TodoSession, list_index: int, name: str
) -> Optional[ValidationError]:
    """Append an incomplete todo to the list at ``list_index``."""
    todo_list = get_list(session, list_index)
    error = validate_todo_name(name)
    if error:
        return error

    todo_list.todos.append(Todo(name=name))
    logger.debug(f"Added todo to list {list_index}: {name!r}")
    return None


def set_todo_completed(
    session: TodoSession, list_index: int, todo_index: int, completed: bool
) -> None:
    """Set the completed flag of a single todo."""
    todo = get_todo(session, list_index, todo_index)
    todo.completed = completed
    logger.debug(f"Todo {list_index}/{todo_index} completed={completed}")


def delete_todo(session: TodoSession, list_index: int, todo_index: int) -> Todo:
    """Remove a todo; later todos in the same list shift down by one."""
    get_todo(session, list_index, todo_index)
    removed = session.lists[list_index].todos.pop(todo_index)
    logger.debug(f"Deleted todo {list_index}/{todo_index}: {removed.name!r}")
    return removed


def complete_all_todos(session: TodoSession, list_index: int) -> None:
    """Mark every todo in the list as completed."""
    todo_list = get_list(session, list_index)
    for todo in todo_list.todos:
        todo.completed = True
    logger.debug(f"Completed all {len(todo_list.todos)} todos in list {list_index}")
