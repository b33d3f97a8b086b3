"""Display helpers used by the templates. None of these mutate their input."""

from typing import Optional, Sequence

from todolists.models import Todo, TodoList


def is_list_complete(todos: Sequence[Todo]) -> bool:
    """A list is complete when it has todos and all of them are done."""
    return len(todos) > 0 and all(todo.completed for todo in todos)


def count_incomplete(todos: Sequence[Todo]) -> int:
    return sum(1 for todo in todos if not todo.completed)


def list_class(todos: Sequence[Todo]) -> Optional[str]:
    """CSS class for a list entry."""
    return "complete" if is_list_complete(todos) else None


def sorted_lists(lists: Sequence[TodoList]) -> list[tuple[TodoList, int]]:
    """
    Incomplete lists first, then complete ones.

    Both groups keep their original relative order, and every entry carries
    the list's original index so links keep addressing the right list.
    """
    indexed = list(enumerate(lists))
    incomplete = [(lst, i) for i, lst in indexed if not is_list_complete(lst.todos)]
    complete = [(lst, i) for i, lst in indexed if is_list_complete(lst.todos)]
    return incomplete + complete


def sorted_todos(todos: Sequence[Todo]) -> list[tuple[Todo, int]]:
    """Incomplete todos first, then completed ones, with original indices."""
    indexed = list(enumerate(todos))
    incomplete = [(todo, i) for i, todo in indexed if not todo.completed]
    complete = [(todo, i) for i, todo in indexed if todo.completed]
    return incomplete + complete
