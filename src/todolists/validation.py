"""
Name validation for lists and todos.

The checks are pure: they return an error instance or ``None`` and never
touch session state. Names are expected to be trimmed by the caller.
"""

from typing import Iterable, Optional

from todolists.config import Config
from todolists.models import TodoList


class ValidationError(Exception):
    """Raised or returned when user input fails validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidLength(ValidationError):
    """Name is empty or longer than the allowed maximum."""


class DuplicateName(ValidationError):
    """Another list already uses this name."""


class NotFound(Exception):
    """An index does not address an existing list or todo."""

    def __init__(self, message: str = "The specified list was not found."):
        super().__init__(message)
        self.message = message


def _length_ok(name: str) -> bool:
    return Config.MIN_NAME_LENGTH <= len(name) <= Config.MAX_NAME_LENGTH


def validate_list_name(
    name: str, existing_lists: Iterable[TodoList]
) -> Optional[ValidationError]:
    """
    Check a list name for length and uniqueness.

    Uniqueness is an exact, case-sensitive comparison against every
    existing list, including the one being renamed.
    """
    if not _length_ok(name):
        return InvalidLength(
            f"List name must be between {Config.MIN_NAME_LENGTH} and "
            f"{Config.MAX_NAME_LENGTH} characters."
        )

    if any(todo_list.name == name for todo_list in existing_lists):
        return DuplicateName("List name must be unique.")

    return None


def validate_todo_name(name: str) -> Optional[ValidationError]:
    """Check a todo name for length."""
    if not _length_ok(name):
        return InvalidLength(
            f"Todo must be between {Config.MIN_NAME_LENGTH} and "
            f"{Config.MAX_NAME_LENGTH} characters."
        )
    return None
