"""
Pydantic models for lists and todos.

Both types are addressed by their position in the containing sequence,
not by an id. They round-trip through the session cookie as plain JSON.
"""

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """A single item in a list."""

    name: str
    completed: bool = False


class TodoList(BaseModel):
    """A named, ordered collection of todos."""

    name: str
    todos: list[Todo] = Field(default_factory=list)
