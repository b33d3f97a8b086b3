"""
Per-visitor session state.

``TodoSession`` is loaded from the Starlette session dict at the start of a
request, handed to the mutators, and written back before the response is
built. The session dict itself only ever holds JSON-compatible values.
"""

from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional

from pydantic import ValidationError as PydanticValidationError

from todolists.logger import get_logger
from todolists.models import TodoList

logger = get_logger(__name__)

LISTS_KEY = "lists"
ERROR_KEY = "error"
SUCCESS_KEY = "success"


@dataclass
class TodoSession:
    """Lists plus the one-shot status messages for a single visitor."""

    lists: list[TodoList] = field(default_factory=list)
    error: Optional[str] = None
    success: Optional[str] = None

    @classmethod
    def load(cls, data: MutableMapping[str, Any]) -> "TodoSession":
        """Build state from a session dict; a fresh session has no lists."""
        raw_lists = data.get(LISTS_KEY) or []
        try:
            lists = [TodoList.model_validate(item) for item in raw_lists]
        except PydanticValidationError as e:
            logger.warning(f"Discarding malformed session lists: {e}")
            lists = []

        return cls(
            lists=lists,
            error=data.get(ERROR_KEY),
            success=data.get(SUCCESS_KEY),
        )

    def save(self, data: MutableMapping[str, Any]) -> None:
        """Write state back into the session dict."""
        data[LISTS_KEY] = [
            todo_list.model_dump(mode="json") for todo_list in self.lists
        ]
        for key, value in ((ERROR_KEY, self.error), (SUCCESS_KEY, self.success)):
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value

    def pop_messages(self) -> dict[str, Optional[str]]:
        """Return and clear the flash messages."""
        messages = {"error": self.error, "success": self.success}
        self.error = None
        self.success = None
        return messages
