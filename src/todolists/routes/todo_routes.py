"""
Todo-related routes.

This module handles todo items within a list:
- Adding a todo
- Checking or unchecking a todo
- Deleting a todo
- Completing every todo in a list
"""

from starlette.requests import Request

from todolists import lists as ops
from todolists.logger import get_logger
from todolists.templating import form_field, load_state, redirect, render

logger = get_logger(__name__)


async def create_todo(request: Request):
    """Add a todo from the ``todo`` form field."""
    list_index = request.path_params["index"]
    name = await form_field(request, "todo")
    state = load_state(request)

    error = ops.add_todo(state, list_index, name)
    if error:
        logger.info(f"Rejected todo for list {list_index}: {error.message}")
        state.error = error.message
        return render(
            request,
            state,
            "list.html",
            {
                "todo_list": state.lists[list_index],
                "list_index": list_index,
                "todo_name": name,
            },
            status_code=422,
        )

    return redirect(request, state, f"/lists/{list_index}", "Todo has been created.")


async def update_todo(request: Request):
    """Set a todo's completed flag; only the literal "true" checks it."""
    list_index = request.path_params["index"]
    todo_index = request.path_params["todo_index"]
    completed = await form_field(request, "completed") == "true"
    state = load_state(request)

    ops.set_todo_completed(state, list_index, todo_index, completed)
    return redirect(request, state, f"/lists/{list_index}", "Todo updated.")


async def delete_todo(request: Request):
    list_index = request.path_params["index"]
    todo_index = request.path_params["todo_index"]
    state = load_state(request)

    ops.delete_todo(state, list_index, todo_index)
    return redirect(
        request, state, f"/lists/{list_index}", "Todo has been successfully deleted."
    )


async def complete_all(request: Request):
    list_index = request.path_params["index"]
    state = load_state(request)

    ops.complete_all_todos(state, list_index)
    return redirect(request, state, f"/lists/{list_index}", "All todos completed.")
