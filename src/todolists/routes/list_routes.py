"""
List-related routes.

This module handles the list pages and forms:
- Overview of all lists
- Creating, renaming, and deleting a list
"""

from starlette.requests import Request
from starlette.responses import RedirectResponse

from todolists import lists as ops
from todolists.logger import get_logger
from todolists.templating import form_field, load_state, redirect, render

logger = get_logger(__name__)


async def index(request: Request) -> RedirectResponse:
    return RedirectResponse("/lists", status_code=302)


async def show_lists(request: Request):
    """Render every list, incomplete ones first."""
    state = load_state(request)
    return render(request, state, "lists.html")


async def new_list_form(request: Request):
    state = load_state(request)
    return render(request, state, "new_list.html")


async def show_list(request: Request):
    """Render a single list and its todos."""
    index = request.path_params["index"]
    state = load_state(request)
    todo_list = ops.get_list(state, index)
    return render(
        request, state, "list.html", {"todo_list": todo_list, "list_index": index}
    )


async def edit_list_form(request: Request):
    index = request.path_params["index"]
    state = load_state(request)
    todo_list = ops.get_list(state, index)
    return render(
        request,
        state,
        "edit_list.html",
        {"todo_list": todo_list, "list_index": index, "list_name": todo_list.name},
    )


async def create_list(request: Request):
    """
    Create a list from the ``list_name`` form field.

    On a validation error the form is shown again with the message and the
    submitted value; nothing is stored.
    """
    list_name = await form_field(request, "list_name")
    state = load_state(request)

    error = ops.create_list(state, list_name)
    if error:
        logger.info(f"Rejected new list name: {error.message}")
        state.error = error.message
        return render(
            request, state, "new_list.html", {"list_name": list_name}, status_code=422
        )

    return redirect(request, state, "/lists", "List has been created.")


async def update_list(request: Request):
    """Rename a list from the ``list_name`` form field."""
    index = request.path_params["index"]
    list_name = await form_field(request, "list_name")
    state = load_state(request)

    error = ops.rename_list(state, index, list_name)
    if error:
        logger.info(f"Rejected rename of list {index}: {error.message}")
        state.error = error.message
        return render(
            request,
            state,
            "edit_list.html",
            {
                "todo_list": state.lists[index],
                "list_index": index,
                "list_name": list_name,
            },
            status_code=422,
        )

    return redirect(request, state, f"/lists/{index}", "List has been updated.")


async def delete_list(request: Request):
    index = request.path_params["index"]
    state = load_state(request)
    ops.delete_list(state, index)
    return redirect(request, state, "/lists", "List has been successfully deleted.")
