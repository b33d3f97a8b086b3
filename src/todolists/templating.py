"""
Jinja2 environment and the small request/response glue shared by routes.

Handlers read their form fields first, then load the session state, mutate
it, and finish with either ``render`` or ``redirect``. Both write the state
back into ``request.session`` before the response is returned.
"""

from pathlib import Path
from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import RedirectResponse
from starlette.templating import Jinja2Templates

from todolists import helpers
from todolists.config import Config
from todolists.session import TodoSession

TEMPLATE_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.globals.update(
    title=Config.TITLE,
    is_list_complete=helpers.is_list_complete,
    count_incomplete=helpers.count_incomplete,
    list_class=helpers.list_class,
    sorted_lists=helpers.sorted_lists,
    sorted_todos=helpers.sorted_todos,
)


def load_state(request: Request) -> TodoSession:
    return TodoSession.load(request.session)


async def form_field(request: Request, name: str) -> str:
    """Return a trimmed form value; a missing field reads as empty."""
    form = await request.form()
    value = form.get(name)
    return value.strip() if isinstance(value, str) else ""


def render(
    request: Request,
    state: TodoSession,
    template: str,
    context: Optional[dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render a page, consuming the flash messages for this cycle."""
    messages = state.pop_messages()
    state.save(request.session)
    page_context = {"lists": state.lists, **messages, **(context or {})}
    return templates.TemplateResponse(
        request, template, page_context, status_code=status_code
    )


def redirect(
    request: Request, state: TodoSession, url: str, success: Optional[str] = None
) -> RedirectResponse:
    """Store an optional success message and redirect with 303 See Other."""
    if success:
        state.success = success
    state.save(request.session)
    return RedirectResponse(url, status_code=303)
