"""
Starlette-based web server for the Todolists application.

This server renders HTML pages for the following routes:
- /lists: Overview of all lists, creating a list
- /lists/{index}: View, rename, and delete a single list
- /lists/{index}/todos: Add, check, and delete todos
- /lists/{index}/check_all: Complete every todo in a list
- /health: Liveness check

All state lives in the signed session cookie managed by SessionMiddleware.
"""

from typing import Optional

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.routing import Route

from todolists.config import Config
from todolists.logger import get_logger, setup_logging
from todolists.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from todolists.routes.health_routes import health_check
from todolists.routes.list_routes import (
    create_list,
    delete_list,
    edit_list_form,
    index,
    new_list_form,
    show_list,
    show_lists,
    update_list,
)
from todolists.routes.todo_routes import (
    complete_all,
    create_todo,
    delete_todo,
    update_todo,
)
from todolists.templating import templates
from todolists.validation import NotFound

logger = get_logger(__name__)


async def not_found(request: Request, exc: NotFound):
    """Render the not-found page for an index that addresses nothing."""
    logger.warning(f"Not found: {request.method} {request.url.path}: {exc.message}")
    return templates.TemplateResponse(
        request, "not_found.html", {"message": exc.message}, status_code=404
    )


async def http_not_found(request: Request, exc: HTTPException):
    logger.warning(f"No route for {request.method} {request.url.path}")
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"message": "The requested page was not found."},
        status_code=404,
    )


routes = [
    Route("/", index, methods=["GET"]),
    Route("/health", health_check, methods=["GET"]),
    Route("/lists", show_lists, methods=["GET"]),
    Route("/lists", create_list, methods=["POST"]),
    Route("/lists/new", new_list_form, methods=["GET"]),
    Route("/lists/{index:int}", show_list, methods=["GET"]),
    Route("/lists/{index:int}", update_list, methods=["POST"]),
    Route("/lists/{index:int}/edit", edit_list_form, methods=["GET"]),
    Route("/lists/{index:int}/delete", delete_list, methods=["POST"]),
    Route("/lists/{index:int}/check_all", complete_all, methods=["POST"]),
    Route("/lists/{index:int}/todos", create_todo, methods=["POST"]),
    Route(
        "/lists/{index:int}/todos/{todo_index:int}", update_todo, methods=["POST"]
    ),
    Route(
        "/lists/{index:int}/todos/{todo_index:int}/delete",
        delete_todo,
        methods=["POST"],
    ),
]


def create_app(
    secret_key: Optional[str] = None, debug: Optional[bool] = None
) -> Starlette:
    """
    Build the application.

    Args:
        secret_key: Key used to sign the session cookie. Defaults to
            ``Config.SESSION_SECRET``.
        debug: Starlette debug mode. Defaults to ``Config.DEBUG``.
    """
    return Starlette(
        debug=Config.DEBUG if debug is None else debug,
        routes=routes,
        middleware=[
            Middleware(RequestLoggingMiddleware),
            Middleware(SecurityHeadersMiddleware),
            Middleware(
                SessionMiddleware,
                secret_key=secret_key or Config.SESSION_SECRET,
                session_cookie=Config.SESSION_COOKIE,
                max_age=Config.SESSION_MAX_AGE,
                same_site="lax",
            ),
        ],
        exception_handlers={
            NotFound: not_found,
            404: http_not_found,
        },
    )


app = create_app()


def main():
    """Run the server with settings from ``Config``."""
    import uvicorn

    setup_logging(level=Config.LOG_LEVEL, log_file=Config.LOG_FILE)
    if Config.uses_default_secret():
        logger.warning("Using the default session secret; set TODOLISTS_SESSION_SECRET")

    logger.info(f"Starting Todolists server on http://{Config.HOST}:{Config.PORT}")
    # log_config=None keeps the loguru handlers installed by setup_logging
    uvicorn.run(
        app,
        host=Config.HOST,
        port=Config.PORT,
        log_level=Config.LOG_LEVEL.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
