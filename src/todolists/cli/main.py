"""
Top-level CLI commands: start, config.
"""

import json
import os
from typing import Optional

import typer

from todolists.config import Config


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from todolists.logger import setup_logging

    log_level = "DEBUG" if verbose else Config.LOG_LEVEL
    setup_logging(level=log_level, log_file=Config.LOG_FILE)


def register_commands(app: typer.Typer):
    """Register top-level commands on the main app."""

    @app.command()
    def start(
        host: str = typer.Option(Config.HOST, "--host", help="Interface to bind"),
        port: int = typer.Option(Config.PORT, "--port", "-p", help="Port to listen on"),
        reload: bool = typer.Option(
            False, "--reload", help="Restart the server when source files change"
        ),
        debug: bool = typer.Option(False, "--debug", help="Run server in debug mode"),
        secret: Optional[str] = typer.Option(
            None,
            "--secret",
            envvar="TODOLISTS_SESSION_SECRET",
            help="Key used to sign the session cookie",
        ),
    ):
        """Start the web server."""
        import uvicorn

        from todolists.logger import get_logger

        logger = get_logger(__name__)

        # Exported too so reloader subprocesses see the same settings
        if debug:
            Config.DEBUG = True
            os.environ["TODOLISTS_DEBUG"] = "1"
        if secret:
            Config.SESSION_SECRET = secret
            os.environ["TODOLISTS_SESSION_SECRET"] = secret
        if Config.uses_default_secret():
            logger.warning(
                "Using the default session secret; set TODOLISTS_SESSION_SECRET"
            )

        typer.echo(f"Starting Todolists on http://{host}:{port}")
        uvicorn.run(
            "todolists.server:app",
            host=host,
            port=port,
            reload=reload,
            log_level="debug" if debug else Config.LOG_LEVEL.lower(),
            log_config=None,
        )

    @app.command()
    def config(
        as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
    ):
        """Show the effective configuration (the session secret is never shown)."""
        settings = Config.as_dict()
        if as_json:
            typer.echo(json.dumps(settings, indent=2))
            return

        for key, value in settings.items():
            typer.echo(f"{key}: {value}")
