"""
Todolists CLI.

Commands:
- start:  run the web server
- config: show the effective configuration
"""

import typer

from todolists.cli.main import configure_logging, register_commands

app = typer.Typer(help="Todolists - session-backed todo list manager")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    Todolists - session-backed todo list manager.
    """
    configure_logging(verbose)


register_commands(app)

if __name__ == "__main__":
    app()
