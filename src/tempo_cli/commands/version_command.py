"""Command 'version' of tempo"""

import typer

from tempo_cli import __version__
from tempo_cli.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
