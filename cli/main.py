"""Main CLI entry point for po2csv."""

import typer
from rich.console import Console

from cli.commands import convert, serve

# Create main app
app = typer.Typer(
    name="po2csv",
    help="Convert gettext PO files into key/source/target CSV",
    add_completion=False,
)

console = Console()

# Add command groups
app.add_typer(convert.app, name="convert", help="Convert PO files to CSV")
app.add_typer(serve.app, name="serve", help="Run the conversion server")


@app.command()
def version():
    """Show version information."""
    from src.po2csv import __version__

    console.print(f"po2csv version {__version__}")


if __name__ == "__main__":
    app()
