"""Server commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer()
console = Console()


@app.command("start")
def start_server(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file",
    ),
):
    """Start the PO to CSV conversion API server."""
    from src.po2csv.config import ConverterConfig
    from src.po2csv.web.server import run_server

    try:
        config = ConverterConfig.load(config_path)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    host = host or config.host
    port = port or config.port

    console.print("\n[bold]Starting po2csv Server[/bold]\n")
    console.print(f"  Host: {host}")
    console.print(f"  Port: {port}")
    console.print()
    console.print(f"API documentation will be available at http://{host}:{port}/docs")
    console.print()

    run_server(host=host, port=port, config=config)
