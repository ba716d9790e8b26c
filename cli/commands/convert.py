"""Convert commands for turning PO files into CSV."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

app = typer.Typer()
console = Console()


@app.command("file")
def convert_file(
    input_file: Path = typer.Argument(..., help="PO file to convert"),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: next to the input file)",
    ),
    show_preview: bool = typer.Option(
        False,
        "--preview/--no-preview",
        help="Print the start of the generated CSV",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (default from config)",
    ),
):
    """Convert a PO file into a key/source/target CSV file."""
    from src.po2csv.config import ConverterConfig
    from src.po2csv.converter import LOADED_STATUS, convert_file, status_for_error
    from src.po2csv.utils.logging import setup_logging_from_config

    try:
        config = ConverterConfig.load(config_path)
    except Exception as e:
        console.print(f"[red]{escape(status_for_error(e))}[/red]")
        raise typer.Exit(1)

    setup_logging_from_config(config, level=log_level)

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {escape(str(input_file))}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Selected: {escape(input_file.name)}[/bold]")
    console.print(LOADED_STATUS)

    try:
        result = convert_file(input_file, output_dir=output_dir, config=config)
    except Exception as e:
        console.print(f"[red]{escape(status_for_error(e))}[/red]")
        raise typer.Exit(1)

    if show_preview:
        console.print("\n[bold]Preview[/bold]\n")
        console.print(result.preview, markup=False, highlight=False)

    console.print(f"\n[bold green]{result.status}[/bold green]")
    console.print(f"Saved: {result.output_path}")


@app.command("preview")
def preview_records(
    input_file: Path = typer.Argument(..., help="PO file to inspect"),
    count: int = typer.Option(10, "--count", "-n", help="Number of rows to show"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file",
    ),
):
    """Show the records a PO file would produce, without writing a CSV."""
    from src.po2csv.config import ConverterConfig
    from src.po2csv.converter import EmptyInputError, status_for_error
    from src.po2csv.parser import parse_po_file

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {escape(str(input_file))}[/red]")
        raise typer.Exit(1)

    try:
        config = ConverterConfig.load(config_path)
        records = parse_po_file(input_file, encoding=config.encoding)
        if not records:
            raise EmptyInputError()
    except Exception as e:
        console.print(f"[red]{escape(status_for_error(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Records in {escape(input_file.name)}[/bold]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("key")
    table.add_column("source")
    table.add_column("target")

    for record in records[:count]:
        table.add_row(Text(record.key), Text(record.source), Text(record.target))

    console.print(table)
    console.print(f"\nShowing {min(count, len(records))} of {len(records)} records")
