"""
Info command - summary of a MIDI file.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.context import get_state
from cli.display.tables import display_file_info
from smfbrowser.formats.smf.reader import SMFReader

console = Console()
app = typer.Typer()


@app.command()
def info(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file to inspect"),
) -> None:
    """
    Show a summary of a MIDI file without decoding its tracks.

    Examples:

        smfbrowse info song.mid
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    file_info = SMFReader.get_file_info(file, get_state(ctx).options)
    display_file_info(file_info, str(file))

    if not file_info["valid"]:
        raise typer.Exit(1)
