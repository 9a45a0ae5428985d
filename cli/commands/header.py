"""
Header command - decode the MThd chunk.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.context import exit_with_error, open_midi
from cli.display.tables import display_header
from smfbrowser.browser import HeaderNode
from smfbrowser.errors import SMFDecodeError

console = Console()
app = typer.Typer()


@app.command()
def header(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file"),
) -> None:
    """
    Show format, track count and division from the MThd chunk.

    Examples:

        smfbrowse header song.mid
    """
    midi = open_midi(ctx, file)

    try:
        descriptor = next((d for d in midi.chunks() if d.is_header), None)
        if descriptor is None:
            console.print("[red]Error: No MThd chunk found[/red]")
            raise typer.Exit(1)
        display_header(HeaderNode(midi.source, descriptor, midi.options))
    except SMFDecodeError as e:
        exit_with_error(e)
