"""
Export command - write a track's note-ons as hex records.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.context import exit_with_error, open_midi, select_track
from smfbrowser.errors import SMFDecodeError
from smfbrowser.export.note_export import DEFAULT_EXPORT_FILENAME

console = Console()
app = typer.Typer()


@app.command()
def export(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file"),
    track: int = typer.Option(0, "--track", "-t", help="Track index (0-based, MTrk chunks only)"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=f"Output file (default: {DEFAULT_EXPORT_FILENAME})"
    ),
) -> None:
    """
    Export a track's Note On events with accumulated delays.

    Each note becomes four hex fields (delay, channel, key, velocity);
    End Of Track becomes the f2 terminator.

    Examples:

        smfbrowse export song.mid --track 1

        smfbrowse export song.mid -t 1 -o melody.xml
    """
    midi = open_midi(ctx, file)
    node = select_track(midi, track)
    output_path = output or Path(DEFAULT_EXPORT_FILENAME)

    try:
        count = node.execute("Export", output=output_path)
    except SMFDecodeError as e:
        exit_with_error(e, hint=f"{output_path} may be incomplete")

    console.print(f"[green]Exported {count} record(s) to {output_path}[/green]")
