"""
Chunks command - list the top-level chunks of a MIDI file.
"""

from pathlib import Path

import typer

from cli.context import open_midi
from cli.display.tables import display_chunk_table

app = typer.Typer()


@app.command()
def chunks(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file to scan"),
) -> None:
    """
    List chunks with their tag, offset and declared length.

    Chunk bodies are skipped, not decoded.

    Examples:

        smfbrowse chunks song.mid

        smfbrowse --strict chunks damaged.mid
    """
    midi = open_midi(ctx, file)
    display_chunk_table(midi)
