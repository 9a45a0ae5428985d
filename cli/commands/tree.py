"""
Tree command - file, chunks and events as a tree.
"""

from pathlib import Path

import typer

from cli.context import open_midi
from cli.display.tables import display_tree

app = typer.Typer()


@app.command()
def tree(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file"),
    show_events: bool = typer.Option(
        True, "--events/--no-events", help="Expand tracks into their events"
    ),
    limit: int = typer.Option(0, "--limit", "-n", help="Maximum events per track (0=all)"),
) -> None:
    """
    Show the file as a tree of chunks and events.

    Each track is decoded on its own: an error in one track is shown on
    that track's branch and the other tracks are still listed.

    Examples:

        smfbrowse tree song.mid

        smfbrowse tree song.mid --no-events
    """
    midi = open_midi(ctx, file)
    display_tree(midi, show_events, limit)
