"""
Events command - decode the events of one track.
"""

from itertools import islice
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.context import exit_with_error, open_midi, select_track
from cli.display.tables import display_events, display_properties
from smfbrowser.errors import SMFDecodeError

console = Console()
app = typer.Typer()


@app.command()
def events(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file"),
    track: int = typer.Option(0, "--track", "-t", help="Track index (0-based, MTrk chunks only)"),
    limit: int = typer.Option(0, "--limit", "-n", help="Maximum events to show (0=all)"),
    event: Optional[int] = typer.Option(
        None, "--event", "-e", help="Show the properties of one event (0-based)"
    ),
) -> None:
    """
    Decode and list the events of one track.

    Shows absolute tick, delta-time, kind and a description of each
    event. A decode error ends the listing with a red error line.

    Examples:

        smfbrowse events song.mid

        smfbrowse events song.mid --track 2 --limit 50

        smfbrowse events song.mid -t 1 --event 3
    """
    midi = open_midi(ctx, file)
    node = select_track(midi, track)

    if event is None:
        display_events(node, track, limit)
        return

    try:
        selected = next(islice(node.events(), event, None), None) if event >= 0 else None
    except SMFDecodeError as e:
        exit_with_error(e)

    if selected is None:
        console.print(f"[red]Error: Event {event} out of range[/red]")
        raise typer.Exit(1)

    display_properties(selected.describe(), selected.properties())
