"""
Shared state for CLI commands.

The top-level callback stores a CliState on the typer context; commands
use it to open files with the requested decoder options.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from smfbrowser.browser import ErrorNode, MidiFileNode, TrackNode
from smfbrowser.config import DEFAULT_OPTIONS, DecoderOptions
from smfbrowser.formats.smf.reader import SMFReader

console = Console()


@dataclass
class CliState:
    """Options collected by the top-level callback."""

    options: DecoderOptions = field(default_factory=lambda: DEFAULT_OPTIONS)
    verbose: bool = False


def configure_logging(verbose: bool) -> None:
    """Route library log records through Rich."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("smfbrowser")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, level=level))


def get_state(ctx: typer.Context) -> CliState:
    root = ctx.find_root()
    if not isinstance(root.obj, CliState):
        root.obj = CliState()
    return root.obj


def open_midi(ctx: typer.Context, file: Path) -> MidiFileNode:
    """Open a MIDI file or exit with an error message."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    return SMFReader.read(file, get_state(ctx).options)


def select_track(midi: MidiFileNode, index: int) -> TrackNode:
    """
    Return the index-th MTrk chunk or exit with an error message.

    If the chunk listing stopped at a decode error before reaching the
    track, that error is reported instead of an index error.
    """
    tracks: List[TrackNode] = []
    error: Optional[ErrorNode] = None

    for node in midi.items():
        if isinstance(node, ErrorNode):
            error = node
        elif isinstance(node, TrackNode):
            tracks.append(node)

    if not 0 <= index < len(tracks):
        if error is not None:
            exit_with_error(
                error.error, hint=f"Chunk listing stopped after {len(tracks)} track(s)"
            )
        console.print(
            f"[red]Error: Track {index} out of range (file has {len(tracks)} track(s))[/red]"
        )
        raise typer.Exit(1)

    return tracks[index]


def exit_with_error(error: Exception, hint: Optional[str] = None) -> None:
    console.print(f"[red]Error: {error}[/red]")
    if hint:
        console.print(f"[dim]{hint}[/dim]")
    raise typer.Exit(1)
