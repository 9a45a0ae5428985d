"""
Dump command - hex dump of one chunk.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.context import exit_with_error, open_midi
from cli.display.hex_view import display_hex_dump
from smfbrowser.errors import SMFDecodeError

console = Console()
app = typer.Typer()


@app.command()
def dump(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="MIDI file"),
    chunk: int = typer.Option(0, "--chunk", "-c", help="Chunk index (0-based, all chunk kinds)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    lines: int = typer.Option(32, "--lines", "-l", help="Maximum lines (0=all)"),
) -> None:
    """
    Hex dump of one chunk, prologue included.

    Examples:

        smfbrowse dump song.mid

        smfbrowse dump song.mid --chunk 2 --lines 0
    """
    midi = open_midi(ctx, file)

    try:
        descriptors = list(midi.chunks())
    except SMFDecodeError as e:
        exit_with_error(e)

    if not 0 <= chunk < len(descriptors):
        console.print(
            f"[red]Error: Chunk {chunk} out of range (file has {len(descriptors)})[/red]"
        )
        raise typer.Exit(1)

    node = midi.node_for(descriptors[chunk])
    descriptor = node.descriptor
    title = (
        f"{descriptor.type_tag} #{chunk} @ 0x{descriptor.start_offset:06X} "
        f"({descriptor.declared_length} bytes)"
    )
    display_hex_dump(
        node.raw,
        title=title,
        start_offset=descriptor.start_offset,
        bytes_per_line=width,
        max_lines=lines,
    )
