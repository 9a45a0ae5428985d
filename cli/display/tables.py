"""
Rich table displays for MIDI file information.

Provides formatted output for chunk listings, headers, events and the
file tree.
"""

from itertools import islice
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.tree import Tree
from rich import box
from rich.markup import escape

from smfbrowser.browser import (
    ErrorNode,
    HeaderNode,
    MidiFileNode,
    TrackNode,
)
from smfbrowser.errors import SMFDecodeError
from smfbrowser.formats.smf.chunks import chunk_span
from cli.display.formatters import (
    event_detail,
    event_kind,
    event_style,
    format_property_value,
)

console = Console()


def display_file_info(info: dict, filepath: str) -> None:
    """Display the summary returned by SMFReader.get_file_info."""
    status = "[green]Valid[/green]" if info["valid"] else "[red]Invalid[/red]"

    lines = [
        f"[bold]File:[/bold] {filepath}",
        f"[bold]Status:[/bold] {status}",
        f"[bold]File Size:[/bold] {info['size']} bytes",
        f"[bold]Chunks:[/bold] {info['chunks']}",
        f"[bold]Tracks Found:[/bold] {info['tracks']}",
    ]
    if "format" in info:
        lines.append(f"[bold]Format:[/bold] {info['format']}")
        lines.append(f"[bold]Tracks Declared:[/bold] {info['track_count']}")
        lines.append(f"[bold]Division:[/bold] {info['division']}")
    if info.get("unknown_chunks"):
        lines.append(f"[bold]Unknown Chunks:[/bold] {info['unknown_chunks']}")
    if "error" in info:
        lines.append(f"[bold red]Error:[/bold red] {info['error']}")

    console.print(
        Panel(
            "\n".join(lines),
            title="[bold blue]MIDI File Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_chunk_table(midi: MidiFileNode) -> None:
    """Display one row per chunk: index, tag, offset, length."""
    table = Table(title="Chunks", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Tag", style="cyan", width=6)
    table.add_column("Offset", width=10)
    table.add_column("Length", justify="right", width=10)
    table.add_column("Kind", width=10)

    total = 0
    error: Optional[ErrorNode] = None

    for index, node in enumerate(midi.items()):
        if isinstance(node, ErrorNode):
            error = node
            break
        descriptor = node.descriptor
        if isinstance(node, HeaderNode):
            kind = "Header"
        elif isinstance(node, TrackNode):
            kind = "Track"
        else:
            kind = "[yellow]Unknown[/yellow]"
        table.add_row(
            str(index),
            descriptor.type_tag,
            f"0x{descriptor.start_offset:06X}",
            str(descriptor.declared_length),
            kind,
        )
        total += chunk_span(descriptor)

    console.print(table)
    console.print(f"[dim]{total} of {len(midi.source)} bytes covered by chunks[/dim]")

    if error is not None:
        console.print(f"[red]{error.describe()}[/red]")


def display_header(node: HeaderNode) -> None:
    """Display a decoded MThd header."""
    header = node.header()

    if header.is_smpte:
        timing = f"{header.smpte_format} fps, {header.ticks_per_frame} ticks/frame"
    else:
        timing = f"{header.ticks_per_quarter} ticks per quarter note"

    content = f"""[bold]Format:[/bold] {header.format} ({header.format_name})
[bold]Tracks:[/bold] {header.track_count}
[bold]Division:[/bold] 0x{header.division:04X} ({timing})"""

    console.print(
        Panel(content, title="[bold cyan]MThd[/bold cyan]", border_style="cyan", expand=False)
    )


def display_events(track: TrackNode, index: int, limit: int = 0) -> None:
    """
    Display the events of one track.

    Args:
        track: Track to decode
        index: Track number shown in the title
        limit: Maximum events shown (0 = all)
    """
    table = Table(
        title=f"Track {index} @ 0x{track.descriptor.start_offset:06X}",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", width=5)
    table.add_column("Tick", justify="right", width=8)
    table.add_column("Delta", justify="right", width=6)
    table.add_column("Kind", width=8)
    table.add_column("Event", width=24)
    table.add_column("Detail")

    tick = 0
    shown = 0
    error: Optional[ErrorNode] = None
    items = track.items()
    if limit > 0:
        items = islice(items, limit)

    for item in items:
        if isinstance(item, ErrorNode):
            error = item
            break
        tick += item.delta_time
        table.add_row(
            str(shown),
            str(tick),
            str(item.delta_time),
            event_kind(item),
            item.label,
            event_detail(item),
            style=event_style(item),
        )
        shown += 1

    console.print(table)

    if error is not None:
        console.print(f"[red]{error.describe()}[/red]")


def display_properties(title: str, properties: dict) -> None:
    """Display a property set as a two-column table."""
    table = Table(title=title, box=box.SIMPLE, show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    for name, value in properties.items():
        table.add_row(name, format_property_value(value))

    console.print(table)


def build_tree(midi: MidiFileNode, show_events: bool = True, limit: int = 0) -> Tree:
    """
    Build a Rich tree of file, chunks and (optionally) events.

    Args:
        midi: File to display
        show_events: Expand track nodes into their events
        limit: Maximum events per track (0 = all)
    """
    tree = Tree(f"[bold]{midi.describe()}[/bold]")

    for node in midi.items():
        if isinstance(node, ErrorNode):
            tree.add(f"[red]{node.describe()}[/red]")
            continue

        if isinstance(node, HeaderNode):
            try:
                label = f"[cyan]{node.describe()}[/cyan] [dim]{node.header().describe()}[/dim]"
            except SMFDecodeError as e:
                label = f"[cyan]{node.describe()}[/cyan] [red]{e}[/red]"
            tree.add(label)
        elif isinstance(node, TrackNode):
            branch = tree.add(
                f"[green]{node.describe()}[/green] "
                f"[dim]{node.descriptor.declared_length} bytes[/dim]"
            )
            if show_events:
                items = node.items()
                if limit > 0:
                    items = islice(items, limit)
                for item in items:
                    if isinstance(item, ErrorNode):
                        branch.add(f"[red]{item.describe()}[/red]")
                    else:
                        branch.add(escape(item.describe()))
        else:
            tree.add(f"[yellow]{node.describe()}[/yellow]")

    return tree


def display_tree(midi: MidiFileNode, show_events: bool = True, limit: int = 0) -> None:
    console.print(build_tree(midi, show_events, limit))
