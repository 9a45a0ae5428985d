"""
SMFBrowser - Browse and decode Standard MIDI Files.

A CLI tool for inspecting the chunks, headers and track events of .mid files.
"""

import typer
from rich.console import Console

from cli.context import CliState, configure_logging
from cli.commands.info import info
from cli.commands.chunks import chunks
from cli.commands.header import header
from cli.commands.events import events
from cli.commands.tree import tree
from cli.commands.export import export
from cli.commands.dump import dump
from smfbrowser import __version__
from smfbrowser.config import DecoderOptions

console = Console()

# Main app
app = typer.Typer(
    name="smfbrowse",
    help="Browse and decode Standard MIDI Files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="chunks")(chunks)
app.command(name="header")(header)
app.command(name="events")(events)
app.command(name="tree")(tree)
app.command(name="export")(export)
app.command(name="dump")(dump)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]smfbrowse[/bold] version {__version__}")
    console.print("[dim]Lazy decoder and browser for Standard MIDI Files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log decoder activity"),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on chunks longer than the file instead of clamping"
    ),
    strict_status: bool = typer.Option(
        False, "--strict-status", help="Fail on status bytes with unknown length"
    ),
    keep_going: bool = typer.Option(
        False, "--keep-going", help="Keep decoding a track after End Of Track"
    ),
) -> None:
    """
    SMFBrowser - Browse Standard MIDI Files.

    [bold]Quick Start:[/bold]

        smfbrowse info song.mid          # File summary
        smfbrowse tree song.mid          # Chunks and events as a tree

    [bold]Decoding Commands:[/bold]

        smfbrowse chunks song.mid        # Chunk table
        smfbrowse header song.mid        # MThd fields
        smfbrowse events song.mid -t 1   # Events of track 1
        smfbrowse dump song.mid -c 1     # Hex dump of chunk 1

    [bold]Utility Commands:[/bold]

        smfbrowse export song.mid -t 1   # Note-on export (export.xml)

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    configure_logging(verbose)
    ctx.obj = CliState(
        options=DecoderOptions(
            strict_chunk_lengths=strict,
            stop_at_end_of_track=not keep_going,
            strict_status=strict_status,
        ),
        verbose=verbose,
    )

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
