"""
Note-on export.

Folds a track's events into a sparse note-on list. Delta-times of every
event are accumulated until a Note On is reached; the note is written with
the accumulated delay and the accumulator starts again from zero. End Of
Track writes a terminator record.

Export Format (one field per line):
    <hex>DDDD</hex>     delay, 4 hex digits
    <hex>CC</hex>       channel
    <hex>KK</hex>       key
    <hex>VV</hex>       velocity
                        blank separator line

    <hex>f2</hex>       End Of Track terminator
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Union

from smfbrowser.models.events import EndOfTrack, MidiEvent, NoteOn

FIELD_TEMPLATE = "<hex>{}</hex>"
END_OF_TRACK_MARKER = "f2"
DEFAULT_EXPORT_FILENAME = "export.xml"


@dataclass(frozen=True)
class NoteRecord:
    """A Note On with the delay accumulated since the previous record."""

    delay: int
    channel: int
    key: int
    velocity: int

    def fields(self) -> List[str]:
        return [
            f"{self.delay:04x}",
            f"{self.channel:02x}",
            f"{self.key:02x}",
            f"{self.velocity:02x}",
        ]

    def lines(self) -> List[str]:
        return [FIELD_TEMPLATE.format(field) for field in self.fields()] + [""]


@dataclass(frozen=True)
class EndRecord:
    """End Of Track terminator."""

    def fields(self) -> List[str]:
        return [END_OF_TRACK_MARKER]

    def lines(self) -> List[str]:
        return [FIELD_TEMPLATE.format(END_OF_TRACK_MARKER)]


ExportRecord = Union[NoteRecord, EndRecord]


def collect_records(events: Iterable[MidiEvent]) -> Iterator[ExportRecord]:
    """
    Project a track's events onto export records.

    Args:
        events: Decoded track events, in order

    Yields:
        NoteRecord for each Note On, EndRecord for End Of Track
    """
    delay = 0

    for event in events:
        delay += event.delta_time

        if isinstance(event, NoteOn):
            yield NoteRecord(delay, event.channel, event.key, event.velocity)
            delay = 0
        elif isinstance(event, EndOfTrack):
            yield EndRecord()


def format_records(records: Iterable[ExportRecord]) -> str:
    """Render records as export text."""
    lines: List[str] = []
    for record in records:
        lines.extend(record.lines())
    return "".join(line + "\n" for line in lines)


def write_records(records: Iterable[ExportRecord], stream: TextIO) -> int:
    """
    Write records to an open text stream.

    Returns:
        Number of records written
    """
    count = 0
    for record in records:
        for line in record.lines():
            stream.write(line + "\n")
        count += 1
    return count


def export_track(events: Iterable[MidiEvent], filepath: Union[str, Path]) -> int:
    """
    Export a track's note-ons to a file.

    Args:
        events: Decoded track events
        filepath: Output path

    Returns:
        Number of records written
    """
    with open(filepath, "w", encoding="ascii", newline="\n") as f:
        return write_records(collect_records(events), f)
