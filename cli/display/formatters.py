"""
Display formatting utilities for CLI output.

Provides value rendering, byte previews and other formatting helpers.
"""

from enum import IntEnum
from typing import Optional

from rich.markup import escape

from smfbrowser.models.events import (
    ChannelEvent,
    ChannelModeMessage,
    MetaEvent,
    MidiEvent,
    NoteOff,
    NoteOn,
    SystemExclusive,
    UnknownChannelEvent,
)

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def hex_bytes(data: bytes, limit: int = 16) -> str:
    """
    Format bytes as spaced hex, truncated after ``limit`` bytes.

    Returns:
        "F0 43 10 4C ... (+12)"
    """
    text = " ".join(f"{b:02X}" for b in data[:limit])
    if len(data) > limit:
        text += f" ... (+{len(data) - limit})"
    return text


def format_property_value(value: object) -> str:
    """
    Format a property value for a table cell.

    Returns:
        Hex preview for bytes, name for enums, str() otherwise
    """
    if isinstance(value, (bytes, bytearray)):
        return hex_bytes(bytes(value)) if value else "[dim](empty)[/dim]"
    if isinstance(value, IntEnum):
        return f"{value.name} (0x{int(value):02X})"
    return str(value)


def note_name(key: int) -> str:
    """
    Convert a MIDI key number to a note name (middle C = C4).

    Returns:
        "C4" for 60, "A#-1" for 10
    """
    return f"{NOTE_NAMES[key % 12]}{key // 12 - 1}"


def event_kind(event: MidiEvent) -> str:
    """Short kind column text for an event."""
    if isinstance(event, ChannelModeMessage):
        return "Mode"
    if isinstance(event, ChannelEvent):
        return "Channel"
    if isinstance(event, MetaEvent):
        return "Meta"
    if isinstance(event, SystemExclusive):
        return "SysEx"
    if isinstance(event, UnknownChannelEvent):
        return "Unknown"
    return "Event"


def event_style(event: MidiEvent) -> Optional[str]:
    """Rich style for an event row."""
    if isinstance(event, (NoteOn, NoteOff)):
        return None
    if isinstance(event, MetaEvent):
        return "cyan"
    if isinstance(event, SystemExclusive):
        return "magenta"
    if isinstance(event, UnknownChannelEvent):
        return "yellow"
    return "green"


def event_detail(event: MidiEvent) -> str:
    """Detail column text: the description without the label prefix."""
    text = escape(event.describe())
    prefix = f"{event.label}: "
    if text.startswith(prefix):
        text = text[len(prefix) :]
    if isinstance(event, (NoteOn, NoteOff)):
        text += f" ({note_name(event.key)})"
    return text
