"""Data models for decoded MIDI file contents."""

from smfbrowser.models.chunk import ChunkDescriptor
from smfbrowser.models.header import Header
from smfbrowser.models.events import (
    MidiEvent,
    ChannelEvent,
    NoteOff,
    NoteOn,
    PolyphonicKeyPressure,
    ControlChange,
    ChannelModeMessage,
    ChannelMode,
    ProgramChange,
    ChannelPressure,
    PitchBendChange,
    UnknownChannelEvent,
    SystemExclusive,
    MetaEvent,
    MetaType,
    TextEvent,
    PortPrefix,
    EndOfTrack,
    SetTempo,
    TimeSignature,
    UnknownMeta,
    EventType,
)

__all__ = [
    "ChunkDescriptor",
    "Header",
    "MidiEvent",
    "ChannelEvent",
    "NoteOff",
    "NoteOn",
    "PolyphonicKeyPressure",
    "ControlChange",
    "ChannelModeMessage",
    "ChannelMode",
    "ProgramChange",
    "ChannelPressure",
    "PitchBendChange",
    "UnknownChannelEvent",
    "SystemExclusive",
    "MetaEvent",
    "MetaType",
    "TextEvent",
    "PortPrefix",
    "EndOfTrack",
    "SetTempo",
    "TimeSignature",
    "UnknownMeta",
    "EventType",
]
