"""Test configuration and fixtures."""

import pytest

from builders import END_OF_TRACK, chunk, header_chunk, smf, track_chunk


@pytest.fixture
def tempo_track():
    """Track with name, tempo and time signature meta events."""
    return track_chunk(
        bytes([0x00, 0xFF, 0x03, 0x04]) + b"Lead",
        bytes([0x00, 0xFF, 0x51, 0x03, 0x07, 0xA1, 0x20]),
        bytes([0x00, 0xFF, 0x58, 0x04, 0x04, 0x02, 0x18, 0x08]),
        END_OF_TRACK,
    )


@pytest.fixture
def note_track():
    """Track with notes, running status and a channel mode message."""
    return track_chunk(
        bytes([0x00, 0xC0, 0x05]),  # Program Change ch0 patch 5
        bytes([0x0A, 0x90, 0x40, 0x7F]),  # Note On ch0 key 0x40, delta 10
        bytes([0x05, 0xB0, 0x07, 0x64]),  # Control Change volume, delta 5
        bytes([0x00, 0x90, 0x43, 0x60]),  # Note On ch0 key 0x43
        bytes([0x3C, 0x43, 0x00]),  # running status Note On vel 0, delta 60
        bytes([0x00, 0xB0, 0x7B, 0x00]),  # All Notes Off
        END_OF_TRACK,
    )


@pytest.fixture
def midi_data(tempo_track, note_track):
    """Format 1 file: header, two tracks and one unknown chunk."""
    return smf(
        header_chunk(fmt=1, tracks=2, division=480),
        tempo_track,
        chunk(b"XFIH", b"\x01\x02\x03"),
        note_track,
    )


@pytest.fixture
def midi_file(tmp_path, midi_data):
    """Path to midi_data written to disk."""
    path = tmp_path / "song.mid"
    path.write_bytes(midi_data)
    return path


@pytest.fixture
def mido_file(tmp_path):
    """Path to a file written by mido (uses running status when saving)."""
    mido = pytest.importorskip("mido")

    midi = mido.MidiFile(type=1, ticks_per_beat=96)

    conductor = mido.MidiTrack()
    conductor.append(mido.MetaMessage("track_name", name="Conductor", time=0))
    conductor.append(mido.MetaMessage("set_tempo", tempo=600000, time=0))
    conductor.append(mido.MetaMessage("time_signature", numerator=3, denominator=4, time=0))
    midi.tracks.append(conductor)

    piano = mido.MidiTrack()
    piano.append(mido.Message("program_change", channel=2, program=5, time=0))
    piano.append(mido.Message("note_on", channel=2, note=60, velocity=100, time=0))
    piano.append(mido.Message("note_on", channel=2, note=64, velocity=90, time=0))
    piano.append(mido.Message("note_off", channel=2, note=60, velocity=0, time=96))
    piano.append(mido.Message("control_change", channel=2, control=123, value=0, time=10))
    piano.append(mido.Message("pitchwheel", channel=2, pitch=100, time=0))
    piano.append(mido.Message("sysex", data=[0x7E, 0x7F, 0x09, 0x01], time=5))
    midi.tracks.append(piano)

    path = tmp_path / "mido.mid"
    midi.save(str(path))
    return path
