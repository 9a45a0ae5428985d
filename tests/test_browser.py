"""Tests for browsable file, chunk and track nodes."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from builders import END_OF_TRACK, header_chunk, smf, track_chunk
from smfbrowser.browser import (
    ErrorNode,
    HeaderNode,
    MidiFileNode,
    TrackNode,
    UnknownChunkNode,
)
from smfbrowser.errors import TruncatedChunkHeader, TruncatedEvent
from smfbrowser.formats.smf.source import ByteSource
from smfbrowser.models.events import EndOfTrack, NoteOn, ProgramChange, TextEvent


def open_bytes(data: bytes) -> MidiFileNode:
    return MidiFileNode(ByteSource(data), "test.mid")


class TestMidiFileNode:
    """Test the root node."""

    def test_children(self, midi_data):
        nodes = list(open_bytes(midi_data).items())

        assert [type(n) for n in nodes] == [HeaderNode, TrackNode, UnknownChunkNode, TrackNode]
        assert [n.describe() for n in nodes] == ["MThd", "MTrk", "XFIH", "MTrk"]

    def test_describe_and_properties(self, midi_file):
        node = MidiFileNode.open(midi_file)

        assert node.describe() == "song.mid"
        assert node.properties() == {"Path": str(midi_file)}

    def test_tracks(self, midi_data):
        tracks = open_bytes(midi_data).tracks()

        assert len(tracks) == 2
        assert [t.descriptor.start_offset for t in tracks] == [14, 60]

    def test_truncated_chunk_header_ends_listing(self):
        nodes = list(open_bytes(header_chunk() + b"MTr").items())

        assert isinstance(nodes[0], HeaderNode)
        assert isinstance(nodes[1], ErrorNode)
        assert isinstance(nodes[1].error, TruncatedChunkHeader)
        assert nodes[1].describe().startswith("Error: Truncated chunk header")

    def test_items_restartable(self, midi_data):
        node = open_bytes(midi_data)

        assert len(list(node.items())) == len(list(node.items())) == 4


class TestChunkNodes:
    """Test header, track and unknown chunk nodes."""

    def test_header_properties(self, midi_data):
        header = next(iter(open_bytes(midi_data).items()))

        assert header.properties() == {"Format": 1, "Tracks": 2, "Division": 480}
        assert header.header().describe() == "Format 1, 2 track(s), 480 ticks/quarter"

    def test_unknown_chunk_raw(self, midi_data):
        unknown = list(open_bytes(midi_data).items())[2]

        assert unknown.raw == b"XFIH\x00\x00\x00\x03\x01\x02\x03"
        assert not hasattr(unknown, "items")

    def test_track_items(self, midi_data):
        track = open_bytes(midi_data).tracks()[0]
        items = list(track.items())

        assert isinstance(items[0], TextEvent)
        assert items[0].text == "Lead"
        assert isinstance(items[-1], EndOfTrack)

    def test_track_actions(self, midi_data):
        track = open_bytes(midi_data).tracks()[0]

        assert track.actions == ("Export",)
        assert isinstance(TrackNode.actions, tuple)


class TestErrorIsolation:
    """Test that decode failures stay inside the failing node."""

    @pytest.fixture
    def broken_data(self, note_track):
        return smf(
            header_chunk(tracks=2),
            track_chunk(bytes([0x00, 0xC0, 0x05]), bytes([0x00, 0x90, 0x40])),
            note_track,
        )

    def test_failing_track_ends_with_error(self, broken_data):
        broken, _ = open_bytes(broken_data).tracks()
        items = list(broken.items())

        assert items[0] == ProgramChange(0, 0, 5)
        assert isinstance(items[-1], ErrorNode)
        assert isinstance(items[-1].error, TruncatedEvent)
        assert len(items) == 2

    def test_sibling_still_decodes(self, broken_data):
        _, good = open_bytes(broken_data).tracks()
        items = list(good.items())

        assert not any(isinstance(item, ErrorNode) for item in items)
        assert NoteOn(10, 0, 0x40, 0x7F) in items

    def test_events_propagate_errors(self, broken_data):
        broken, _ = open_bytes(broken_data).tracks()

        with pytest.raises(TruncatedEvent):
            list(broken.events())


class TestExportAction:
    """Test the Export action on track nodes."""

    def test_export_to_path(self, midi_data, tmp_path):
        track = open_bytes(midi_data).tracks()[1]
        output = tmp_path / "notes.xml"

        count = track.execute("Export", output=output)

        assert count == 4
        lines = output.read_text().splitlines()
        assert lines[:5] == [
            "<hex>000a</hex>",
            "<hex>00</hex>",
            "<hex>40</hex>",
            "<hex>7f</hex>",
            "",
        ]
        assert lines[10] == "<hex>003c</hex>"
        assert lines[-1] == "<hex>f2</hex>"

    def test_default_filename(self, midi_data, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        track = open_bytes(midi_data).tracks()[1]

        track.execute("Export")

        assert (tmp_path / "export.xml").exists()

    def test_track_without_notes(self, midi_data, tmp_path):
        output = tmp_path / "tempo.xml"

        count = open_bytes(midi_data).tracks()[0].execute("Export", output=output)

        assert count == 1
        assert output.read_text() == "<hex>f2</hex>\n"

    def test_unknown_action(self, midi_data):
        track = open_bytes(midi_data).tracks()[0]

        with pytest.raises(ValueError, match="Unknown action"):
            track.execute("Delete")

    def test_export_empty_track(self, tmp_path):
        data = smf(header_chunk(), track_chunk(END_OF_TRACK))
        output = tmp_path / "empty.xml"

        assert open_bytes(data).tracks()[0].export(output) == 1
