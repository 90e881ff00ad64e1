"""Test configuration and fixtures."""

import pytest
import mido

from owmidi.models.song import NoteEvent, Song, Track


def make_track(notes, channel=0, name=""):
    """Build a Track from (time, pitch) or (time, pitch, velocity) tuples."""
    events = []
    for note in notes:
        time, pitch = note[0], note[1]
        velocity = note[2] if len(note) > 2 else 100
        events.append(NoteEvent(time=time, pitch=pitch, velocity=velocity, channel=channel))
    return Track(channel=channel, name=name, events=events)


def make_song(*tracks):
    """Build a Song from tracks, with duration set to the latest event."""
    duration = max((e.time for t in tracks for e in t.events), default=0.0)
    return Song(tracks=list(tracks), duration=duration)


@pytest.fixture
def two_track_song():
    """Return a small two-track song with a C major chord and a melody."""
    chords = make_track([(0.0, 60), (0.0, 64), (0.0, 67), (1.0, 62), (1.0, 65)], channel=0)
    melody = make_track([(0.5, 72), (1.5, 74), (2.0, 76)], channel=1)
    return make_song(chords, melody)


@pytest.fixture
def write_midi(tmp_path):
    """
    Return a function writing a MIDI file to tmp_path.

    Each track is a list of mido messages with delta times in ticks.
    """

    def _write(tracks, filename="song.mid", midi_type=1, ticks_per_beat=480):
        mid = mido.MidiFile(type=midi_type, ticks_per_beat=ticks_per_beat)
        for messages in tracks:
            track = mido.MidiTrack()
            track.extend(messages)
            mid.tracks.append(track)
        path = tmp_path / filename
        mid.save(str(path))
        return path

    return _write


@pytest.fixture
def simple_midi_file(write_midi):
    """Return path to a type 1 MIDI file with a conductor, a piano and a drum track."""
    conductor = [
        mido.MetaMessage("track_name", name="Conductor", time=0),
        mido.MetaMessage("set_tempo", tempo=500000, time=0),
    ]
    piano = [
        mido.MetaMessage("track_name", name="Piano", time=0),
        mido.Message("note_on", note=60, velocity=90, channel=0, time=0),
        mido.Message("note_on", note=64, velocity=90, channel=0, time=0),
        mido.Message("note_off", note=60, velocity=0, channel=0, time=480),
        mido.Message("note_off", note=64, velocity=0, channel=0, time=0),
        mido.Message("note_on", note=100, velocity=80, channel=0, time=0),
        mido.Message("note_on", note=100, velocity=0, channel=0, time=480),
    ]
    drums = [
        mido.MetaMessage("track_name", name="Drums", time=0),
        mido.Message("note_on", note=36, velocity=100, channel=9, time=0),
        mido.Message("note_off", note=36, velocity=0, channel=9, time=240),
    ]
    return write_midi([conductor, piano, drums])
