"""
Standard MIDI file reader.

Reads .mid files with mido and converts them to the common Song model.
Tick positions are converted to seconds with a tempo map merged from
every track, so tracks of type 1 files share the conductor track's tempo.
"""

import io
import logging
from bisect import bisect_right
from pathlib import Path
from typing import List, Optional, Tuple, Union

import mido

from owmidi.models.song import NoteEvent, Song, Track
from owmidi.utils.validation import MidiReadError

logger = logging.getLogger(__name__)

DEFAULT_TEMPO = 500000  # microseconds per beat, 120 BPM


class TempoMap:
    """
    Converts absolute ticks to seconds across tempo changes.

    Example:
        tempo_map = TempoMap.from_midi(mid)
        seconds = tempo_map.to_seconds(960)
    """

    def __init__(self, changes: List[Tuple[int, int]], ticks_per_beat: int):
        changes = sorted(changes, key=lambda change: change[0])
        if not changes or changes[0][0] != 0:
            changes.insert(0, (0, DEFAULT_TEMPO))

        self.ticks_per_beat = ticks_per_beat
        self._ticks: List[int] = []
        self._tempos: List[int] = []
        self._seconds: List[float] = []

        seconds = 0.0
        for tick, tempo in changes:
            if self._ticks:
                seconds += mido.tick2second(
                    tick - self._ticks[-1], ticks_per_beat, self._tempos[-1]
                )
            self._ticks.append(tick)
            self._tempos.append(tempo)
            self._seconds.append(seconds)

    @classmethod
    def from_midi(cls, mid: mido.MidiFile) -> "TempoMap":
        """Collect set_tempo events from every track of a MIDI file."""
        changes = []
        for track in mid.tracks:
            tick = 0
            for msg in track:
                tick += msg.time
                if msg.type == "set_tempo":
                    changes.append((tick, msg.tempo))
        return cls(changes, mid.ticks_per_beat)

    def to_seconds(self, tick: int) -> float:
        """Convert an absolute tick position to seconds."""
        i = bisect_right(self._ticks, tick) - 1
        return self._seconds[i] + mido.tick2second(
            tick - self._ticks[i], self.ticks_per_beat, self._tempos[i]
        )


class MidiReader:
    """
    Reader for Standard MIDI Files.

    Every MIDI track becomes one Track, including tracks without notes,
    so a type 0 file always yields a single track. Both note_on and
    note_off messages are kept; note_off is stored with velocity 0.

    Example:
        song = MidiReader.read("song.mid")
        print(f"Tracks: {len(song.tracks)}, Duration: {song.duration:.1f}s")
    """

    NOTE_TYPES = ("note_on", "note_off")

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Song:
        """
        Read a MIDI file and return a Song.

        Args:
            filepath: Path to .mid file

        Returns:
            Parsed Song object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Song:
        """
        Parse a MIDI file.

        Raises:
            FileNotFoundError: If the file does not exist
            MidiReadError: If the file is not valid MIDI data
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Song:
        """
        Parse MIDI data from bytes.

        Raises:
            MidiReadError: If the data is not valid MIDI data
        """
        try:
            mid = mido.MidiFile(file=io.BytesIO(data))
        except (OSError, EOFError, ValueError, KeyError, IndexError) as e:
            raise MidiReadError(f"Invalid MIDI data: {e}") from e

        return self.parse_midi(mid)

    def parse_midi(self, mid: mido.MidiFile) -> Song:
        """
        Convert a mido MidiFile to a Song.

        Args:
            mid: Loaded MIDI file

        Returns:
            Song with one track per MIDI track
        """
        tempo_map = TempoMap.from_midi(mid)
        tracks = [self._read_track(track, tempo_map) for track in mid.tracks]

        duration = max(
            (event.time for track in tracks for event in track.events), default=0.0
        )
        song = Song(tracks=tracks, duration=duration, source_format=f"midi{mid.type}")

        logger.debug(
            "Read MIDI type %d: %d tracks, %d ticks per beat, %.3f s",
            mid.type,
            len(tracks),
            mid.ticks_per_beat,
            duration,
        )
        return song

    def _read_track(self, midi_track: mido.MidiTrack, tempo_map: TempoMap) -> Track:
        """Collect the note events of one MIDI track."""
        track = Track(name=midi_track.name)
        tick = 0

        for msg in midi_track:
            tick += msg.time
            if msg.is_meta:
                continue

            channel: Optional[int] = getattr(msg, "channel", None)
            if track.channel is None and channel is not None:
                track.channel = channel

            if msg.type not in self.NOTE_TYPES:
                continue

            velocity = msg.velocity if msg.type == "note_on" else 0
            track.events.append(
                NoteEvent(
                    time=tempo_map.to_seconds(tick),
                    pitch=msg.note,
                    velocity=velocity,
                    channel=msg.channel,
                )
            )

        return track
