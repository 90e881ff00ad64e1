"""
Song data model - the parsed performance handed to the converter.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from owmidi.constants import DEFAULT_LIMITS


@dataclass(frozen=True)
class NoteEvent:
    """
    A single timed note message.

    Attributes:
        time: Onset time in seconds from the start of the song
        pitch: MIDI note number
        velocity: Note velocity (0 = note off)
        channel: 0-based MIDI channel
    """

    time: float
    pitch: int
    velocity: int
    channel: int = 0

    @property
    def is_note_on(self) -> bool:
        """Check if this event starts a note."""
        return self.velocity > 0


@dataclass
class Track:
    """
    One track of a song.

    Attributes:
        channel: Channel of the first channel message in the track (None if none)
        name: Track name from the MIDI track_name meta message
        events: Note events in time order
    """

    channel: Optional[int] = None
    name: str = ""
    events: List[NoteEvent] = field(default_factory=list)

    @property
    def is_percussion(self) -> bool:
        """Check if this track plays on the General MIDI percussion channel."""
        return self.channel == DEFAULT_LIMITS.percussion_channel

    @property
    def note_on_count(self) -> int:
        """Amount of note-on events in the track."""
        return sum(1 for event in self.events if event.is_note_on)

    @property
    def has_notes(self) -> bool:
        """Check if the track has any note-on events."""
        return any(event.is_note_on for event in self.events)


@dataclass
class Song:
    """
    Complete parsed performance.

    Attributes:
        tracks: Tracks in file order
        duration: Full duration of the song in seconds
        source_format: Where the song came from ("midi0", "midi1", ...)
    """

    tracks: List[Track] = field(default_factory=list)
    duration: float = 0.0
    source_format: Optional[str] = None

    @property
    def is_single_track(self) -> bool:
        """Single-track (type 0) files may mix every part into one track."""
        return len(self.tracks) == 1

    @classmethod
    def from_notes(cls, notes: List[NoteEvent], channel: int = 0) -> "Song":
        """
        Create a single-track song from a list of note events.

        Args:
            notes: Note events
            channel: Channel assigned to the track

        Returns:
            New Song instance
        """
        events = sorted(notes, key=lambda e: e.time)
        duration = max((e.time for e in events), default=0.0)
        return cls(tracks=[Track(channel=channel, events=events)], duration=duration)

    def __repr__(self) -> str:
        return f"Song(tracks={len(self.tracks)}, duration={self.duration:.3f})"
