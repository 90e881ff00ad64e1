"""
Song converters for MIDI -> Overwatch Workshop conversion.

Example:
    from owmidi.converters import convert_midi_to_workshop

    # Convert a MIDI file to Workshop rules
    result = convert_midi_to_workshop("song.mid", "song.txt", {"startTime": 0, "voices": 6})
"""

from owmidi.converters.chords import aggregate_chords
from owmidi.converters.packer import pack_chords
from owmidi.converters.midi_to_workshop import (
    MidiToWorkshopConverter,
    convert_song,
    convert_midi_to_workshop,
)

__all__ = [
    "aggregate_chords",
    "pack_chords",
    "MidiToWorkshopConverter",
    "convert_song",
    "convert_midi_to_workshop",
]
