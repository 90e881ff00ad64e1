"""
owmidi - MIDI to Overwatch Workshop piano converter.

This library provides tools to:
- Read Standard MIDI Files (.mid) into a simple Song model
- Group notes into chords playable on the Workshop piano
- Write the song data as Workshop rules with bounded array sizes

Example usage:
    from owmidi import MidiReader, convert_song

    song = MidiReader.read("song.mid")
    result = convert_song(song, {"startTime": 0, "voices": 6})

    if result.errors:
        print("\\n".join(result.errors))
    else:
        print(result.rules)
"""

__version__ = "0.2.0"
__author__ = "owmidi Contributors"

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS
from owmidi.converters import MidiToWorkshopConverter, convert_song, convert_midi_to_workshop
from owmidi.formats import MidiReader, WorkshopWriter
from owmidi.models import ConverterSettings, ConversionResult, NoteEvent, Song, Track

__all__ = [
    "ConverterLimits",
    "DEFAULT_LIMITS",
    "MidiToWorkshopConverter",
    "convert_song",
    "convert_midi_to_workshop",
    "MidiReader",
    "WorkshopWriter",
    "ConverterSettings",
    "ConversionResult",
    "NoteEvent",
    "Song",
    "Track",
]
