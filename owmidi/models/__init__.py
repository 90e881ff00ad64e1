"""Data models for songs, settings and conversion results."""

from owmidi.models.song import NoteEvent, Track, Song
from owmidi.models.settings import ConverterSettings
from owmidi.models.result import ChordMap, ChordAggregation, PackedArrays, ConversionResult

__all__ = [
    "NoteEvent",
    "Track",
    "Song",
    "ConverterSettings",
    "ChordMap",
    "ChordAggregation",
    "PackedArrays",
    "ConversionResult",
]
