"""Format handlers for MIDI input and Workshop output."""

from owmidi.formats.midi import MidiReader
from owmidi.formats.workshop import WorkshopWriter

__all__ = ["MidiReader", "WorkshopWriter"]
