"""Standard MIDI file input."""

from owmidi.formats.midi.reader import MidiReader

__all__ = ["MidiReader"]
