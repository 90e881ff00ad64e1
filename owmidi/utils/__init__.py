"""Utility functions for owmidi."""

from owmidi.utils.timing import round_to_places, format_number
from owmidi.utils.validation import (
    ValidationError,
    ConversionError,
    MidiReadError,
    validate_voices,
    validate_start_time,
)

__all__ = [
    "round_to_places",
    "format_number",
    "ValidationError",
    "ConversionError",
    "MidiReadError",
    "validate_voices",
    "validate_start_time",
]
