"""
Converter limits for the Overwatch Workshop piano.

All numeric limits used by the conversion pipeline live in a single
immutable record so that the array budget arithmetic can be audited in
one place.
"""

import math
from dataclasses import dataclass

from owmidi.utils.validation import ValidationError


@dataclass(frozen=True)
class ConverterLimits:
    """
    Fixed limits of the Workshop piano and script environment.

    Attributes:
        pitch_min: Lowest MIDI note playable on the piano
        pitch_max: Highest MIDI note playable on the piano
        octave: Semitones per octave, used for transposition
        voices_min: Minimum amount of bots (pitches per chord)
        voices_max: Maximum amount of bots (pitches per chord)
        default_voices: Voices used when settings are invalid
        start_time_min: Earliest allowed start time in seconds
        default_start_time: Start time used when settings are invalid
        max_array_size: Workshop arrays are limited to 999 elements per dimension
        max_total_elements: Maximum amount of array elements in all song data rules
        note_precision: Decimal places kept in note times
        percussion_channel: 0-based channel of General MIDI percussion
    """

    pitch_min: int = 24
    pitch_max: int = 88
    octave: int = 12

    voices_min: int = 6
    voices_max: int = 11
    default_voices: int = 6

    start_time_min: float = 0.0
    start_time_max: float = math.inf
    default_start_time: float = 0.0

    # The workshop script has a maximum Total Element Count of 20 000, which
    # also counts rules and actions. 9000 array elements leaves room for the
    # playback script itself.
    max_array_size: int = 999
    max_total_elements: int = 9000

    note_precision: int = 3
    percussion_channel: int = 9

    def __post_init__(self):
        if self.pitch_max - self.pitch_min < self.octave:
            raise ValidationError(
                f"Pitch range {self.pitch_min}-{self.pitch_max} is narrower than one octave"
            )
        if self.max_array_size < 2:
            raise ValidationError(f"Array size must be at least 2, got {self.max_array_size}")
        if not self.voices_min <= self.default_voices <= self.voices_max:
            raise ValidationError(
                f"Default voices {self.default_voices} outside "
                f"{self.voices_min}-{self.voices_max}"
            )

    @property
    def chunk_size(self) -> int:
        """Values written per array literal, one below the array size limit."""
        return self.max_array_size - 1


DEFAULT_LIMITS = ConverterLimits()
