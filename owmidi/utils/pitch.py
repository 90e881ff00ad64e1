"""
Pitch normalization into the playable range of the Workshop piano.
"""

from typing import Tuple

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS


def normalize_pitch(pitch: int, limits: ConverterLimits = DEFAULT_LIMITS) -> Tuple[int, bool]:
    """
    Transpose a pitch by whole octaves until it lies on the piano.

    Args:
        pitch: MIDI note number (any integer)
        limits: Converter limits providing the playable range

    Returns:
        Tuple of (normalized pitch, whether the pitch was changed)

    Example:
        >>> normalize_pitch(10)
        (34, True)
        >>> normalize_pitch(60)
        (60, False)
    """
    normalized = pitch
    while normalized < limits.pitch_min:
        normalized += limits.octave
    while normalized > limits.pitch_max:
        normalized -= limits.octave
    return normalized, normalized != pitch


def offset_pitch(pitch: int, limits: ConverterLimits = DEFAULT_LIMITS) -> int:
    """Shift a normalized pitch so the lowest piano key maps to 0."""
    return pitch - limits.pitch_min
