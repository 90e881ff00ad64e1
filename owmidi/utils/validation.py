"""
Validation helpers and exceptions for converter input.
"""

import math


class ValidationError(Exception):
    """Raised when converter settings or limits are invalid."""

    pass


class ConversionError(Exception):
    """Raised when a song cannot be read or converted."""

    pass


class MidiReadError(ConversionError):
    """Raised when a MIDI file cannot be parsed."""

    pass


def validate_voices(voices, minimum: int, maximum: int) -> int:
    """
    Validate the amount of voices (bots) used to play a song.

    Args:
        voices: The value to validate
        minimum: Lowest allowed amount
        maximum: Highest allowed amount

    Returns:
        The validated amount as an int

    Raises:
        ValidationError: If voices is not an integer or is out of range
    """
    if isinstance(voices, bool) or not isinstance(voices, int):
        raise ValidationError(f"voices must be an integer, got {voices!r}")
    if not minimum <= voices <= maximum:
        raise ValidationError(f"voices must be {minimum}-{maximum}, got {voices}")
    return voices


def validate_start_time(start_time, minimum: float = 0.0, maximum: float = math.inf) -> float:
    """
    Validate the time (seconds) at which reading of the song begins.

    Args:
        start_time: The value to validate
        minimum: Earliest allowed time
        maximum: Latest allowed time

    Returns:
        The validated time as a float

    Raises:
        ValidationError: If start_time is not a finite number or is out of range
    """
    if isinstance(start_time, bool) or not isinstance(start_time, (int, float)):
        raise ValidationError(f"start time must be a number, got {start_time!r}")
    if math.isnan(start_time) or math.isinf(start_time):
        raise ValidationError(f"start time must be finite, got {start_time}")
    if start_time < minimum:
        raise ValidationError(f"start time must be at least {minimum}, got {start_time}")
    if start_time > maximum:
        raise ValidationError(f"start time must be at most {maximum}, got {start_time}")
    return float(start_time)

