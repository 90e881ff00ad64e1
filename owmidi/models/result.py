"""
Result data models produced by the conversion pipeline.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Quantized time (seconds) -> offset pitches sounding at that time
ChordMap = Dict[float, List[int]]


@dataclass
class ChordAggregation:
    """
    Output of the chord aggregation stage.

    Attributes:
        chords: Chords sorted by time
        transposed_notes: Notes moved by octaves onto the piano
        skipped_notes: Notes dropped because their chord was full
        warnings: Advisory messages
        errors: Fatal messages, non-empty only when no chords were found
    """

    chords: ChordMap = field(default_factory=dict)
    transposed_notes: int = 0
    skipped_notes: int = 0
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if no chords survived aggregation."""
        return not self.chords


@dataclass
class PackedArrays:
    """
    Song data flattened into the three Workshop arrays.

    The arrays are filled from the same chord walk but have independent
    lengths: one time and one size per chord, one pitch per note.

    Attributes:
        times: Time of each chord since the beginning of the song
        chord_sizes: Amount of pitches in each chord
        pitches: Pitches of every chord, concatenated
        total_elements: Elements in all three arrays
        stop_time: Time where packing stopped (last chord, or the first chord
                   that no longer fit in the element budget)
        truncated: Whether chords were left out because of the budget
    """

    times: List[float] = field(default_factory=list)
    chord_sizes: List[int] = field(default_factory=list)
    pitches: List[int] = field(default_factory=list)
    total_elements: int = 0
    stop_time: float = 0.0
    truncated: bool = False

    @property
    def chord_count(self) -> int:
        """Amount of chords packed."""
        return len(self.times)

    def named_arrays(self) -> Dict[str, list]:
        """
        Get the arrays keyed by their Workshop global variable names,
        in emission order.
        """
        return {
            "timeArrays": self.times,
            "chordArrays": self.chord_sizes,
            "pitchArrays": self.pitches,
        }


@dataclass
class ConversionResult:
    """
    Complete result of converting a song.

    Attributes:
        rules: Workshop rules containing the song data, empty on error
        transposed_notes: Amount of notes transposed onto the piano range
        skipped_notes: Amount of notes skipped due to full chords
        total_elements: Elements in the song data arrays
        duration: Full duration (seconds) of the song
        stop_time: Time (seconds) where reading stopped, either at the end
                   of the song or at the element budget. None on error.
        warnings: Warnings for the user
        errors: Errors for the user
        truncated: Whether the element budget cut the song short
    """

    rules: str = ""
    transposed_notes: int = 0
    skipped_notes: int = 0
    total_elements: int = 0
    duration: float = 0.0
    stop_time: Optional[float] = None
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    truncated: bool = False

    @property
    def ok(self) -> bool:
        """Check if rules were produced."""
        return not self.errors

    @property
    def rule_count(self) -> int:
        """Amount of rules in the output."""
        return self.rules.count("rule(")

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly mapping using the host tool's keys."""
        return {
            "rules": self.rules,
            "transposedNotes": self.transposed_notes,
            "skippedNotes": self.skipped_notes,
            "totalElements": self.total_elements,
            "duration": self.duration,
            "stopTime": self.stop_time,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }
