"""
Converter settings supplied by the user for a single conversion.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS
from owmidi.utils.validation import ValidationError, validate_start_time, validate_voices

logger = logging.getLogger(__name__)

# Accepted spellings for each field, host tool spelling first
FIELD_ALIASES = {
    "start_time": ("startTime", "start_time"),
    "voices": ("voices",),
}


@dataclass(frozen=True)
class ConverterSettings:
    """
    Settings for the converter.

    Attributes:
        start_time: Time (seconds) in the MIDI file where reading begins
        voices: Amount of bots required to play the result, which is also
                the maximum amount of pitches in any chord. At least 6 is
                recommended so that most songs play back reasonably well.
        limits: Converter limits the fields are checked against
    """

    start_time: float = DEFAULT_LIMITS.default_start_time
    voices: int = DEFAULT_LIMITS.default_voices
    limits: ConverterLimits = field(default=DEFAULT_LIMITS, repr=False, compare=False)

    def __post_init__(self):
        self.validate(self.limits)

    def validate(self, limits: Optional[ConverterLimits] = None) -> None:
        """
        Check every field against the converter limits.

        Args:
            limits: Limits to check against, the settings' own limits if None

        Raises:
            ValidationError: If any field is invalid
        """
        if limits is None:
            limits = self.limits
        validate_start_time(self.start_time, limits.start_time_min, limits.start_time_max)
        validate_voices(self.voices, limits.voices_min, limits.voices_max)

    @classmethod
    def defaults(cls, limits: ConverterLimits = DEFAULT_LIMITS) -> "ConverterSettings":
        """Create settings holding the documented defaults."""
        return cls(
            start_time=limits.default_start_time, voices=limits.default_voices, limits=limits
        )

    @classmethod
    def from_dict(
        cls, data: Optional[Mapping[str, Any]], limits: ConverterLimits = DEFAULT_LIMITS
    ) -> Tuple["ConverterSettings", List[str]]:
        """
        Build settings from a user supplied mapping.

        Each known field is looked up by name and validated. If any field
        is missing or invalid the whole object is replaced by the defaults,
        fields are never merged one by one. Unknown keys are ignored.

        Args:
            data: Mapping such as {"startTime": 1.5, "voices": 8}
            limits: Converter limits

        Returns:
            Tuple of (settings, list of problems found). The list is empty
            when the mapping was valid.
        """
        if not data:
            return cls.defaults(limits), []

        problems = []
        values = {}
        for field_name, aliases in FIELD_ALIASES.items():
            present = [alias for alias in aliases if alias in data]
            if not present:
                problems.append(f"missing setting '{aliases[0]}'")
                continue
            values[field_name] = data[present[0]]

        known = {alias for aliases in FIELD_ALIASES.values() for alias in aliases}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            logger.debug("Ignoring unknown settings: %s", ", ".join(unknown))

        if not problems:
            try:
                return cls(**values, limits=limits), []
            except ValidationError as e:
                problems.append(str(e))

        logger.info("Invalid settings (%s), using defaults", "; ".join(problems))
        return cls.defaults(limits), problems

    def to_dict(self) -> dict:
        """Convert to the host tool's settings mapping."""
        return {"startTime": self.start_time, "voices": self.voices}
