"""
MIDI to Overwatch Workshop converter.

Converts a song into Workshop rules holding the song data arrays.

The conversion process:
1. Resolve the converter settings (invalid settings fall back to defaults)
2. Aggregate note events into chords within the piano range
3. Pack chords into the time, chord size and pitch arrays
4. Write the arrays as Workshop rules

If no chords survive step 2 the conversion stops there and the result
holds an error message and no rules.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS
from owmidi.converters.chords import aggregate_chords
from owmidi.converters.packer import pack_chords
from owmidi.formats.midi.reader import MidiReader
from owmidi.formats.workshop.writer import WorkshopWriter
from owmidi.models.result import ConversionResult
from owmidi.models.settings import ConverterSettings
from owmidi.models.song import Song
from owmidi.utils.validation import ValidationError

logger = logging.getLogger(__name__)

INVALID_SETTINGS_WARNING = "WARNING: Invalid settings ({problems}), using the default settings."

SettingsInput = Union[ConverterSettings, Mapping[str, Any], None]


class MidiToWorkshopConverter:
    """
    Converter from songs to Overwatch Workshop rules.

    Example:
        converter = MidiToWorkshopConverter({"startTime": 0, "voices": 8})
        result = converter.convert("song.mid")
        print(result.rules)
    """

    def __init__(self, settings: SettingsInput = None, limits: ConverterLimits = DEFAULT_LIMITS):
        self.limits = limits
        self.warnings = []

        if isinstance(settings, ConverterSettings):
            self.settings, problems = self._check_settings(settings, limits)
        else:
            self.settings, problems = ConverterSettings.from_dict(settings, limits)
        if problems:
            self.warnings.append(INVALID_SETTINGS_WARNING.format(problems="; ".join(problems)))

        self.writer = WorkshopWriter(limits)

    @staticmethod
    def _check_settings(settings: ConverterSettings, limits: ConverterLimits):
        """Check settings built elsewhere against this converter's limits."""
        try:
            settings.validate(limits)
        except ValidationError as e:
            logger.info("Invalid settings (%s), using defaults", e)
            return ConverterSettings.defaults(limits), [str(e)]
        return settings, []

    def convert(self, source: Union[str, Path, Song]) -> ConversionResult:
        """
        Convert a song or a MIDI file to Workshop rules.

        Args:
            source: Song object or path to a .mid file

        Returns:
            ConversionResult with rules, counters and messages
        """
        song = source if isinstance(source, Song) else MidiReader.read(source)
        return self.convert_song(song)

    def convert_song(self, song: Song) -> ConversionResult:
        """
        Run the conversion pipeline on a parsed song.

        Args:
            song: Parsed song

        Returns:
            ConversionResult with rules, counters and messages
        """
        aggregation = aggregate_chords(song.tracks, self.settings, self.limits)

        result = ConversionResult(
            transposed_notes=aggregation.transposed_notes,
            skipped_notes=aggregation.skipped_notes,
            duration=song.duration,
            warnings=self.warnings + aggregation.warnings,
            errors=list(aggregation.errors),
        )

        if aggregation.is_empty:
            logger.info("No notes found after %.3f s, nothing to convert", self.settings.start_time)
            return result

        arrays = pack_chords(aggregation.chords, self.limits)
        result.rules = self.writer.to_text(arrays, self.settings.voices)
        result.total_elements = arrays.total_elements
        result.stop_time = arrays.stop_time
        result.truncated = arrays.truncated

        logger.info(
            "Converted %d of %d chords (%d elements, stopped at %.3f s)",
            arrays.chord_count,
            len(aggregation.chords),
            arrays.total_elements,
            arrays.stop_time,
        )
        return result


def convert_song(
    song: Song,
    settings: SettingsInput = None,
    limits: ConverterLimits = DEFAULT_LIMITS,
) -> ConversionResult:
    """
    Convert a parsed song to Workshop rules.

    Args:
        song: Parsed song
        settings: ConverterSettings or a mapping such as {"startTime": 0, "voices": 6}
        limits: Converter limits

    Returns:
        ConversionResult with rules, counters and messages
    """
    converter = MidiToWorkshopConverter(settings, limits)
    return converter.convert_song(song)


def convert_midi_to_workshop(
    source_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    settings: SettingsInput = None,
) -> ConversionResult:
    """
    Convert a MIDI file to Workshop rules.

    Args:
        source_path: Path to .mid file
        output_path: Optional path for the rules text file, written only
                     when rules were produced
        settings: ConverterSettings or a settings mapping

    Returns:
        ConversionResult with rules, counters and messages
    """
    converter = MidiToWorkshopConverter(settings)
    result = converter.convert(source_path)

    if output_path is not None and result.rules:
        WorkshopWriter.write_rules(result.rules, output_path)

    return result
