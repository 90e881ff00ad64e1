"""
Chord aggregation - groups note events into chords by onset time.

Each surviving note-on is moved onto the piano, its time is quantized to
the note precision and it is added to the chord at that time. Chords keep
at most ``voices`` distinct pitches; later notes of a full chord are
skipped, never replacing a pitch already in it.
"""

import logging
from typing import Iterable, List

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS
from owmidi.models.result import ChordAggregation, ChordMap
from owmidi.models.settings import ConverterSettings
from owmidi.models.song import Track
from owmidi.utils.pitch import normalize_pitch, offset_pitch
from owmidi.utils.timing import round_to_places

logger = logging.getLogger(__name__)

TYPE_0_FILE_WARNING = (
    "WARNING: The processed file is a type 0 file and may have been converted incorrectly."
)
NO_NOTES_FOUND_ERROR = "Error: no notes found in MIDI file in the given time range."


def sort_chords(chords: ChordMap) -> ChordMap:
    """Return a new chord map ordered by numeric time."""
    return {time: chords[time] for time in sorted(chords)}


def aggregate_chords(
    tracks: Iterable[Track],
    settings: ConverterSettings,
    limits: ConverterLimits = DEFAULT_LIMITS,
) -> ChordAggregation:
    """
    Read the note events of all tracks into a time-ordered chord map.

    Args:
        tracks: Tracks of the song, in file order
        settings: Start time and voice limit for this conversion
        limits: Converter limits

    Returns:
        ChordAggregation with sorted chords, counters and messages
    """
    tracks: List[Track] = list(tracks)
    result = ChordAggregation()
    chords: ChordMap = {}

    for track in tracks:
        if track.channel == limits.percussion_channel:
            logger.debug("Ignoring percussion track %r", track.name)
            continue

        for event in track.events:
            if event.velocity == 0:
                # Note off, not used by the piano
                continue

            if event.time < settings.start_time:
                continue

            pitch, transposed = normalize_pitch(event.pitch, limits)
            if transposed:
                result.transposed_notes += 1
            pitch = offset_pitch(pitch, limits)
            time = round_to_places(event.time, limits.note_precision)

            chord = chords.setdefault(time, [])
            if pitch in chord:
                continue
            if len(chord) < settings.voices:
                chord.append(pitch)
            else:
                result.skipped_notes += 1

    if chords:
        result.chords = sort_chords(chords)
    else:
        result.errors.append(NO_NOTES_FOUND_ERROR)

    if len(tracks) == 1:
        result.warnings.append(TYPE_0_FILE_WARNING)

    logger.debug(
        "Aggregated %d chords (%d transposed, %d skipped)",
        len(result.chords),
        result.transposed_notes,
        result.skipped_notes,
    )
    return result
