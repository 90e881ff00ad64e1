"""
Array packing - flattens chords into the three Workshop song arrays.
"""

import logging

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS
from owmidi.models.result import ChordMap, PackedArrays
from owmidi.utils.timing import round_to_places

logger = logging.getLogger(__name__)


def chord_cost(pitches) -> int:
    """
    Elements one chord adds to the arrays.

    Each chord adds its time and its pitch count, plus one element per pitch.
    """
    return 2 + len(pitches)


def pack_chords(chords: ChordMap, limits: ConverterLimits = DEFAULT_LIMITS) -> PackedArrays:
    """
    Pack chords into flat arrays without exceeding the element budget.

    Chords are walked in time order. The first chord that would push the
    total over ``limits.max_total_elements`` stops packing; it and every
    later chord are left out and its time becomes the stop time.

    Args:
        chords: Chord map (times need not be pre-sorted)
        limits: Converter limits

    Returns:
        PackedArrays holding times, chord sizes and pitches
    """
    packed = PackedArrays()

    for time in sorted(chords):
        pitches = chords[time]
        time = round_to_places(time, limits.note_precision)
        cost = chord_cost(pitches)

        if packed.total_elements + cost > limits.max_total_elements:
            packed.stop_time = time
            packed.truncated = True
            logger.info(
                "Element budget of %d reached at %.3f s", limits.max_total_elements, time
            )
            break

        packed.total_elements += cost
        packed.times.append(time)
        packed.chord_sizes.append(len(pitches))
        packed.pitches.extend(sorted(pitches))
        packed.stop_time = time

    return packed
