"""Tests for packing chords into the Workshop arrays."""

from owmidi.constants import ConverterLimits
from owmidi.converters.packer import chord_cost, pack_chords


def budget_song(chord_count, pitches_per_chord=1, spacing=0.1):
    """Chord map with evenly spaced chords of equal size."""
    return {
        round(i * spacing, 3): list(range(pitches_per_chord)) for i in range(chord_count)
    }


class TestPackChords:
    """Test cases for flattening chords."""

    def test_flat_arrays(self):
        """Times, sizes and pitches are filled from the same walk."""
        chords = {0.0: [10, 6, 26], 0.5: [40], 1.25: [3, 1]}
        packed = pack_chords(chords)

        assert packed.times == [0.0, 0.5, 1.25]
        assert packed.chord_sizes == [3, 1, 2]
        assert packed.pitches == [6, 10, 26, 40, 1, 3]
        assert packed.total_elements == 5 + 3 + 4
        assert packed.stop_time == 1.25
        assert not packed.truncated

    def test_pitches_sorted_numerically(self):
        """Pitches are sorted as numbers, so 9 comes before 10."""
        packed = pack_chords({0.0: [10, 9, 64, 2]})

        assert packed.pitches == [2, 9, 10, 64]

    def test_unsorted_keys_walked_in_time_order(self):
        """Packing does not rely on the map's insertion order."""
        packed = pack_chords({2.0: [1], 0.5: [2], 1.0: [3]})

        assert packed.times == [0.5, 1.0, 2.0]
        assert packed.pitches == [2, 3, 1]

    def test_element_count_matches_chords(self):
        """Total elements equal 2 + pitches for every packed chord."""
        chords = {i * 0.25: list(range(i % 6 + 1)) for i in range(100)}
        packed = pack_chords(chords)

        expected = sum(chord_cost(chords[t]) for t in packed.times)
        assert packed.total_elements == expected
        assert len(packed.times) + len(packed.chord_sizes) + len(packed.pitches) == expected

    def test_input_not_mutated(self):
        """Sorting pitches does not reorder the caller's chord lists."""
        chords = {0.0: [5, 1, 3]}
        pack_chords(chords)

        assert chords[0.0] == [5, 1, 3]

    def test_empty_chords(self):
        """No chords gives empty arrays."""
        packed = pack_chords({})

        assert packed.times == []
        assert packed.total_elements == 0


class TestElementBudget:
    """Test cases for the global element budget."""

    def test_budget_stops_before_offending_chord(self):
        """3001 one-note chords cost 9003, the last one is left out."""
        chords = budget_song(3001)
        packed = pack_chords(chords)

        assert packed.total_elements == 9000
        assert packed.chord_count == 3000
        assert packed.truncated
        assert packed.stop_time == 300.0
        assert packed.stop_time not in packed.times

    def test_budget_exactly_reached(self):
        """A song costing exactly the budget fits completely."""
        packed = pack_chords(budget_song(3000))

        assert packed.total_elements == 9000
        assert not packed.truncated
        assert packed.stop_time == packed.times[-1] == 299.9

    def test_budget_never_exceeded(self):
        """Large chords stop as soon as the next one would not fit."""
        packed = pack_chords(budget_song(2000, pitches_per_chord=6))

        assert packed.total_elements <= 9000
        assert packed.total_elements == 1125 * 8
        assert packed.stop_time == 112.5

    def test_small_budget(self):
        """Custom limits shrink the budget."""
        limits = ConverterLimits(max_total_elements=10)
        packed = pack_chords({0.0: [1, 2], 1.0: [3, 4], 2.0: [5]}, limits)

        assert packed.times == [0.0, 1.0]
        assert packed.total_elements == 8
        assert packed.stop_time == 2.0
