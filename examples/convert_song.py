#!/usr/bin/env python3
"""
Example: Convert a MIDI song to Overwatch Workshop rules

Reads a MIDI file, converts it with 8 voices starting at 2 seconds and
prints the counters the Workshop piano script cares about.
"""

import sys

sys.path.insert(0, "..")

from pathlib import Path
from owmidi import MidiReader, convert_song


def main():
    midi_file = Path(sys.argv[1] if len(sys.argv) > 1 else "song.mid")
    output_file = midi_file.with_suffix(".txt")

    song = MidiReader.read(midi_file)
    print(f"Read {midi_file}: {len(song.tracks)} tracks, {song.duration:.1f} s")

    result = convert_song(song, {"startTime": 2.0, "voices": 8})

    for message in result.warnings + result.errors:
        print(message)

    if not result.rules:
        return 1

    output_file.write_text(result.rules, encoding="utf-8")
    print(f"  Created: {output_file} ({result.rule_count} rules)")
    print(f"  Array elements: {result.total_elements}")
    print(f"  Transposed notes: {result.transposed_notes}")
    print(f"  Skipped notes: {result.skipped_notes}")
    print(f"  Stopped at: {result.stop_time:.3f} s of {result.duration:.3f} s")

    print("\nDone! Paste the rules into the Workshop piano script.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
