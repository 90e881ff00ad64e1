"""
Overwatch Workshop rule writer.

Writes packed song arrays as Workshop rules ready to be pasted into the
playback script.
"""

from pathlib import Path
from typing import Iterator, List, Sequence, Union

from owmidi.constants import ConverterLimits, DEFAULT_LIMITS
from owmidi.models.result import PackedArrays
from owmidi.utils.timing import format_number


class WorkshopWriter:
    """
    Writer for Workshop song data rules.

    The output starts with one header rule declaring the amount of bots and
    the array size limit, followed by one rule per chunk of each song array.
    Every array is chunked on its own, chunk indexes restart at 0 for each.

    Example:
        arrays = pack_chords(chords)
        WorkshopWriter.write(arrays, voices=6, filepath="song.txt")
    """

    HEADER_RULE = (
        'rule("Max amount of bots required"){{event{{Ongoing-Global;}}'
        "actions{{Global.maxBots = {voices};Global.maxArraySize = {array_size};}}}}\n"
    )
    ARRAY_RULE = (
        'rule("{name}"){{event{{Ongoing-Global;}}'
        "actions{{Global.{name}[{index}] = Array({values});}}}}\n"
    )

    def __init__(self, limits: ConverterLimits = DEFAULT_LIMITS):
        self.limits = limits

    @classmethod
    def write(
        cls,
        arrays: PackedArrays,
        voices: int,
        filepath: Union[str, Path],
        limits: ConverterLimits = DEFAULT_LIMITS,
    ) -> None:
        """
        Write song arrays as Workshop rules to a text file.

        Args:
            arrays: Packed song arrays
            voices: Amount of bots required to play the song
            filepath: Output file path
            limits: Converter limits
        """
        cls.write_rules(cls(limits).to_text(arrays, voices), filepath)

    @staticmethod
    def write_rules(rules: str, filepath: Union[str, Path]) -> None:
        """
        Write already rendered rules to a text file.

        Args:
            rules: Rendered Workshop rules
            filepath: Output file path, parent directories are created
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(rules)

    def to_text(self, arrays: PackedArrays, voices: int) -> str:
        """
        Render song arrays as Workshop rules.

        Args:
            arrays: Packed song arrays
            voices: Amount of bots required to play the song

        Returns:
            All rules concatenated, header first
        """
        return "".join(self.rules(arrays, voices))

    def rules(self, arrays: PackedArrays, voices: int) -> List[str]:
        """Render every rule as a separate string, in output order."""
        rules = [self.header_rule(voices)]
        for name, values in arrays.named_arrays().items():
            for index, chunk in enumerate(self.chunks(values)):
                rules.append(self.array_rule(name, index, chunk))
        return rules

    def header_rule(self, voices: int) -> str:
        """Rule declaring the amount of bots and the array size limit."""
        return self.HEADER_RULE.format(voices=voices, array_size=self.limits.max_array_size)

    def array_rule(self, name: str, index: int, values: Sequence) -> str:
        """Rule assigning one chunk of an array to ``Global.name[index]``."""
        rendered = ", ".join(format_number(v, self.limits.note_precision) for v in values)
        return self.ARRAY_RULE.format(name=name, index=index, values=rendered)

    def chunks(self, values: Sequence) -> Iterator[Sequence]:
        """
        Split an array into chunks that fit in one Workshop array literal.

        Yields:
            Consecutive slices of at most ``limits.chunk_size`` values
        """
        size = self.limits.chunk_size
        for start in range(0, len(values), size):
            yield values[start : start + size]
