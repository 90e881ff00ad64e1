"""
Display formatting utilities for CLI output.

Provides usage bars, time displays, and other formatting helpers.
"""

from typing import Optional

from owmidi.constants import DEFAULT_LIMITS


def density_bar(
    used: int,
    total: int,
    width: int = 20,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a density/usage bar with percentage.

    Returns:
        Formatted string like "[████████░░░░░░░░░░░░] 42.0% (3780/9000)"
    """
    if total <= 0:
        return f"[{empty_char * width}]   0.0% (0/0)"

    clamped = max(0, min(used, total))
    percent = (clamped / total) * 100
    fill_count = int((clamped / total) * width)
    empty_count = width - fill_count

    bar = filled_char * fill_count + empty_char * empty_count

    return f"[{bar}] {percent:5.1f}% ({used}/{total})"


def format_seconds(seconds: Optional[float]) -> str:
    """
    Format a time in seconds as minutes and seconds.

    Returns:
        Formatted string like "2:05.250 (125.250 s)", or "-" for None
    """
    if seconds is None:
        return "-"

    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}:{rest:06.3f} ({seconds:.3f} s)"


def format_channel(channel: Optional[int]) -> str:
    """Format a 0-based MIDI channel as the 1-16 number shown on devices."""
    if channel is None:
        return "[dim]-[/dim]"
    if channel == DEFAULT_LIMITS.percussion_channel:
        return f"{channel + 1} [yellow](drums)[/yellow]"
    return str(channel + 1)
