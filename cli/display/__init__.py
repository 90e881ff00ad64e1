"""
CLI display modules.
"""

from cli.display.tables import display_song_info, display_conversion_result

__all__ = [
    "display_song_info",
    "display_conversion_result",
]
