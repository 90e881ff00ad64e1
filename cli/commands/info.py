"""
Info command - display the tracks of a MIDI file.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_song_info
from owmidi.utils.validation import ConversionError

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="MIDI file to analyze (.mid)"),
) -> None:
    """
    Display information about a MIDI file.

    Shows the duration and, for every track, its channel, the amount of
    notes and whether the converter uses or ignores it.

    Examples:

        owmidi info song.mid
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    from owmidi.formats.midi.reader import MidiReader

    try:
        song = MidiReader.read(file)
    except ConversionError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_song_info(song, str(file))


if __name__ == "__main__":
    app()
