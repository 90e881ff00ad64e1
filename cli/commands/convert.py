"""
Convert command - MIDI file to Overwatch Workshop rules.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from owmidi.constants import DEFAULT_LIMITS
from owmidi.formats.workshop.writer import WorkshopWriter
from owmidi.utils.validation import ConversionError

console = Console()
app = typer.Typer()


def setup_logging(verbose: bool) -> None:
    """Route owmidi log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Source MIDI file (.mid)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output rules file path"),
    start_time: float = typer.Option(
        DEFAULT_LIMITS.default_start_time,
        "--start-time",
        "-s",
        help="Time (seconds) in the song where reading begins",
    ),
    voices: int = typer.Option(
        DEFAULT_LIMITS.default_voices,
        "--voices",
        "-n",
        help=f"Bots used for playback ({DEFAULT_LIMITS.voices_min}-{DEFAULT_LIMITS.voices_max})",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert a MIDI file to Overwatch Workshop rules.

    The rules hold the song data arrays read by the Workshop piano script.
    Percussion tracks are ignored, notes outside the piano are transposed
    by octaves and chords are limited to the amount of voices.

    Examples:

        owmidi convert song.mid -o song.txt

        owmidi convert song.mid --start-time 12.5 --voices 8

        owmidi convert song.mid --json
    """
    setup_logging(verbose)

    if not source.exists():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    output_path = output or source.with_suffix(".txt")

    from owmidi.converters.midi_to_workshop import MidiToWorkshopConverter

    converter = MidiToWorkshopConverter({"startTime": start_time, "voices": voices})

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Converting MIDI to Workshop rules...", total=None)

        try:
            result = converter.convert(source)
        except (ConversionError, OSError) as e:
            console.print(f"[red]Error: {e}[/red]")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

        if result.rules:
            WorkshopWriter.write_rules(result.rules, output_path)

        progress.update(task, description="Done!")

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        from cli.display.tables import display_conversion_result

        display_conversion_result(
            result, converter.settings, str(output_path) if result.rules else None
        )
        if result.rules:
            console.print(f"[green]Converted:[/green] {source} -> {output_path}")

    if result.errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
