"""
Rich table displays for songs and conversion results.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import density_bar, format_channel, format_seconds
from owmidi.constants import DEFAULT_LIMITS
from owmidi.models.result import ConversionResult
from owmidi.models.settings import ConverterSettings
from owmidi.models.song import Song

console = Console()


def display_song_info(song: Song, filepath: Optional[str] = None) -> None:
    """Display the tracks of a parsed song."""
    single = "[yellow]yes (type 0)[/yellow]" if song.is_single_track else "no"
    header_content = f"""[bold]File:[/bold] {filepath or "N/A"}
[bold]Format:[/bold] {song.source_format or "N/A"}
[bold]Duration:[/bold] {format_seconds(song.duration)}
[bold]Tracks:[/bold] {len(song.tracks)}
[bold]Single Track:[/bold] {single}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]MIDI Song Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    track_table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold green")
    track_table.add_column("#", style="dim", width=3)
    track_table.add_column("Name", style="cyan", width=24)
    track_table.add_column("Ch", width=12)
    track_table.add_column("Notes", justify="right", width=7)
    track_table.add_column("Status", width=10)

    for i, track in enumerate(song.tracks):
        if track.is_percussion:
            status = "[yellow]Ignored[/yellow]"
        elif track.has_notes:
            status = "[green]Used[/green]"
        else:
            status = "[dim]Empty[/dim]"
        track_table.add_row(
            str(i),
            track.name or "-",
            format_channel(track.channel),
            str(track.note_on_count),
            status,
        )

    console.print(track_table)


def display_conversion_result(
    result: ConversionResult,
    settings: ConverterSettings,
    output: Optional[str] = None,
) -> None:
    """Display counters, warnings and errors of a conversion."""
    table = Table(
        title="Conversion", box=box.SIMPLE, show_header=False, header_style="bold magenta"
    )
    table.add_column("Property", style="cyan", width=20)
    table.add_column("Value", width=50)

    table.add_row("Start Time", format_seconds(settings.start_time))
    table.add_row("Voices", str(settings.voices))
    table.add_row("Duration", format_seconds(result.duration))
    table.add_row("Stop Time", format_seconds(result.stop_time))
    table.add_row(
        "Array Elements",
        density_bar(result.total_elements, DEFAULT_LIMITS.max_total_elements),
    )
    table.add_row("Rules", str(result.rule_count))
    table.add_row("Transposed Notes", str(result.transposed_notes))
    table.add_row("Skipped Notes", str(result.skipped_notes))
    if output:
        table.add_row("Output", output)

    console.print(table)

    if result.truncated:
        console.print(
            f"[yellow]Song data was cut at {result.stop_time:.3f} s "
            f"to stay within {DEFAULT_LIMITS.max_total_elements} array elements.[/yellow]"
        )

    for warning in result.warnings:
        console.print(f"[yellow]{warning}[/yellow]")
    for error in result.errors:
        console.print(f"[red]{error}[/red]")
