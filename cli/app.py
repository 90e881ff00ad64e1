"""
owmidi - MIDI to Overwatch Workshop piano converter.

A CLI tool for converting MIDI songs to Workshop song data rules.
"""

import typer
from rich.console import Console

from cli.commands.info import info
from cli.commands.convert import convert
from owmidi import __version__

console = Console()

# Main app
app = typer.Typer(
    name="owmidi",
    help="Convert MIDI files to Overwatch Workshop piano rules.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="convert")(convert)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]owmidi[/bold] version {__version__}")
    console.print("[dim]MIDI to Overwatch Workshop piano converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    owmidi - Convert MIDI songs for the Overwatch Workshop piano.

    [bold]Quick Start:[/bold]

        owmidi info song.mid                 # Tracks and duration
        owmidi convert song.mid              # Write song.txt
        owmidi convert song.mid -n 8 -s 4.5  # 8 bots, start at 4.5 s

    Paste the generated rules into the Workshop piano script.

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
