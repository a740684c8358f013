"""Command-line interface for notekit.

Provides commands for:
- note: Show the derived values of a pitch class in an octave
- freq: Map a frequency to its MIDI value (and note, when in range)
- octave: Show every note of an octave
"""

from typing import Any, Dict, List

import typer
from rich.console import Console
from rich.table import Table

from .core import (
    Note,
    NoteError,
    Octave,
    PitchClass,
    MIDI_MIN,
    MIDI_MAX,
    midi_value_from_frequency,
)

app = typer.Typer(
    name="notekit",
    help="Musical notes: MIDI values, frequencies and names",
    rich_markup_mode="markdown",
)
console = Console()


def note_to_dict(note: Note) -> Dict[str, Any]:
    """Convert a note to a dictionary for JSON output."""
    return {
        "pitch": note.pitch.name,
        "octave": note.octave.number,
        "midi_value": note.midi_value,
        "frequency": note.frequency,
        "english_description": note.english_description,
        "musical_description": note.musical_description,
    }


@app.command()
def note(
    pitch: str = typer.Argument(..., help="Pitch class, e.g. C, C#, 'F Sharp'"),
    octave: int = typer.Argument(..., help="Octave number (0-10)"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Show MIDI value, frequency and names of a note.

    **Examples:**

        notekit note A 5

        notekit note "C#" 4 --json
    """
    try:
        result = Note.create(PitchClass.from_name(pitch), Octave.from_number(octave))
    except NoteError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data=note_to_dict(result))
    else:
        _show_notes_table([result], title=f"Note {result.musical_description}")


@app.command()
def freq(
    frequency: float = typer.Argument(..., help="Frequency in Hz"),
):
    """Find the MIDI value for a frequency (truncated, not rounded)."""
    try:
        midi_value = midi_value_from_frequency(frequency)
    except NoteError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{frequency:g} Hz[/bold] -> MIDI value {midi_value}")
    if MIDI_MIN <= midi_value <= MIDI_MAX:
        found = Note.from_midi_value(midi_value)
        console.print(
            f"  Note: {found.english_description} ({found.musical_description}), "
            f"{found.frequency:.2f} Hz"
        )
    else:
        console.print(f"[yellow]  Outside MIDI range {MIDI_MIN}-{MIDI_MAX}[/yellow]")


@app.command()
def octave(
    number: int = typer.Argument(..., help="Octave number (0-10)"),
):
    """Show every note of an octave that fits in the MIDI range."""
    try:
        oct_ = Octave.from_number(number)
    except NoteError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    notes = []
    for pitch in PitchClass:
        try:
            notes.append(Note.create(pitch, oct_))
        except NoteError:
            # Octave 10 stops at G
            break

    _show_notes_table(notes, title=f"Octave {number}")


def _show_notes_table(notes: List[Note], title: str = "Notes"):
    """Display notes in a table."""
    table = Table(title=title)
    table.add_column("Note", style="cyan")
    table.add_column("English", style="green")
    table.add_column("MIDI", style="yellow")
    table.add_column("Frequency (Hz)", style="magenta")

    for n in notes:
        table.add_row(
            n.musical_description,
            n.english_description,
            str(n.midi_value),
            f"{n.frequency:.2f}",
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
