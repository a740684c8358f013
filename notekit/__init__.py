"""notekit - Musical notes derived from a pitch class and an octave.

Layers:
    1. core/ - Note derivation (MIDI value, frequency, descriptions)
    2. cli   - Command-line lookup of notes and frequencies
"""

__version__ = "0.1.0"

from .core import (
    Note,
    PitchClass,
    Octave,
    midi_value_from_frequency,
    midi_values_from_frequencies,
    NoteError,
    OutOfRangeError,
    InvalidArgumentError,
)

__all__ = [
    "Note",
    "PitchClass",
    "Octave",
    "midi_value_from_frequency",
    "midi_values_from_frequencies",
    "NoteError",
    "OutOfRangeError",
    "InvalidArgumentError",
]
