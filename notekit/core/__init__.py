"""Core types and constants for notekit."""

from .note import (
    Note,
    derive_midi_value,
    derive_frequency,
    derive_english_description,
    derive_musical_description,
    midi_value_from_frequency,
    midi_values_from_frequencies,
)
from .pitch import PitchClass, Octave, PitchLike, OctaveLike
from .errors import NoteError, OutOfRangeError, InvalidArgumentError
from .constants import (
    CONCERT_PITCH,
    CONCERT_PITCH_MIDI,
    MIDI_MIN,
    MIDI_MAX,
)

__all__ = [
    "Note",
    "derive_midi_value",
    "derive_frequency",
    "derive_english_description",
    "derive_musical_description",
    "midi_value_from_frequency",
    "midi_values_from_frequencies",
    "PitchClass",
    "Octave",
    "PitchLike",
    "OctaveLike",
    "NoteError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "CONCERT_PITCH",
    "CONCERT_PITCH_MIDI",
    "MIDI_MIN",
    "MIDI_MAX",
]
