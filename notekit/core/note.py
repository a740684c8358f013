"""Note data class and the derivations behind it.

A note is fully determined by its pitch class and octave. Everything else
(MIDI value, frequency, descriptions) is derived once, at construction, by the
``derive_*`` functions below.
"""

import warnings
from dataclasses import dataclass, field

import numpy as np

from .constants import (
    CONCERT_PITCH,
    CONCERT_PITCH_MIDI,
    SEMITONES_PER_OCTAVE,
    MIDI_MIN,
    MIDI_MAX,
)
from .errors import InvalidArgumentError, OutOfRangeError
from .pitch import OctaveLike, PitchLike, PitchClass, Octave


def derive_midi_value(pitch: PitchLike, octave: OctaveLike) -> int:
    """
    Compute the MIDI value of a pitch class in an octave.

    Raises:
        OutOfRangeError: If the result is outside 0-127
    """
    midi_value = octave.number * SEMITONES_PER_OCTAVE + pitch.semitone_offset
    if not MIDI_MIN <= midi_value <= MIDI_MAX:
        raise OutOfRangeError("MIDI value", midi_value, MIDI_MIN, MIDI_MAX)
    return midi_value


def derive_frequency(midi_value: int) -> float:
    """Convert MIDI pitch to frequency (Hz), equal temperament, MIDI 69 = 440 Hz."""
    return CONCERT_PITCH * (2 ** ((midi_value - CONCERT_PITCH_MIDI) / 12.0))


def derive_english_description(pitch: PitchLike, octave: OctaveLike) -> str:
    """English form, e.g. 'C Sharp 4'."""
    return f"{pitch.english_name} {octave.number}"


def derive_musical_description(pitch: PitchLike, octave: OctaveLike) -> str:
    """Musical form, e.g. 'C♯4'."""
    return f"{pitch.musical_name}{octave.number}"


def midi_value_from_frequency(frequency: float) -> int:
    """
    Convert frequency (Hz) to MIDI pitch.

    The fractional part is truncated toward zero rather than rounded, so a
    frequency a little below a semitone maps to the semitone beneath it.
    Results outside 0-127 are returned as-is with a warning.

    Raises:
        InvalidArgumentError: If frequency is not a positive finite number
    """
    if not (frequency > 0 and np.isfinite(frequency)):
        raise InvalidArgumentError(
            f"Frequency must be positive and finite, got {frequency}", frequency
        )
    midi_value = int(12 * np.log2(frequency / CONCERT_PITCH) + CONCERT_PITCH_MIDI)
    if not MIDI_MIN <= midi_value <= MIDI_MAX:
        warnings.warn(
            f"{frequency} Hz maps to MIDI value {midi_value}, "
            f"outside [{MIDI_MIN}, {MIDI_MAX}]",
            stacklevel=2,
        )
    return midi_value


def midi_values_from_frequencies(frequencies: np.ndarray) -> np.ndarray:
    """Convert an array of frequencies to MIDI pitches (truncated)."""
    f0 = np.asarray(frequencies, dtype=float)
    bad = ~(np.isfinite(f0) & (f0 > 0))
    if bad.any():
        raise InvalidArgumentError(
            f"{int(bad.sum())} frequencies are not positive and finite",
            f0[bad],
        )
    midi = np.trunc(12 * np.log2(f0 / CONCERT_PITCH) + CONCERT_PITCH_MIDI)
    midi = midi.astype(int)
    if midi.size and (midi.min() < MIDI_MIN or midi.max() > MIDI_MAX):
        warnings.warn(
            f"Some frequencies map outside [{MIDI_MIN}, {MIDI_MAX}]", stacklevel=2
        )
    return midi


@dataclass(frozen=True)
class Note:
    """Represents a musical note: a pitch class in a given octave."""

    pitch: PitchLike
    octave: OctaveLike
    midi_value: int = field(init=False, compare=False)  # 0-127
    frequency: float = field(init=False, compare=False)  # Hz
    english_description: str = field(init=False, compare=False)
    musical_description: str = field(init=False, compare=False)

    def __post_init__(self):
        # Range check happens first so a failed note never gets partly built
        midi_value = derive_midi_value(self.pitch, self.octave)
        object.__setattr__(self, "midi_value", midi_value)
        object.__setattr__(self, "frequency", derive_frequency(midi_value))
        object.__setattr__(
            self,
            "english_description",
            derive_english_description(self.pitch, self.octave),
        )
        object.__setattr__(
            self,
            "musical_description",
            derive_musical_description(self.pitch, self.octave),
        )

    @classmethod
    def create(cls, pitch: PitchLike, octave: OctaveLike) -> "Note":
        """
        Build a note from a pitch class and an octave.

        Raises:
            OutOfRangeError: If the MIDI value falls outside 0-127
        """
        return cls(pitch, octave)

    @classmethod
    def from_midi_value(cls, midi_value: int) -> "Note":
        """Build the standard (sharp-spelled) note for a MIDI value."""
        if not MIDI_MIN <= midi_value <= MIDI_MAX:
            raise OutOfRangeError("MIDI value", midi_value, MIDI_MIN, MIDI_MAX)
        number, offset = divmod(midi_value, SEMITONES_PER_OCTAVE)
        return cls(PitchClass.from_offset(offset), Octave.from_number(number))

    # Ordering is by pitch height only; notes spelled differently can share a
    # MIDI value without being equal.
    def __lt__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.midi_value < other.midi_value

    def __le__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.midi_value <= other.midi_value

    def __gt__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.midi_value > other.midi_value

    def __ge__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.midi_value >= other.midi_value

    def __str__(self) -> str:
        return self.musical_description
