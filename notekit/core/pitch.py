"""Pitch class and octave enumerations.

The note derivation code only relies on the ``PitchLike`` and ``OctaveLike``
protocols; ``PitchClass`` and ``Octave`` are the standard implementations of
them for twelve-tone equal temperament.
"""

from enum import Enum
from typing import Dict, Protocol, runtime_checkable

from .constants import OCTAVE_MIN, OCTAVE_MAX
from .errors import InvalidArgumentError, OutOfRangeError


@runtime_checkable
class PitchLike(Protocol):
    """Anything with a semitone offset and two display names."""

    @property
    def semitone_offset(self) -> int: ...

    @property
    def english_name(self) -> str: ...

    @property
    def musical_name(self) -> str: ...


@runtime_checkable
class OctaveLike(Protocol):
    """Anything with an octave number."""

    @property
    def number(self) -> int: ...


class PitchClass(Enum):
    """The twelve pitch classes, spelled with sharps."""

    C = (0, "C", "C")
    C_SHARP = (1, "C Sharp", "C♯")
    D = (2, "D", "D")
    D_SHARP = (3, "D Sharp", "D♯")
    E = (4, "E", "E")
    F = (5, "F", "F")
    F_SHARP = (6, "F Sharp", "F♯")
    G = (7, "G", "G")
    G_SHARP = (8, "G Sharp", "G♯")
    A = (9, "A", "A")
    A_SHARP = (10, "A Sharp", "A♯")
    B = (11, "B", "B")

    def __init__(self, semitone_offset: int, english_name: str, musical_name: str):
        self.semitone_offset = semitone_offset
        self.english_name = english_name
        self.musical_name = musical_name

    @classmethod
    def from_offset(cls, semitone_offset: int) -> "PitchClass":
        """Get the pitch class at a position (0-11) within the octave."""
        for pitch in cls:
            if pitch.semitone_offset == semitone_offset:
                return pitch
        raise OutOfRangeError("Semitone offset", semitone_offset, 0, 11)

    @classmethod
    def from_name(cls, name: str) -> "PitchClass":
        """
        Look up a pitch class by name.

        Accepts the member name ("C_SHARP"), the English name ("C Sharp"),
        the musical name ("C♯") or its ASCII spelling ("C#"). Matching is
        case-insensitive.

        Raises:
            InvalidArgumentError: If the name is not recognised
        """
        key = name.strip().lower()
        pitch = _PITCH_ALIASES.get(key)
        if pitch is None:
            raise InvalidArgumentError(f"Unknown pitch class: {name!r}", name)
        return pitch


_PITCH_ALIASES: Dict[str, PitchClass] = {
    alias.lower(): pitch
    for pitch in PitchClass
    for alias in (
        pitch.name,
        pitch.english_name,
        pitch.musical_name,
        pitch.musical_name.replace("♯", "#"),
    )
}


class Octave(Enum):
    """Octaves 0-10, the span covered by MIDI values 0-127."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10

    @property
    def number(self) -> int:
        return self.value

    @classmethod
    def from_number(cls, number: int) -> "Octave":
        if not OCTAVE_MIN <= number <= OCTAVE_MAX:
            raise OutOfRangeError("Octave", number, OCTAVE_MIN, OCTAVE_MAX)
        return cls(number)
