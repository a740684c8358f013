"""Exceptions raised while deriving notes."""

from typing import Optional


class NoteError(ValueError):
    """Base class for note derivation errors."""


class OutOfRangeError(NoteError):
    """A derived value fell outside its representable range."""

    def __init__(
        self,
        what: str,
        value: int,
        lower: int,
        upper: int,
    ):
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{what} {value} out of range [{lower}, {upper}]")


class InvalidArgumentError(NoteError):
    """An argument can't be converted (e.g. a non-positive frequency)."""

    def __init__(self, message: str, value: Optional[object] = None):
        self.value = value
        super().__init__(message)
