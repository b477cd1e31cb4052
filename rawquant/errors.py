"""Exceptions raised by the RawQuant pipeline."""
from __future__ import annotations


class RawQuantError(Exception):
    pass


class ParameterError(RawQuantError, ValueError):
    """A pipeline parameter is outside the range the engine can handle."""


class TruncatedInputError(RawQuantError):
    """The raw file holds fewer bytes than ``3 * width * height``.

    Only raised when the loader runs in strict mode; otherwise the missing
    samples are read as zero.
    """

    def __init__(self, path: str, expected: int, actual: int) -> None:
        super().__init__(f"{path}: expected {expected} bytes, found {actual}")
        self.path = path
        self.expected = expected
        self.actual = actual
