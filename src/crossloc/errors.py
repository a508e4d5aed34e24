"""Failure outcomes shared by the location model, converters and inverter."""

from __future__ import annotations


class LocationError(Exception):
    """Base class for every failure raised by crossloc."""


class Overflow(LocationError):
    """A junction sequence would exceed its depth bound (or parents exceed 255)."""


class NotationError(LocationError, ValueError):
    """Location text could not be parsed."""


class ConversionError(LocationError):
    """Base class for converter outcomes."""


class NoMatch(ConversionError):
    """The input does not have the shape this converter expects.

    Expected and recoverable: the caller moves on to the next converter.
    """


class UnsupportedDirection(ConversionError):
    """A one-way converter was asked to run in the direction it cannot."""


class NoConverterMatched(ConversionError):
    """Every converter in a chain failed.

    ``attempts`` holds ``(converter name, error)`` pairs in the order tried.
    """

    def __init__(self, subject: object, attempts: list[tuple[str, ConversionError]]) -> None:
        self.subject = subject
        self.attempts = attempts
        tried = ", ".join(name for name, _ in attempts) or "none"
        super().__init__(f"No converter matched {subject!s} (tried: {tried})")
