"""Errors raised by the NMEA sentence parsers.

Two kinds of failure are distinguished:

    STRUCTURAL: the sentence has fewer comma-separated fields than the
        parser needs. Nothing can be read from it.

    SEMANTIC: a field is present but cannot be parsed as its expected type,
        or parses to a value outside its allowed range or enumeration.

Every error carries the offending field name, its raw text and the
constraint it violated, so callers can report or filter failures without
parsing the message string.
"""

from enum import Enum


class ErrorKind(Enum):
    """Failure category of an ``NMEAError``."""

    STRUCTURAL = "ParsingError"
    SEMANTIC = "InvalidData"


class NMEAError(Exception):
    """Base class for sentence parsing failures.

    Args:
        kind: Failure category.
        message: Human-readable description.
        field: Name of the offending field, if the failure concerns one.
        value: Raw text of the offending field.
        constraint: The expectation that was not met (e.g. ``"0 < hdop <= 50"``).
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        field: str | None = None,
        value: str | None = None,
        constraint: str | None = None,
    ) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message
        self.field = field
        self.value = value
        self.constraint = constraint


class StructuralError(NMEAError):
    """The sentence has too few fields.

    Example:
        >>> StructuralError("GSV", expected=4, actual=2)
        StructuralError('ParsingError: GSV frame too short: expected >=4 fields, got 2')
    """

    def __init__(self, sentence: str, expected: int, actual: int) -> None:
        super().__init__(
            ErrorKind.STRUCTURAL,
            f"{sentence} frame too short: expected >={expected} fields, got {actual}",
            constraint=f">= {expected} fields",
        )
        self.expected = expected
        self.actual = actual


class SemanticError(NMEAError):
    """A field is unparseable or outside its allowed range."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        constraint: str | None = None,
    ) -> None:
        super().__init__(ErrorKind.SEMANTIC, message, field, value, constraint)
