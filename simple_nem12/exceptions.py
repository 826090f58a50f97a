"""
Custom exception hierarchy for simple-nem12.

Callers can catch the whole family through ``SimpleNem12Error``, every
format violation through ``InvalidNem12FileError``, or a specific rule
(e.g., ``InvalidNmiError``) when they need to react to one case.

I/O failures from the underlying stream are kept apart from format
violations: ``Nem12IOError`` always chains the original ``OSError`` /
``UnicodeDecodeError`` as ``__cause__``.
"""

from __future__ import annotations


class SimpleNem12Error(Exception):
    """Base exception for all simple-nem12 errors."""


class Nem12IOError(SimpleNem12Error):
    """Raised when the underlying line source cannot be read."""


class ConfigValidationError(SimpleNem12Error):
    """Raised when a parser config file is empty or malformed."""


class InvalidNem12FileError(SimpleNem12Error):
    """Raised when the input violates the Simple NEM12 format.

    Attributes:
        line_number: 1-based line of the offending record, or ``None``
            when the violation is not tied to a single line.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class FramingError(InvalidNem12FileError):
    """Raised when the 100 / 900 records are missing or misplaced."""


class InvalidRecordTypeError(InvalidNem12FileError):
    """Raised when field 0 is not an integer or not a known record type."""


class MissingDataError(InvalidNem12FileError):
    """Raised when a record has fewer fields than its type requires."""


class InvalidNmiError(InvalidNem12FileError):
    """Raised when an NMI is not exactly 10 characters long."""


class InvalidEnumError(InvalidNem12FileError):
    """Raised when an energy unit or quality code is not a recognized value."""


class InvalidDateError(InvalidNem12FileError):
    """Raised when a volume date is not a valid ``YYYYMMDD`` date."""


class InvalidVolumeError(InvalidNem12FileError):
    """Raised when a volume is not a finite decimal number."""
