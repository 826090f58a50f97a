"""
Base parser protocol / ABC for simple-nem12.

The contract is:
1. parse() takes a LineCursor and returns a ParseResult.
2. ParseResult carries the completed MeterRead entities in file order,
   plus the non-fatal diagnostics raised while reading.

A parser either returns a complete ParseResult or raises; there is no
partial result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from simple_nem12.models import MeterRead
from simple_nem12.reader import LineCursor


@dataclass(frozen=True)
class Diagnostic:
    """A data-quality notice that did not abort the parse."""

    line_number: int
    message: str


@dataclass
class ParseResult:
    """Standardized output from a parser.

    Attributes:
        meter_reads: Completed meter reads, in order of appearance.
        diagnostics: Non-fatal notices (e.g., orphaned volume records).
        lines_read: Number of lines consumed from the source.
        source: Label of the parsed source (file path or ``"<stream>"``).
    """

    meter_reads: list[MeterRead] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    lines_read: int = 0
    source: str = ""


class BaseParser(ABC):
    """Abstract base class for line-record parsers."""

    @abstractmethod
    def parse(self, cursor: LineCursor, source: str = "<stream>") -> ParseResult:
        """Parse every record available from *cursor*.

        Args:
            cursor: LineCursor positioned at the first line.
            source: Label used in log messages and on the result.

        Returns:
            ParseResult with all meter reads.

        Raises:
            InvalidNem12FileError: On the first format violation.
            Nem12IOError: If the underlying stream fails.
        """
