"""
simple-nem12: streaming parser for Simple NEM12 energy-metering files.

Public API surface:

- ``parse_file(path, ...)`` -- **recommended entry point**. Opens a file,
  parses it, and returns a ``ParseResult`` (meter reads + diagnostics).

- ``parse_stream(stream, ...)`` -- same, over an already-open text stream.
  The caller owns the stream.

- ``parse_simple_nem12(path, ...)`` -- returns only the ordered list of
  ``MeterRead`` entities.

- ``open_cursor(path, ...)`` -- context manager yielding the underlying
  ``LineCursor`` for callers that drive the records themselves.

Every entry point either returns a fully validated result or raises a
``SimpleNem12Error`` subclass; there is no partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from logging import NullHandler
from pathlib import Path
from typing import TextIO

from simple_nem12.config import ParserConfig, load_config, save_config
from simple_nem12.exceptions import (
    ConfigValidationError,
    FramingError,
    InvalidDateError,
    InvalidEnumError,
    InvalidNem12FileError,
    InvalidNmiError,
    InvalidRecordTypeError,
    InvalidVolumeError,
    MissingDataError,
    Nem12IOError,
    SimpleNem12Error,
)
from simple_nem12.models import EnergyUnit, MeterRead, MeterVolume, Quality, RecordType
from simple_nem12.parsers.base import Diagnostic, ParseResult
from simple_nem12.parsers.nem12 import SimpleNem12Parser
from simple_nem12.reader import LineCursor, open_cursor

__all__ = [
    "parse_file",
    "parse_stream",
    "parse_simple_nem12",
    "open_cursor",
    "LineCursor",
    "SimpleNem12Parser",
    "ParserConfig",
    "load_config",
    "save_config",
    "ParseResult",
    "Diagnostic",
    "MeterRead",
    "MeterVolume",
    "EnergyUnit",
    "Quality",
    "RecordType",
    "SimpleNem12Error",
    "Nem12IOError",
    "ConfigValidationError",
    "InvalidNem12FileError",
    "FramingError",
    "InvalidRecordTypeError",
    "MissingDataError",
    "InvalidNmiError",
    "InvalidEnumError",
    "InvalidDateError",
    "InvalidVolumeError",
]

logger = logging.getLogger(__name__)
logger.addHandler(NullHandler())


def _resolve_config(
    config: ParserConfig | None,
    config_path: str | Path | None,
) -> ParserConfig:
    if config is not None and config_path is not None:
        raise ValueError("Pass either config or config_path, not both")
    if config_path is not None:
        return load_config(config_path)
    return config or ParserConfig()


def parse_file(
    path: str | Path,
    config: ParserConfig | None = None,
    config_path: str | Path | None = None,
    on_diagnostic: Callable[[Diagnostic], None] | None = None,
) -> ParseResult:
    """Parse a Simple NEM12 file.

    Args:
        path: Path to the file.
        config: Parser settings (separator, encoding).  Defaults to
            ``ParserConfig()``.
        config_path: YAML file to load the settings from instead of
            passing *config*.
        on_diagnostic: Optional callback for non-fatal notices.

    Returns:
        ParseResult with the meter reads in file order.

    Raises:
        InvalidNem12FileError: On the first format violation.
        Nem12IOError: If the file cannot be opened or read.
    """
    config = _resolve_config(config, config_path)
    parser = SimpleNem12Parser(on_diagnostic=on_diagnostic)
    with open_cursor(path, config) as cursor:
        return parser.parse(cursor, source=str(path))


def parse_stream(
    stream: TextIO,
    config: ParserConfig | None = None,
    on_diagnostic: Callable[[Diagnostic], None] | None = None,
) -> ParseResult:
    """Parse Simple NEM12 records from an open text stream.

    ``config.encoding`` is not used; the stream is already decoded.
    """
    config = config or ParserConfig()
    cursor = LineCursor(stream, separator=config.separator)
    return SimpleNem12Parser(on_diagnostic=on_diagnostic).parse(cursor)


def parse_simple_nem12(
    path: str | Path,
    config: ParserConfig | None = None,
) -> list[MeterRead]:
    """Parse a file and return only its meter reads."""
    return parse_file(path, config=config).meter_reads
