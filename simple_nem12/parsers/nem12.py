"""
Streaming parser for Simple NEM12 files.

The file is read one record at a time through a ``LineCursor``:

  100                          first line only
  200,<NMI>,<EnergyUnit>       starts a meter read
  300,<YYYYMMDD>,<vol>,<Q>     zero or more, directly after a 200 or a 300
  900                          last line only

Each 200 record is parsed into a MeterRead, then the parser peeks ahead and
consumes every following 300 record into it.  The first record that is not
a 300 (or end of input) completes the meter read.

A 300 record reached by the outer loop has no meter read to attach to.  It
is dropped with a WARNING and a ``Diagnostic``; this is the only violation
that does not abort the parse.  Everything else raises on the first error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from simple_nem12.exceptions import FramingError, InvalidRecordTypeError
from simple_nem12.models import MeterRead, RecordType
from simple_nem12.parsers.base import BaseParser, Diagnostic, ParseResult
from simple_nem12.parsers.fields import (
    classify_record,
    parse_meter_read,
    parse_meter_volume,
)
from simple_nem12.reader import LineCursor

logger = logging.getLogger(__name__)


class SimpleNem12Parser(BaseParser):
    """Record-type dispatch parser for Simple NEM12 files.

    Args:
        on_diagnostic: Optional callback invoked with every ``Diagnostic``
            as it is raised, in addition to logging it and collecting it on
            the ``ParseResult``.
    """

    def __init__(
        self,
        on_diagnostic: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        self.on_diagnostic = on_diagnostic

    def parse(self, cursor: LineCursor, source: str = "<stream>") -> ParseResult:
        logger.info("Parsing Simple NEM12 source: %s", source)
        result = ParseResult(source=source)
        end_line: int | None = None

        while True:
            fields = cursor.read_next()
            line_number = cursor.lines_read
            if fields is None:
                break

            code = classify_record(fields, line_number)
            record_type = code.record_type

            if line_number == 1 and record_type != RecordType.FILE_START:
                raise FramingError(
                    f"Record type of the first line is expected to be "
                    f"{RecordType.FILE_START.value}, got {code.raw}",
                    line_number,
                )

            if record_type == RecordType.FILE_START:
                if line_number != 1:
                    raise FramingError(
                        f"Record type {RecordType.FILE_START.value} must be the "
                        f"first line, found at line {line_number}",
                        line_number,
                    )
            elif record_type == RecordType.FILE_END:
                if end_line is not None:
                    raise FramingError(
                        f"Duplicate record type {RecordType.FILE_END.value} at line "
                        f"{line_number} (first seen at line {end_line})",
                        line_number,
                    )
                end_line = line_number
            elif record_type == RecordType.METER_READ:
                meter_read = parse_meter_read(fields, line_number)
                self._read_volumes(cursor, meter_read)
                logger.debug(
                    "NMI %s: %d volume(s) ending at line %d",
                    meter_read.nmi, len(meter_read.volumes), cursor.lines_read,
                )
                result.meter_reads.append(meter_read)
            elif record_type == RecordType.METER_VOLUME:
                self._report(
                    result,
                    Diagnostic(line_number, f"No parent meter read at line {line_number}"),
                )
            else:
                raise InvalidRecordTypeError(
                    f"Invalid record type ({code.raw}) at line: {line_number}",
                    line_number,
                )

        result.lines_read = cursor.lines_read
        if result.lines_read == 0:
            raise FramingError(
                f"Input is empty: record type {RecordType.FILE_START.value} "
                "is expected on the first line"
            )
        if end_line != result.lines_read:
            raise FramingError(
                f"Record type of the last line is expected to be "
                f"{RecordType.FILE_END.value}",
                result.lines_read,
            )

        logger.info(
            "Parsed %s: %d meter read(s), %d line(s), %d diagnostic(s)",
            source, len(result.meter_reads), result.lines_read, len(result.diagnostics),
        )
        return result

    def _read_volumes(self, cursor: LineCursor, meter_read: MeterRead) -> None:
        """Consume the run of 300 records directly following a 200 record."""
        while True:
            peeked = classify_record(cursor.peek_next(), cursor.lines_read + 1)
            if peeked.record_type != RecordType.METER_VOLUME:
                return
            fields = cursor.read_next()
            volume_date, volume = parse_meter_volume(fields, cursor.lines_read)
            meter_read.append_volume(volume_date, volume)

    def _report(self, result: ParseResult, diagnostic: Diagnostic) -> None:
        logger.warning("%s", diagnostic.message)
        result.diagnostics.append(diagnostic)
        if self.on_diagnostic is not None:
            self.on_diagnostic(diagnostic)
