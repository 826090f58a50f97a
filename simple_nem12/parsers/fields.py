"""
Field-level parsers for Simple NEM12 records.

Each function takes the field list of one record (as produced by
``LineCursor``) plus its line number, validates it, and returns a domain
object.  Violations raise a specific ``InvalidNem12FileError`` subclass
carrying the line number.

Record layouts (fields past the required ones are ignored):
  200,<NMI>,<EnergyUnit>
  300,<YYYYMMDD>,<volume>,<Quality>
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from enum import Enum
from typing import TypeVar

from simple_nem12.exceptions import (
    InvalidDateError,
    InvalidEnumError,
    InvalidNmiError,
    InvalidRecordTypeError,
    InvalidVolumeError,
    MissingDataError,
)
from simple_nem12.models import (
    EnergyUnit,
    MeterRead,
    MeterVolume,
    Quality,
    RecordCode,
    RecordType,
)

NMI_LENGTH = 10
METER_READ_MIN_FIELDS = 3
METER_VOLUME_MIN_FIELDS = 4

_RECORD_TYPE_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DATE_PATTERN = re.compile(r"\d{8}", re.ASCII)
_VOLUME_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_VOLUME_QUANTUM = Decimal("0.01")

_END_OF_INPUT = RecordCode(RecordType.END_OF_INPUT, RecordType.END_OF_INPUT.value)
_WIRE_CODES = {
    RecordType.FILE_START,
    RecordType.METER_READ,
    RecordType.METER_VOLUME,
    RecordType.FILE_END,
}

E = TypeVar("E", bound=Enum)


def classify_record(fields: list[str] | None, line_number: int | None = None) -> RecordCode:
    """Classify a record by the integer code in field 0.

    ``None`` (end of input) classifies as ``END_OF_INPUT``.  Integers outside
    the known set classify as ``UNRECOGNIZED`` with the raw code kept.

    Raises:
        InvalidRecordTypeError: If field 0 is not an integer.
    """
    if fields is None:
        return _END_OF_INPUT
    if not _RECORD_TYPE_PATTERN.fullmatch(fields[0]):
        raise InvalidRecordTypeError(
            f"Record type {fields[0]!r} at line {line_number} is not an integer",
            line_number,
        )
    code = int(fields[0])
    try:
        record_type = RecordType(code)
    except ValueError:
        record_type = RecordType.UNRECOGNIZED
    if record_type not in _WIRE_CODES:
        record_type = RecordType.UNRECOGNIZED
    return RecordCode(record_type, code)


def parse_meter_read(fields: list[str], line_number: int) -> MeterRead:
    """Build an empty MeterRead from a 200 record.

    Raises:
        MissingDataError: Fewer than 3 fields.
        InvalidNmiError: NMI is not exactly 10 characters.
        InvalidEnumError: Energy unit is not recognized.
    """
    if len(fields) < METER_READ_MIN_FIELDS:
        raise MissingDataError(
            f"Invalid meter read at line {line_number}: missing data "
            f"(expected at least {METER_READ_MIN_FIELDS} fields, got {len(fields)})",
            line_number,
        )
    nmi = fields[1]
    if len(nmi) != NMI_LENGTH:
        raise InvalidNmiError(
            f"Invalid NMI {nmi!r} at line {line_number}: expected "
            f"{NMI_LENGTH} characters, got {len(nmi)}",
            line_number,
        )
    energy_unit = parse_enum(EnergyUnit, fields[2], line_number)
    return MeterRead(nmi=nmi, energy_unit=energy_unit)


def parse_meter_volume(fields: list[str], line_number: int) -> tuple[date, MeterVolume]:
    """Parse a 300 record into ``(date, MeterVolume)``.

    Raises:
        MissingDataError: Fewer than 4 fields.
        InvalidDateError: Date is not ``YYYYMMDD``.
        InvalidVolumeError: Volume is not a decimal number.
        InvalidEnumError: Quality is not recognized.
    """
    if len(fields) < METER_VOLUME_MIN_FIELDS:
        raise MissingDataError(
            f"Invalid meter volume at line {line_number}: missing data "
            f"(expected at least {METER_VOLUME_MIN_FIELDS} fields, got {len(fields)})",
            line_number,
        )
    volume_date = parse_date(fields[1], line_number)
    volume = parse_volume(fields[2], line_number)
    quality = parse_enum(Quality, fields[3], line_number)
    return volume_date, MeterVolume(volume=volume, quality=quality)


def parse_date(value: str, line_number: int | None = None) -> date:
    """Parse an 8-digit ``YYYYMMDD`` date."""
    if not _DATE_PATTERN.fullmatch(value):
        raise InvalidDateError(
            f"Invalid date {value!r} at line {line_number}: expected YYYYMMDD",
            line_number,
        )
    try:
        return datetime.strptime(value, "%Y%m%d").date()
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date {value!r} at line {line_number}: {e}", line_number
        ) from e


def parse_volume(value: str, line_number: int | None = None) -> Decimal:
    """Parse a decimal volume, rounded half-to-even to 2 decimal places.

    Only plain ASCII decimal notation is accepted (optional sign, digits,
    optional fraction and exponent): no whitespace, underscores, NaN or
    Infinity.
    """
    if not _VOLUME_PATTERN.fullmatch(value):
        raise InvalidVolumeError(
            f"Invalid volume {value!r} at line {line_number}: not a decimal number",
            line_number,
        )
    volume = Decimal(value)
    with localcontext() as ctx:
        if volume.adjusted() > ctx.Emax:
            raise InvalidVolumeError(
                f"Invalid volume {value!r} at line {line_number}: out of range",
                line_number,
            )
        # Room for every integer digit plus the two decimal places
        ctx.prec = max(ctx.prec, volume.adjusted() + 3)
        return volume.quantize(_VOLUME_QUANTUM, rounding=ROUND_HALF_EVEN)


def parse_enum(enum_cls: type[E], value: str, line_number: int | None = None) -> E:
    """Look up *value* among the values of *enum_cls* (exact match)."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [m.value for m in enum_cls]
        raise InvalidEnumError(
            f"Invalid {enum_cls.__name__} {value!r} at line {line_number}: "
            f"expected one of {allowed}",
            line_number,
        ) from None
