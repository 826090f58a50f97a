"""
Domain models for simple-nem12.

Key types:
- RecordType / RecordCode: the record-type code found in field 0 of every
  line, classified into a closed enum. Codes outside the enum keep their
  raw value on ``RecordCode.raw`` so error messages can name them.
- EnergyUnit, Quality: exact-match enumerations of the string fields.
- MeterVolume: one day's volume, immutable.
- MeterRead: one NMI plus its date -> MeterVolume mapping.

EnergyUnit currently has a single member. New units are added as new
enum members; the parser's validation goes through ``EnergyUnit(value)``
and needs no change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum, IntEnum


class RecordType(IntEnum):
    """Record-type codes of the Simple NEM12 format."""

    FILE_START = 100
    METER_READ = 200
    METER_VOLUME = 300
    FILE_END = 900
    # Not found on the wire
    UNRECOGNIZED = 0
    END_OF_INPUT = -100


@dataclass(frozen=True)
class RecordCode:
    """Classified record type plus the integer actually read from field 0."""

    record_type: RecordType
    raw: int


class EnergyUnit(str, Enum):
    KWH = "KWH"


class Quality(str, Enum):
    """Volume quality flag: actual or estimated."""

    A = "A"
    E = "E"


@dataclass(frozen=True)
class MeterVolume:
    """A daily volume rounded to two decimal places, with its quality flag."""

    volume: Decimal
    quality: Quality


@dataclass
class MeterRead:
    """All volumes recorded for one NMI, keyed by date.

    Attributes:
        nmi: National Metering Identifier (10 characters).
        energy_unit: Unit every volume of this meter is expressed in.
        volumes: Date -> MeterVolume, in the order the volumes were read.
            A later volume for an already-present date replaces it.
    """

    nmi: str
    energy_unit: EnergyUnit
    volumes: dict[date, MeterVolume] = field(default_factory=dict)

    def append_volume(self, volume_date: date, volume: MeterVolume) -> None:
        self.volumes[volume_date] = volume

    @property
    def total_volume(self) -> Decimal:
        """Sum of all volumes (``Decimal("0.00")`` when there are none)."""
        return sum((v.volume for v in self.volumes.values()), Decimal("0.00"))

    @property
    def start_date(self) -> date | None:
        return min(self.volumes) if self.volumes else None

    @property
    def end_date(self) -> date | None:
        return max(self.volumes) if self.volumes else None
