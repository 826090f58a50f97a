"""
pandas views of parsed meter reads.

- to_frame(): long form, one row per (nmi, date) volume.
- summarize(): one row per meter with its date span and total volume.

Volumes stay ``Decimal`` (object dtype) so the two-decimal rounding done by
the parser is not lost to float conversion.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from simple_nem12.models import MeterRead

VOLUME_COLUMNS = ["nmi", "energy_unit", "date", "volume", "quality"]
SUMMARY_COLUMNS = ["nmi", "energy_unit", "start_date", "end_date", "days", "total_volume"]


def to_frame(meter_reads: Iterable[MeterRead]) -> pd.DataFrame:
    """Flatten meter reads into a long DataFrame.

    Rows follow meter order, then each meter's volume insertion order.
    Enum fields are stored as their string values.
    """
    rows = [
        (mr.nmi, mr.energy_unit.value, volume_date, mv.volume, mv.quality.value)
        for mr in meter_reads
        for volume_date, mv in mr.volumes.items()
    ]
    return pd.DataFrame(rows, columns=VOLUME_COLUMNS)


def summarize(meter_reads: Iterable[MeterRead]) -> pd.DataFrame:
    """One row per meter read: NMI, unit, first/last date, day count, total volume."""
    rows = [
        (
            mr.nmi,
            mr.energy_unit.value,
            mr.start_date,
            mr.end_date,
            len(mr.volumes),
            mr.total_volume,
        )
        for mr in meter_reads
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
